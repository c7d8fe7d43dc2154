"""
Spatial Errors
==============

Bounded Context: Input validation failures.

Two closed error kinds:
- INVALID_SHAPE: a coordinate or shape parameter breaks a bounds or
  ordering invariant (raised by every shape factory)
- INVALID_CONFIGURATION: a context cannot be resolved from its factory

NaN coordinates are never reported as INVALID_SHAPE.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of validation failure kinds."""
    INVALID_SHAPE = "invalid_shape"
    INVALID_CONFIGURATION = "invalid_configuration"


class SpatialError(Exception):
    """Base class for all spatial validation failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidShapeError(SpatialError, ValueError):
    """Raised when a shape would violate a bounds/ordering invariant."""
    kind = ErrorKind.INVALID_SHAPE


class InvalidConfigurationError(SpatialError, ValueError):
    """Raised once, while resolving a SpatialContext from its factory."""
    kind = ErrorKind.INVALID_CONFIGURATION
