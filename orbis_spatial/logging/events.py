"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>[.<action>]

    component: context, shape, codec, oracle
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - context.*: SpatialContext resolution and configuration
    - shape.*: Shape factory outcomes
    - codec.*: Legacy textual shape codec
    - oracle.*: Query/result test oracle
    """

    # ========== Context Events ==========
    CONTEXT_CREATED = "context.created"
    """SpatialContext resolved from a factory."""

    CONTEXT_CONFIG_LOADED = "context.config_loaded"
    """Factory settings loaded from a mapping or YAML file."""

    CONTEXT_CONFIG_REJECTED = "context.config_rejected"
    """Factory settings could not be resolved."""

    CONTEXT_LEGACY_API = "context.legacy_api"
    """A deprecated entry point was used."""

    # ========== Shape Events ==========
    SHAPE_REJECTED = "shape.rejected"
    """A shape factory call failed validation."""

    SHAPE_RADIUS_CLAMPED = "shape.radius_clamped"
    """A geodetic circle radius was clamped to a hemisphere."""

    # ========== Codec Events ==========
    CODEC_PARSE_FAILED = "codec.parse_failed"
    """Legacy shape text could not be parsed."""

    # ========== Oracle Events ==========
    ORACLE_SAMPLE_DATA_LOADED = "oracle.sample_data_loaded"
    """Sample documents read and indexed."""

    ORACLE_QUERY_EXECUTED = "oracle.query_executed"
    """A test query ran and its results were checked."""

    ORACLE_QUERY_MISMATCH = "oracle.query_mismatch"
    """A test query's results did not satisfy the match concern."""
