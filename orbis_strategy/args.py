"""
Spatial Args
============

A spatial operation plus its query shape, and the parser for their text
form:

    Intersects(-10 -20 10 20)
    IsWithin(Circle(0 0 d=10)) distErrPct=0.025

The shape inside the parentheses uses the context's shape read/writer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from orbis_spatial.shapes.base import Shape

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext


class SpatialOperation(str, Enum):
    """Spatial predicate a query applies to indexed shapes."""
    BBOX_INTERSECTS = "BBoxIntersects"
    BBOX_WITHIN = "BBoxWithin"
    CONTAINS = "Contains"
    INTERSECTS = "Intersects"
    IS_EQUAL_TO = "IsEqualTo"
    IS_DISJOINT_TO = "IsDisjointTo"
    IS_WITHIN = "IsWithin"
    OVERLAPS = "Overlaps"
    SIMILAR_TO = "SimilarTo"

    @classmethod
    def get(cls, name: str) -> "SpatialOperation":
        """Look up an operation by name, ignoring case."""
        lowered = name.strip().lower()
        for op in cls:
            if op.value.lower() == lowered:
                return op
        raise ValueError(
            f"Unknown spatial operation: {name!r}. "
            f"Must be one of {[op.value for op in cls]}"
        )


@dataclass(frozen=True)
class SpatialArgs:
    """
    Attributes:
        operation: Spatial predicate
        shape: Query shape
        dist_err_pct: Allowed error as a fraction of the shape size, [0, 0.5]
    """
    operation: SpatialOperation
    shape: Shape
    dist_err_pct: Optional[float] = None

    def __post_init__(self):
        if self.dist_err_pct is not None and not 0.0 <= self.dist_err_pct <= 0.5:
            raise ValueError(
                f"distErrPct must be in [0, 0.5], got {self.dist_err_pct}"
            )


class SpatialArgsParser:
    """Parses ``Operation(shape) [key=value ...]`` into SpatialArgs."""

    def parse(self, text: str, ctx: "SpatialContext") -> SpatialArgs:
        """
        Raises:
            ValueError: On malformed text, unknown operations or options
            InvalidShapeError: If the shape itself is invalid
        """
        open_idx = text.find("(")
        close_idx = text.rfind(")")
        if open_idx <= 0 or close_idx < open_idx:
            raise ValueError(f"Expected 'Operation(shape)': {text!r}")

        operation = SpatialOperation.get(text[:open_idx])
        shape = ctx.shape_read_writer.read_shape(text[open_idx + 1:close_idx])

        dist_err_pct = None
        for option in text[close_idx + 1:].split():
            key, sep, value = option.partition("=")
            if not sep:
                raise ValueError(f"Expected key=value option, got {option!r} in {text!r}")
            if key == "distErrPct":
                dist_err_pct = float(value)
            else:
                raise ValueError(f"Unknown spatial args option {key!r} in {text!r}")

        return SpatialArgs(operation, shape, dist_err_pct)
