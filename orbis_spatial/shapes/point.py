"""Point value type."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from orbis_spatial.shapes.base import Shape

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext


@dataclass(frozen=True)
class Point(Shape):
    """
    Immutable 2D point.

    In geodetic contexts x is longitude and y is latitude, in degrees.
    Build through SpatialContext.make_point so the coordinates are checked
    against the world bounds.
    """

    x: float
    y: float
    ctx: Optional["SpatialContext"] = field(default=None, compare=False, repr=False)
