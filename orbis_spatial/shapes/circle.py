"""Circle value types (planar and geodetic)."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from orbis_spatial.shapes.base import Shape
from orbis_spatial.shapes.point import Point

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext


@dataclass(frozen=True)
class Circle(Shape):
    """
    Immutable circle.

    The radius is in the same units as the center coordinates: native
    units for planar contexts, degrees of arc for geodetic ones.
    """

    center: Point
    radius: float
    ctx: Optional["SpatialContext"] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class GeoCircle(Circle):
    """
    Circle on the sphere. The radius never exceeds 180 degrees (a full
    hemisphere around the center).
    """
