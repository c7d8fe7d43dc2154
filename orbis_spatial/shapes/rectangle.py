"""
Rectangle value type.

In geodetic contexts ``min_x > max_x`` is a valid encoding of a rectangle
spanning the dateline (antimeridian), e.g. min_x=170, max_x=-170 covers
20 degrees of longitude.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from orbis_spatial.shapes.base import Shape
from orbis_spatial.shapes.point import Point

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    Immutable axis-aligned rectangle.

    Attributes:
        min_x, max_x: Horizontal extent (may cross the dateline when geo)
        min_y, max_y: Vertical extent, min_y <= max_y
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    ctx: Optional["SpatialContext"] = field(default=None, compare=False, repr=False)

    @property
    def crosses_dateline(self) -> bool:
        return self.min_x > self.max_x

    @property
    def width(self) -> float:
        w = self.max_x - self.min_x
        if w < 0:
            w += 360
        return w

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        y = (self.min_y + self.max_y) / 2
        if not self.crosses_dateline:
            return Point((self.min_x + self.max_x) / 2, y, self.ctx)
        x = self.min_x + self.width / 2
        if x > 180:
            x -= 360
        return Point(x, y, self.ctx)

    def bind(self, ctx: "SpatialContext") -> "Rectangle":
        """Copy of this rectangle owned by ``ctx``."""
        return dataclasses.replace(self, ctx=ctx)

    def __str__(self) -> str:
        return (
            f"Rect(minX={self.min_x},maxX={self.max_x},"
            f"minY={self.min_y},maxY={self.max_y})"
        )
