"""
Buffered Line String
====================

Ordered sequence of connected vertices with an optional buffer distance
along the line in all directions. A zero buffer is a plain line string.

Design:
- Immutable (frozen dataclass, points kept as a tuple)
- Read-only Nx2 vertex array built once at init
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from orbis_spatial.exceptions import InvalidShapeError
from orbis_spatial.shapes.base import Shape
from orbis_spatial.shapes.point import Point

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext


@dataclass(frozen=True)
class BufferedLineString(Shape):
    """
    Attributes:
        points: Vertices in order
        buf: Buffer distance (>= 0), same units as the coordinates
        geo: Whether the buffer follows geodetic (spherical) rules
    """

    points: Tuple[Point, ...]
    buf: float = 0.0
    geo: bool = False
    ctx: Optional["SpatialContext"] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Freeze the vertex sequence and validate the buffer."""
        object.__setattr__(self, 'points', tuple(self.points))

        if self.buf < 0:
            raise InvalidShapeError(f"buf must be >= 0; got {self.buf}")

        vertices = np.array(
            [(p.x, p.y) for p in self.points], dtype=float
        ).reshape(-1, 2)
        vertices.flags.writeable = False
        object.__setattr__(self, '_vertices', vertices)

    @property
    def vertices(self) -> np.ndarray:
        """Nx2 read-only array of (x, y) vertices."""
        return self._vertices

    def __len__(self) -> int:
        return len(self.points)
