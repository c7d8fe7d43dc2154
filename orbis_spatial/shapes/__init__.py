"""
Shape Layer
===========

Bounded Context: Immutable shape values.

Responsibilities:
- Shape representation (frozen dataclasses)
- Back-reference to the owning SpatialContext
- NO relation testing, NO parsing, NO indexing

Shapes are created through SpatialContext factory methods, which enforce
the bounds and ordering invariants before construction.
"""

from orbis_spatial.shapes.base import Shape
from orbis_spatial.shapes.point import Point
from orbis_spatial.shapes.rectangle import Rectangle
from orbis_spatial.shapes.circle import Circle, GeoCircle
from orbis_spatial.shapes.linestring import BufferedLineString
from orbis_spatial.shapes.collection import ShapeCollection

__all__ = [
    "Shape",
    "Point",
    "Rectangle",
    "Circle",
    "GeoCircle",
    "BufferedLineString",
    "ShapeCollection",
]
