"""
Orbis Spatial v1.0
==================

Bounded Context: Geometric model for spatial search.

A SpatialContext validates, normalizes and constructs shapes consistently
for either a geodetic (spherical, degrees) or planar (Euclidean) coordinate
system. It is the single source of truth for world bounds, longitude wrap
and distance computation.

Architecture:

    orbis_spatial/
    ├── context.py         # SpatialContext (immutable facade + shape factory), GEO
    ├── factory.py         # SpatialContextFactory (mutable, single-use settings)
    ├── exceptions.py      # InvalidShapeError, InvalidConfigurationError
    ├── distance/          # DistanceCalculator contract + implementations
    ├── shapes/            # Point, Rectangle, Circle, BufferedLineString, ShapeCollection
    └── logging/           # Structured JSON logging

Usage:

    from orbis_spatial import GEO, SpatialContextFactory

    point = GEO.make_point(-73.99, 40.73)
    rect = GEO.make_rectangle(170, -170, -10, 10)   # spans the dateline

    flat = SpatialContextFactory().with_geo(False).new_spatial_context()
    flat.make_circle(10, 10, 250)                   # planar radius, unclamped
"""

from orbis_spatial.exceptions import (
    ErrorKind,
    InvalidConfigurationError,
    InvalidShapeError,
    SpatialError,
)
from orbis_spatial.distance import (
    CartesianDistCalc,
    DistanceCalculator,
    HaversineDistCalc,
    LawOfCosinesDistCalc,
    VincentySphereDistCalc,
)
from orbis_spatial.shapes import (
    BufferedLineString,
    Circle,
    GeoCircle,
    Point,
    Rectangle,
    Shape,
    ShapeCollection,
)
from orbis_spatial.factory import SpatialContextFactory, make_spatial_context
from orbis_spatial.context import GEO, SpatialContext

__all__ = [
    # Context
    "GEO",
    "SpatialContext",
    "SpatialContextFactory",
    "make_spatial_context",
    # Errors
    "ErrorKind",
    "SpatialError",
    "InvalidShapeError",
    "InvalidConfigurationError",
    # Distance
    "DistanceCalculator",
    "CartesianDistCalc",
    "HaversineDistCalc",
    "LawOfCosinesDistCalc",
    "VincentySphereDistCalc",
    # Shapes
    "Shape",
    "Point",
    "Rectangle",
    "Circle",
    "GeoCircle",
    "BufferedLineString",
    "ShapeCollection",
]

__version__ = "1.0.0"
