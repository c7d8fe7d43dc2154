"""
Spatial Context
===============

Bounded Context: Coordinate system rules and shape construction.

The SpatialContext holds the distance calculator, the world bounds and the
longitude-wrap setting, and is the factory for every shape. Shapes built
here are guaranteed valid, so downstream code never re-checks them.

Design:
- Resolved once from a SpatialContextFactory, immutable afterwards
- Thread-safe (no mutable state after __init__)
- Fail fast: invalid input raises InvalidShapeError, nothing is half-built
- NaN coordinates pass every bounds check

Usage:
    from orbis_spatial import GEO

    rect = GEO.make_rectangle(170, -170, -10, 10)   # crosses the dateline
    circle = GEO.make_circle(GEO.make_point(0, 0), 10)
    GEO.calc_distance(circle.center, 10, 0)         # 10.0 (degrees)
"""

import sys
import warnings
from functools import cached_property
from typing import TYPE_CHECKING, Optional, Sequence, Type, TypeVar, Union

from orbis_spatial.distance.calculators import (
    CartesianDistCalc,
    DistanceCalculator,
    HaversineDistCalc,
)
from orbis_spatial.distance.utils import norm_lon_deg
from orbis_spatial.exceptions import InvalidConfigurationError, InvalidShapeError
from orbis_spatial.factory import SpatialContextFactory
from orbis_spatial.logging import LogEvent, create_logger
from orbis_spatial.shapes import (
    BufferedLineString,
    Circle,
    GeoCircle,
    Point,
    Rectangle,
    Shape,
    ShapeCollection,
)

if TYPE_CHECKING:
    from orbis_io.base import ShapeReadWriter

S = TypeVar("S", bound=Shape)

_logger = create_logger("context")

_MAX = sys.float_info.max


class SpatialContext:
    """
    Immutable coordinate-system facade and shape factory.

    Attributes (read-only):
        geo: Geodetic (lon/lat degrees on a sphere) or planar
        dist_calc: Distance calculator
        world_bounds: Extent every coordinate must fall within; never
            crosses the dateline
        norm_wrap_longitude: Whether norm_x wraps longitudes (geo only)

    For a typical geodetic context use the module constant ``GEO``.
    Otherwise configure a SpatialContextFactory and call
    ``new_spatial_context()``.
    """

    def __init__(self, factory: SpatialContextFactory):
        """
        Resolve a context from factory settings.

        Raises:
            InvalidConfigurationError: If the world bounds cross the dateline
        """
        geo = bool(factory.geo)
        object.__setattr__(self, '_geo', geo)

        if factory.dist_calc is None:
            calculator = HaversineDistCalc() if geo else CartesianDistCalc()
        else:
            calculator = factory.dist_calc
        object.__setattr__(self, '_dist_calc', calculator)

        if factory.world_bounds is None:
            if geo:
                world_bounds = Rectangle(-180.0, 180.0, -90.0, 90.0, self)
            else:
                world_bounds = Rectangle(-_MAX, _MAX, -_MAX, _MAX, self)
        else:
            if factory.world_bounds.crosses_dateline:
                _logger.warning(
                    event=LogEvent.CONTEXT_CONFIG_REJECTED,
                    message="World bounds cross the dateline",
                    metadata={'world_bounds': str(factory.world_bounds)}
                )
                raise InvalidConfigurationError(
                    f"worldBounds shouldn't cross dateline: {factory.world_bounds}"
                )
            if factory.world_bounds.min_y > factory.world_bounds.max_y:
                _logger.warning(
                    event=LogEvent.CONTEXT_CONFIG_REJECTED,
                    message="World bounds have maxY < minY",
                    metadata={'world_bounds': str(factory.world_bounds)}
                )
                raise InvalidConfigurationError(
                    f"worldBounds maxY must be >= minY: {factory.world_bounds}"
                )
            # never keep a rectangle owned by another context
            world_bounds = factory.world_bounds.bind(self)
        object.__setattr__(self, '_world_bounds', world_bounds)

        object.__setattr__(
            self, '_norm_wrap_longitude', bool(factory.norm_wrap_longitude) and geo
        )
        object.__setattr__(self, '_read_writer_cls', factory.shape_read_writer_cls)

        _logger.debug(
            event=LogEvent.CONTEXT_CREATED,
            message="Resolved spatial context",
            metadata={
                'geo': geo,
                'calculator': str(calculator),
                'world_bounds': str(world_bounds),
                'norm_wrap_longitude': self._norm_wrap_longitude,
            }
        )

    @classmethod
    def from_legacy(
        cls,
        geo: bool,
        calculator: Optional[DistanceCalculator] = None,
        world_bounds: Optional[Rectangle] = None,
    ) -> "SpatialContext":
        """
        Deprecated flat-argument constructor. Use SpatialContextFactory.

        Produces exactly the context the equivalent factory would.
        """
        warnings.warn(
            "SpatialContext.from_legacy is deprecated; use SpatialContextFactory",
            DeprecationWarning,
            stacklevel=2,
        )
        _logger.debug(
            event=LogEvent.CONTEXT_LEGACY_API,
            message="Legacy context constructor used",
            metadata={'geo': geo}
        )
        factory = SpatialContextFactory(
            geo=geo, dist_calc=calculator, world_bounds=world_bounds
        )
        return factory.new_spatial_context()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ========== Accessors ==========

    @property
    def geo(self) -> bool:
        """Is this a geospatial context (True) or simply 2D planar (False)."""
        return self._geo

    @property
    def dist_calc(self) -> DistanceCalculator:
        return self._dist_calc

    @property
    def world_bounds(self) -> Rectangle:
        return self._world_bounds

    @property
    def norm_wrap_longitude(self) -> bool:
        """If True, norm_x wraps longitudes: 181 becomes -179."""
        return self._norm_wrap_longitude

    def calc_distance(self, p: Point, *args: Union[Point, float]) -> float:
        """
        Distance from ``p`` using this context's calculator.

        Call as ``calc_distance(p, p2)`` or ``calc_distance(p, x, y)``.
        """
        if len(args) == 1:
            return self._dist_calc.distance(p, args[0])
        if len(args) == 2:
            return self._dist_calc.distance_xy(p, args[0], args[1])
        raise TypeError(
            f"calc_distance() takes a Point or x, y after p ({len(args)} given)"
        )

    # ========== Normalization & Validation ==========

    def norm_x(self, x: float) -> float:
        """
        Normalize the x dimension. Wraps it into [-180, 180) when longitude
        wrapping is on, otherwise returns it unchanged.
        """
        if self._norm_wrap_longitude:
            x = norm_lon_deg(x)
        return x

    def norm_y(self, y: float) -> float:
        """Normalize the y dimension (identity)."""
        return y

    def verify_x(self, x: float) -> None:
        """Ensure x fits in the world bounds."""
        bounds = self._world_bounds
        if x < bounds.min_x or x > bounds.max_x:  # NaN will pass
            raise self._reject(f"Bad X value {x} is not in boundary {bounds}")

    def verify_y(self, y: float) -> None:
        """Ensure y fits in the world bounds."""
        bounds = self._world_bounds
        if y < bounds.min_y or y > bounds.max_y:  # NaN will pass
            raise self._reject(f"Bad Y value {y} is not in boundary {bounds}")

    def _reject(self, message: str) -> InvalidShapeError:
        _logger.debug(
            event=LogEvent.SHAPE_REJECTED,
            message=message,
            metadata={'geo': self._geo}
        )
        return InvalidShapeError(message)

    # ========== Shape Factories ==========

    def make_point(self, x: float, y: float) -> Point:
        """Construct a point."""
        self.verify_x(x)
        self.verify_y(y)
        return Point(x, y, self)

    def make_rectangle(self, *args: Union[Point, float]) -> Rectangle:
        """
        Construct a rectangle.

        Call as ``make_rectangle(min_x, max_x, min_y, max_y)`` or
        ``make_rectangle(lower_left, upper_right)``.

        When geo, min_x > max_x means the rectangle crosses the dateline.
        If just one longitude sits on the dateline (+/-180) its sign is
        adjusted so the rectangle does not cross it.
        """
        if len(args) == 2:
            lower_left, upper_right = args
            if not (isinstance(lower_left, Point) and isinstance(upper_right, Point)):
                raise TypeError(
                    "make_rectangle() with 2 arguments takes corner points, got "
                    f"{type(lower_left).__name__} and {type(upper_right).__name__}"
                )
            return self._make_rectangle(
                lower_left.x, upper_right.x, lower_left.y, upper_right.y
            )
        if len(args) == 4:
            return self._make_rectangle(*args)
        raise TypeError(
            f"make_rectangle() takes 2 corner points or 4 coordinates ({len(args)} given)"
        )

    def _make_rectangle(
        self, min_x: float, max_x: float, min_y: float, max_y: float
    ) -> Rectangle:
        bounds = self._world_bounds
        # Y
        if min_y < bounds.min_y or max_y > bounds.max_y:  # NaN will pass
            raise self._reject(
                f"Y values [{min_y} to {max_y}] not in boundary {bounds}"
            )
        if min_y > max_y:
            raise self._reject(f"maxY must be >= minY: {min_y} to {max_y}")
        # X
        if self._geo:
            self.verify_x(min_x)
            self.verify_x(max_x)
            # an edge touching the dateline doesn't make the rect cross it
            if min_x == 180 and min_x != max_x:
                min_x = -180.0
            elif max_x == -180 and min_x != max_x:
                max_x = 180.0
        else:
            if min_x < bounds.min_x or max_x > bounds.max_x:  # NaN will pass
                raise self._reject(
                    f"X values [{min_x} to {max_x}] not in boundary {bounds}"
                )
            if min_x > max_x:
                raise self._reject(f"maxX must be >= minX: {min_x} to {max_x}")
        return Rectangle(min_x, max_x, min_y, max_y, self)

    def make_circle(self, *args: Union[Point, float]) -> Circle:
        """
        Construct a circle. The radius is in the same units as x and y.

        Call as ``make_circle(x, y, radius)`` or ``make_circle(center, radius)``.
        Geodetic radii beyond 180 degrees are clamped to 180 (a hemisphere).
        """
        if len(args) == 3:
            x, y, radius = args
            return self._make_circle(self.make_point(x, y), radius)
        if len(args) == 2:
            center, radius = args
            return self._make_circle(center, radius)
        raise TypeError(
            f"make_circle() takes (x, y, radius) or (center, radius) ({len(args)} given)"
        )

    def _make_circle(self, center: Point, radius: float) -> Circle:
        if radius < 0:
            raise self._reject(f"distance must be >= 0; got {radius}")
        if not self._geo:
            return Circle(center, radius, self)
        if radius > 180:
            _logger.debug(
                event=LogEvent.SHAPE_RADIUS_CLAMPED,
                message="Clamped geodetic circle radius to 180 degrees",
                metadata={'radius': radius}
            )
            radius = 180.0
        return GeoCircle(center, radius, self)

    def make_line_string(self, points: Sequence[Point]) -> BufferedLineString:
        """Construct a line string: an ordered sequence of connected vertices."""
        return BufferedLineString(points, 0, False, self)

    def make_buffered_line_string(
        self, points: Sequence[Point], buf: float
    ) -> BufferedLineString:
        """
        Construct a buffered line string: connected vertices with a buffer
        distance along the line in all directions.
        """
        return BufferedLineString(points, buf, self._geo, self)

    def make_collection(
        self, shapes: Sequence[S], element_type: Type[S] = Shape
    ) -> ShapeCollection[S]:
        """Construct a ShapeCollection, analogous to an OGC GeometryCollection."""
        return ShapeCollection(shapes, element_type, self)

    # ========== Legacy Textual Codec ==========

    @cached_property
    def shape_read_writer(self) -> "ShapeReadWriter":
        """Legacy textual codec bound to this context (built on first use)."""
        read_writer_cls = self._read_writer_cls
        if read_writer_cls is None:
            from orbis_io.legacy import LegacyShapeReadWriter
            read_writer_cls = LegacyShapeReadWriter
        return read_writer_cls(self)

    def read_shape(self, value: str) -> Shape:
        """Deprecated: parse legacy shape text via the shape read/writer."""
        warnings.warn(
            "SpatialContext.read_shape is deprecated; use a ShapeReadWriter",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.shape_read_writer.read_shape(value)

    def to_string(self, shape: Shape) -> str:
        """Deprecated: format a shape as legacy text via the shape read/writer."""
        warnings.warn(
            "SpatialContext.to_string is deprecated; use a ShapeReadWriter",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.shape_read_writer.write_shape(shape)

    # ========== Value Semantics ==========

    def _key(self):
        return (self._geo, self._dist_calc, self._world_bounds, self._norm_wrap_longitude)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SpatialContext):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        # calculators need not be hashable
        return hash((self._geo, self._world_bounds, self._norm_wrap_longitude))

    def __repr__(self) -> str:
        if self == GEO:
            return f"{type(GEO).__name__}.GEO"
        return (
            f"{type(self).__name__}{{geo={self._geo}, "
            f"calculator={self._dist_calc}, "
            f"worldBounds={self._world_bounds}}}"
        )


# Popular default geodetic context
GEO = SpatialContextFactory().new_spatial_context()
