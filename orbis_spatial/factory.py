"""
Spatial Context Factory
=======================

Mutable, single-use holder of the settings a SpatialContext is resolved
from. Nothing is validated until new_spatial_context() is called.

Design:
- Builder pattern: fluent with_* setters, plain attributes also work
- Fail fast: every problem surfaces at resolution time, never later
- Single use: a factory resolves exactly one context
- Loadable from a mapping or a YAML file (same keys)

Example YAML:
    geo: true
    distCalculator: haversine       # lawOfCosines, vincentySphere, cartesian, cartesian^2
    worldBounds: "-180 -90 180 90"  # minX minY maxX maxY
    normWrapLongitude: true
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Sequence, Union

import yaml

from orbis_spatial.distance.calculators import CALCULATORS_BY_NAME, DistanceCalculator
from orbis_spatial.exceptions import InvalidConfigurationError
from orbis_spatial.logging import LogEvent, create_logger
from orbis_spatial.shapes.rectangle import Rectangle

if TYPE_CHECKING:
    from orbis_io.base import ShapeReadWriter
    from orbis_spatial.context import SpatialContext

_logger = create_logger("context")

# Accepted spellings for each setting -> attribute name
_KEY_ALIASES = {
    "geo": "geo",
    "distCalculator": "dist_calc",
    "dist_calculator": "dist_calc",
    "worldBounds": "world_bounds",
    "world_bounds": "world_bounds",
    "normWrapLongitude": "norm_wrap_longitude",
    "norm_wrap_longitude": "norm_wrap_longitude",
}


@dataclass
class SpatialContextFactory:
    """
    Settings for a SpatialContext.

    Attributes:
        geo: Geodetic (degrees on a sphere) vs planar. Defaults to geodetic.
        dist_calc: Explicit calculator; None picks one from ``geo``
        world_bounds: Explicit world bounds; None picks them from ``geo``
        norm_wrap_longitude: Wrap out-of-range longitudes (geo only)
        shape_read_writer_cls: Legacy codec constructor, called with the
            new context; None uses the standard legacy codec

    Usage:
        ctx = (
            SpatialContextFactory()
            .with_geo(False)
            .with_world_bounds(Rectangle(0, 1000, 0, 1000))
            .new_spatial_context()
        )

    Thread Safety:
        Not thread-safe. Configure and resolve on one thread.
    """

    geo: bool = True
    dist_calc: Optional[DistanceCalculator] = None
    world_bounds: Optional[Rectangle] = None
    norm_wrap_longitude: bool = False
    shape_read_writer_cls: Optional[Callable[["SpatialContext"], "ShapeReadWriter"]] = None
    _consumed: bool = field(default=False, init=False, repr=False)

    def with_geo(self, geo: bool) -> "SpatialContextFactory":
        """Set geodetic (True) or planar (False) mode."""
        self.geo = geo
        return self

    def with_dist_calc(self, calculator: DistanceCalculator) -> "SpatialContextFactory":
        """Override the distance calculator."""
        self.dist_calc = calculator
        return self

    def with_world_bounds(self, bounds: Rectangle) -> "SpatialContextFactory":
        """Override the world bounds. Must not cross the dateline."""
        self.world_bounds = bounds
        return self

    def with_norm_wrap_longitude(self, wrap: bool) -> "SpatialContextFactory":
        """Wrap longitudes outside [-180, 180] (ignored when planar)."""
        self.norm_wrap_longitude = wrap
        return self

    def with_shape_read_writer(
        self, read_writer_cls: Callable[["SpatialContext"], "ShapeReadWriter"]
    ) -> "SpatialContextFactory":
        """Set the legacy textual codec constructor."""
        self.shape_read_writer_cls = read_writer_cls
        return self

    def new_spatial_context(self) -> "SpatialContext":
        """
        Resolve these settings into an immutable SpatialContext.

        Raises:
            InvalidConfigurationError: If the world bounds cross the
                dateline, or this factory was already resolved
        """
        from orbis_spatial.context import SpatialContext

        if self._consumed:
            raise InvalidConfigurationError(
                "SpatialContextFactory was already resolved; create a new one"
            )
        self._consumed = True
        return SpatialContext(self)

    @classmethod
    def from_dict(cls, args: Mapping[str, Any]) -> "SpatialContextFactory":
        """
        Build a factory from a settings mapping.

        Keys may be camelCase (``distCalculator``) or snake_case
        (``dist_calculator``). Values may be strings, as found in
        properties-style configuration.

        Raises:
            InvalidConfigurationError: On unknown keys, unknown calculator
                names or malformed world bounds
        """
        factory = cls()
        for key, value in args.items():
            attr = _KEY_ALIASES.get(key)
            if attr is None:
                _logger.warning(
                    event=LogEvent.CONTEXT_CONFIG_REJECTED,
                    message="Unknown spatial context setting",
                    metadata={'key': key}
                )
                raise InvalidConfigurationError(
                    f"Unknown spatial context setting: {key!r}. "
                    f"Valid keys: {', '.join(sorted(_KEY_ALIASES))}"
                )
            setattr(factory, attr, value)

        # Parse after all keys are known
        factory.geo = _parse_bool("geo", factory.geo)
        factory.norm_wrap_longitude = _parse_bool(
            "normWrapLongitude", factory.norm_wrap_longitude
        )
        if isinstance(factory.dist_calc, str):
            factory.dist_calc = _parse_calculator(factory.dist_calc)
        if factory.world_bounds is not None and not isinstance(factory.world_bounds, Rectangle):
            factory.world_bounds = _parse_world_bounds(factory.world_bounds)

        _logger.debug(
            event=LogEvent.CONTEXT_CONFIG_LOADED,
            message="Loaded spatial context settings",
            metadata={'keys': sorted(args)}
        )
        return factory

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "SpatialContextFactory":
        """
        Load settings from a YAML file (see module docstring).

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidConfigurationError: If the YAML is invalid or not a mapping
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Spatial context config not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(f"Invalid YAML in {yaml_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Spatial context config must be a mapping, got {type(data).__name__}"
            )

        factory = cls.from_dict(data)
        _logger.info(
            event=LogEvent.CONTEXT_CONFIG_LOADED,
            message="Loaded spatial context config file",
            metadata={'path': str(path)}
        )
        return factory


def make_spatial_context(args: Mapping[str, Any]) -> "SpatialContext":
    """Resolve a SpatialContext straight from a settings mapping."""
    return SpatialContextFactory.from_dict(args).new_spatial_context()


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise InvalidConfigurationError(f"{name} must be a boolean, got {value!r}")


def _parse_calculator(name: str) -> DistanceCalculator:
    try:
        return CALCULATORS_BY_NAME[name]()
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown distCalculator: {name!r}. "
            f"Must be one of {sorted(CALCULATORS_BY_NAME)}"
        ) from None


def _parse_world_bounds(value: Union[str, Sequence[Any]]) -> Rectangle:
    """Parse ``"minX minY maxX maxY"`` (or a 4-sequence in that order)."""
    parts = value.split() if isinstance(value, str) else list(value)
    if len(parts) != 4:
        raise InvalidConfigurationError(
            f"worldBounds must have 4 values (minX minY maxX maxY), got {value!r}"
        )
    try:
        min_x, min_y, max_x, max_y = (float(p) for p in parts)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Invalid worldBounds {value!r}: {e}") from e
    return Rectangle(min_x, max_x, min_y, max_y)


