import sys
import warnings
from dataclasses import dataclass

import numpy as np
import pytest

from orbis_spatial import (
    GEO,
    CartesianDistCalc,
    DistanceCalculator,
    ErrorKind,
    HaversineDistCalc,
    InvalidConfigurationError,
    Rectangle,
    SpatialContext,
    SpatialContextFactory,
    VincentySphereDistCalc,
    make_spatial_context,
)


def test_default_factory_is_geodetic():
    ctx = SpatialContextFactory().new_spatial_context()
    assert ctx.geo is True
    assert ctx.dist_calc == HaversineDistCalc()
    assert ctx.world_bounds == Rectangle(-180, 180, -90, 90)
    assert ctx.norm_wrap_longitude is False


def test_planar_defaults_to_cartesian_and_max_extent(planar_ctx):
    big = sys.float_info.max
    assert planar_ctx.geo is False
    assert planar_ctx.dist_calc == CartesianDistCalc()
    assert planar_ctx.world_bounds == Rectangle(-big, big, -big, big)


def test_explicit_calculator_overrides_mode_default():
    ctx = (
        SpatialContextFactory()
        .with_geo(False)
        .with_dist_calc(VincentySphereDistCalc())
        .new_spatial_context()
    )
    assert ctx.dist_calc == VincentySphereDistCalc()


def test_world_bounds_are_rebound_to_the_new_context(planar_ctx):
    foreign = planar_ctx.make_rectangle(0, 100, 0, 50)
    ctx = SpatialContextFactory(geo=False, world_bounds=foreign).new_spatial_context()
    assert ctx.world_bounds == foreign
    assert ctx.world_bounds.ctx is ctx
    assert foreign.ctx is planar_ctx


def test_world_bounds_crossing_dateline_is_rejected():
    factory = SpatialContextFactory(world_bounds=Rectangle(170, -170, -10, 10))
    with pytest.raises(InvalidConfigurationError) as exc_info:
        factory.new_spatial_context()
    assert exc_info.value.kind is ErrorKind.INVALID_CONFIGURATION
    assert "dateline" in str(exc_info.value)


def test_world_bounds_with_inverted_y_are_rejected():
    factory = SpatialContextFactory(geo=False, world_bounds=Rectangle(0, 100, 50, 0))
    with pytest.raises(InvalidConfigurationError, match="maxY must be >= minY"):
        factory.new_spatial_context()


def test_world_bounds_with_inverted_y_are_rejected_from_settings():
    with pytest.raises(InvalidConfigurationError, match="maxY must be >= minY"):
        make_spatial_context({"geo": False, "worldBounds": "0 50 100 0"})


def test_wrap_longitude_is_forced_off_when_planar():
    ctx = SpatialContextFactory(geo=False, norm_wrap_longitude=True).new_spatial_context()
    assert ctx.norm_wrap_longitude is False
    assert ctx.norm_x(181) == 181


def test_wrap_longitude_honored_when_geo(wrap_ctx):
    assert wrap_ctx.norm_wrap_longitude is True


def test_factory_resolves_only_once():
    factory = SpatialContextFactory()
    factory.new_spatial_context()
    with pytest.raises(InvalidConfigurationError):
        factory.new_spatial_context()


def test_legacy_path_matches_builder_path():
    bounds = Rectangle(0, 10, 0, 10)
    with pytest.warns(DeprecationWarning):
        legacy = SpatialContext.from_legacy(False, None, bounds)
    built = SpatialContextFactory(geo=False, world_bounds=bounds).new_spatial_context()
    assert legacy == built
    assert legacy.world_bounds.ctx is legacy


def test_legacy_geo_context_equals_geo_constant():
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        legacy = SpatialContext.from_legacy(True)
    assert legacy == GEO
    assert repr(legacy) == "SpatialContext.GEO"


def test_repr_of_planar_context(planar_ctx):
    text = repr(planar_ctx)
    assert text.startswith("SpatialContext{geo=False")
    assert "CartesianDistCalc" in text


def test_context_is_immutable():
    with pytest.raises(AttributeError):
        GEO.geo = False
    with pytest.raises(AttributeError):
        GEO._world_bounds = None
    assert GEO.geo is True


def test_from_dict_reads_all_settings():
    ctx = make_spatial_context({
        "geo": "false",
        "distCalculator": "cartesian^2",
        "worldBounds": "-100 -50 100 50",
        "normWrapLongitude": "true",
    })
    assert ctx.geo is False
    assert ctx.dist_calc == CartesianDistCalc(squared=True)
    assert ctx.world_bounds == Rectangle(-100, 100, -50, 50)
    assert ctx.norm_wrap_longitude is False


def test_from_dict_accepts_snake_case_and_sequences():
    factory = SpatialContextFactory.from_dict({
        "dist_calculator": "vincentySphere",
        "world_bounds": [-10, -20, 10, 20],
        "norm_wrap_longitude": True,
    })
    ctx = factory.new_spatial_context()
    assert ctx.dist_calc == VincentySphereDistCalc()
    assert ctx.world_bounds == Rectangle(-10, 10, -20, 20)
    assert ctx.norm_wrap_longitude is True


@pytest.mark.parametrize("args", [
    {"distCalculator": "manhattan"},
    {"worldBounds": "1 2 3"},
    {"worldBounds": "a b c d"},
    {"geo": "maybe"},
    {"units": "km"},
])
def test_from_dict_rejects_bad_settings(args):
    with pytest.raises(InvalidConfigurationError):
        SpatialContextFactory.from_dict(args)


def test_from_yaml(tmp_path):
    config = tmp_path / "context.yaml"
    config.write_text(
        "geo: true\n"
        "distCalculator: lawOfCosines\n"
        "normWrapLongitude: true\n"
    )
    ctx = SpatialContextFactory.from_yaml(config).new_spatial_context()
    assert ctx.geo is True
    assert type(ctx.dist_calc).__name__ == "LawOfCosinesDistCalc"
    assert ctx.norm_x(190) == -170


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpatialContextFactory.from_yaml(tmp_path / "nope.yaml")


def test_from_yaml_rejects_non_mapping(tmp_path):
    config = tmp_path / "context.yaml"
    config.write_text("- geo\n- true\n")
    with pytest.raises(InvalidConfigurationError):
        SpatialContextFactory.from_yaml(config)


def test_calc_distance_delegates_to_calculator(planar_ctx):
    p = planar_ctx.make_point(0, 0)
    assert planar_ctx.calc_distance(p, 3, 4) == 5.0
    assert planar_ctx.calc_distance(p, planar_ctx.make_point(3, 4)) == 5.0
    with pytest.raises(TypeError):
        planar_ctx.calc_distance(p, 1, 2, 3)


def test_context_with_unhashable_calculator_is_hashable():
    @dataclass
    class ManhattanDistCalc(DistanceCalculator):
        scale: float = 1.0

        def distance_xy(self, from_point, x, y):
            return self.scale * (abs(from_point.x - x) + abs(from_point.y - y))

        def distances(self, from_point, xs, ys):
            return self.scale * (np.abs(from_point.x - xs) + np.abs(from_point.y - ys))

    ctx = SpatialContextFactory(geo=False, dist_calc=ManhattanDistCalc()).new_spatial_context()
    other = SpatialContextFactory(geo=False, dist_calc=ManhattanDistCalc(2.0)).new_spatial_context()
    assert hash(ctx) == hash(other)
    assert ctx != other
    assert len({ctx, other}) == 2
    assert ctx.calc_distance(ctx.make_point(0, 0), 3, 4) == 7
