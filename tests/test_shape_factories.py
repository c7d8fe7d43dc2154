import dataclasses

import pytest

from orbis_spatial import (
    GEO,
    BufferedLineString,
    Circle,
    GeoCircle,
    InvalidShapeError,
    Point,
    Rectangle,
    ShapeCollection,
)


def test_make_point_binds_context():
    point = GEO.make_point(-73.99, 40.73)
    assert point == Point(-73.99, 40.73)
    assert point.ctx is GEO


def test_shapes_are_frozen():
    point = GEO.make_point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 3


# ========== Rectangles ==========

def test_geo_rectangle_may_cross_dateline():
    rect = GEO.make_rectangle(170, -170, -10, 10)
    assert rect.crosses_dateline
    assert rect.width == 20
    assert rect.center.x == 180


def test_geo_rectangle_min_edge_on_dateline_is_flipped():
    rect = GEO.make_rectangle(180, -170, -10, 10)
    assert rect.min_x == -180
    assert rect.max_x == -170
    assert not rect.crosses_dateline


def test_geo_rectangle_max_edge_on_dateline_is_flipped():
    rect = GEO.make_rectangle(170, -180, -10, 10)
    assert (rect.min_x, rect.max_x) == (170, 180)
    assert not rect.crosses_dateline


@pytest.mark.parametrize("min_x, max_x", [(180, 180), (-180, -180), (-180, 180)])
def test_geo_rectangle_without_flip(min_x, max_x):
    rect = GEO.make_rectangle(min_x, max_x, 0, 1)
    assert (rect.min_x, rect.max_x) == (min_x, max_x)


def test_geo_rectangle_x_out_of_bounds():
    with pytest.raises(InvalidShapeError):
        GEO.make_rectangle(-190, 10, 0, 1)


def test_rectangle_y_rules():
    with pytest.raises(InvalidShapeError, match="not in boundary"):
        GEO.make_rectangle(0, 1, -91, 0)
    with pytest.raises(InvalidShapeError, match="maxY must be >= minY"):
        GEO.make_rectangle(0, 1, 10, 5)


def test_planar_rectangle_requires_ordered_x(planar_ctx):
    with pytest.raises(InvalidShapeError, match="maxX must be >= minX"):
        planar_ctx.make_rectangle(10, 5, -10, 10)


def test_planar_rectangle(planar_ctx):
    rect = planar_ctx.make_rectangle(-500, 500, 0, 10)
    assert rect == Rectangle(-500, 500, 0, 10)
    assert rect.width == 1000
    assert rect.height == 10
    assert rect.center == Point(0, 5)


def test_make_rectangle_from_corners():
    rect = GEO.make_rectangle(GEO.make_point(-10, -5), GEO.make_point(10, 5))
    assert rect == Rectangle(-10, 10, -5, 5)
    assert rect.ctx is GEO


def test_make_rectangle_bad_arity():
    with pytest.raises(TypeError):
        GEO.make_rectangle(1, 2, 3)


def test_make_rectangle_two_numbers_is_a_type_error():
    with pytest.raises(TypeError, match="corner points"):
        GEO.make_rectangle(1, 2)


# ========== Circles ==========

def test_geo_circle_radius_clamped_to_hemisphere():
    circle = GEO.make_circle(GEO.make_point(0, 0), 200)
    assert isinstance(circle, GeoCircle)
    assert circle.radius == 180


def test_planar_circle_not_clamped(planar_ctx):
    circle = planar_ctx.make_circle(planar_ctx.make_point(0, 0), 200)
    assert type(circle) is Circle
    assert circle.radius == 200


def test_negative_radius_rejected(planar_ctx):
    for ctx in (GEO, planar_ctx):
        with pytest.raises(InvalidShapeError, match="distance must be >= 0"):
            ctx.make_circle(ctx.make_point(0, 0), -1)


def test_make_circle_from_coordinates_validates_center():
    circle = GEO.make_circle(10, 20, 5)
    assert circle.center == Point(10, 20)
    with pytest.raises(InvalidShapeError):
        GEO.make_circle(10, 95, 5)


# ========== Line strings ==========

def test_line_string_has_no_buffer_and_is_not_geo():
    points = [GEO.make_point(0, 0), GEO.make_point(10, 10), GEO.make_point(20, 0)]
    line = GEO.make_line_string(points)
    assert isinstance(line, BufferedLineString)
    assert line.buf == 0
    assert line.geo is False
    assert line.points == tuple(points)
    assert len(line) == 3


def test_line_string_vertices_are_read_only():
    line = GEO.make_line_string([GEO.make_point(0, 0), GEO.make_point(10, 10)])
    assert line.vertices.shape == (2, 2)
    assert line.vertices.tolist() == [[0.0, 0.0], [10.0, 10.0]]
    assert not line.vertices.flags.writeable


def test_empty_line_string():
    line = GEO.make_line_string([])
    assert line.vertices.shape == (0, 2)


def test_buffered_line_string_follows_context_mode(planar_ctx):
    geo_line = GEO.make_buffered_line_string([GEO.make_point(0, 0)], 2.5)
    assert geo_line.geo is True
    assert geo_line.buf == 2.5
    flat_line = planar_ctx.make_buffered_line_string([planar_ctx.make_point(0, 0)], 2.5)
    assert flat_line.geo is False


def test_negative_buffer_rejected():
    with pytest.raises(InvalidShapeError):
        GEO.make_buffered_line_string([GEO.make_point(0, 0)], -1)


# ========== Collections ==========

def test_collection_keeps_order():
    shapes = [GEO.make_point(1, 1), GEO.make_rectangle(0, 1, 0, 1), GEO.make_point(2, 2)]
    coll = GEO.make_collection(shapes)
    assert isinstance(coll, ShapeCollection)
    assert list(coll) == shapes
    assert coll[1] == Rectangle(0, 1, 0, 1)
    assert len(coll) == 3
    assert coll.ctx is GEO


def test_collection_element_type_must_be_uniform():
    points = [GEO.make_point(1, 1), GEO.make_point(2, 2)]
    assert len(GEO.make_collection(points, Point)) == 2
    with pytest.raises(InvalidShapeError, match="expected Point"):
        GEO.make_collection(points + [GEO.make_rectangle(0, 1, 0, 1)], Point)
