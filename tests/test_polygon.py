import math

import pytest

from mobagen.point2d import Point2D
from mobagen.polygon import Polygon, circle, hexagon, square
from mobagen.transform import Transform
from mobagen.vector2 import Vector2


def upright(**kwargs):
    return Transform(rotation=Vector2.up(), **kwargs)


def test_square_points_on_unit_circle():
    shape = square()
    assert len(shape.points) == 4
    assert all(math.isclose(p.magnitude(), 1.0) for p in shape.points)


def test_hexagon_starts_up():
    shape = hexagon()
    assert len(shape.points) == 6
    assert shape.points[0] == Vector2.up()
    assert all(math.isclose(p.magnitude(), 1.0) for p in shape.points)


@pytest.mark.parametrize("sample", [3, 8, 20])
def test_circle_samples(sample):
    shape = circle(sample)
    assert len(shape.points) == sample
    assert shape.points[0] == Vector2.up()
    assert all(math.isclose(p.magnitude(), 1.0) for p in shape.points)


def test_identity_transform_keeps_points():
    shape = hexagon()
    assert shape.drawable_points(upright()) == shape.points


def test_default_rotation_points_down():
    shape = square()
    placed = shape.drawable_points(Transform())
    assert placed == [-p for p in shape.points]


def test_scale_and_translation():
    shape = circle(6)
    offset = Vector2(10, 20)
    placed = shape.drawable_points(upright(position=offset, scale=Vector2(2, 2)))
    assert all(math.isclose((p - offset).magnitude(), 2.0) for p in placed)


def test_edges_close_loop():
    shape = hexagon()
    edges = shape.edges(upright(position=Vector2(100, 100), scale=Vector2(10, 10)))
    assert len(edges) == len(shape.points)
    assert edges[-1][1] == edges[0][0]
    for (_, end), (start, _) in zip(edges, edges[1:]):
        assert end == start


def test_edges_truncate_toward_zero():
    shape = Polygon([Vector2(1.7, -1.7)])
    edges = shape.edges(upright())
    assert edges == [(Point2D(1, -1), Point2D(1, -1))]


def test_empty_polygon_has_no_edges():
    assert Polygon().edges(upright()) == []