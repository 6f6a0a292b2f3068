"""Tests for cell transforms, the drawing session and the recording renderer."""

import numpy as np
import pytest

from identicon.geometry import Rectangle, Transform
from identicon.rendering.color import Color
from identicon.rendering.graphics import Graphics
from identicon.rendering.recorder import CirclePrimitive, PolygonPrimitive, RecordingRenderer

RED = Color.parse("#ff0000")


@pytest.mark.parametrize(
    "rotation, expected",
    [(0, (11, 20)), (1, (14, 21)), (2, (13, 24)), (3, (10, 23))],
)
def test_transform_point_quadrants(rotation, expected):
    t = Transform(10, 20, 4, rotation)
    assert t.transform_point(1, 0) == expected


def test_transform_point_with_box_size():
    t = Transform(0, 0, 10, 1)
    assert t.transform_point(1, 1, 2, 2) == (7, 1)


@pytest.mark.parametrize("rotation", [0, 1, 2, 3])
def test_transform_points_matches_scalar(rotation):
    t = Transform(5, 7, 12, rotation)
    local = [(0, 0), (3, 1), (12, 6), (2.5, 9)]
    expected = [t.transform_point(x, y) for x, y in local]
    np.testing.assert_allclose(t.transform_points(local), expected)


def test_rectangle_inset():
    assert Rectangle(0, 0, 100, 100).inset(8) == Rectangle(8, 8, 84, 84)
    assert Rectangle(0, 0, 100, 50).bottom == 50


def test_triangle_drops_requested_corner(recorder):
    g = Graphics(recorder, Transform(0, 0, 10, 0))
    with recorder.begin_shape(RED):
        g.add_triangle(0, 0, 10, 10, 0)
        g.add_triangle(0, 0, 10, 10, 3, invert=True)

    first, second = recorder.groups[0].primitives
    np.testing.assert_array_equal(first.points, [(10, 10), (0, 10), (0, 0)])
    # inverted polygons are wound backwards
    np.testing.assert_array_equal(second.points, [(0, 10), (10, 10), (10, 0)])
    assert second.invert


def test_circle_keeps_top_left_after_rotation(recorder):
    g = Graphics(recorder, Transform(0, 0, 10, 1))
    with recorder.begin_shape(RED):
        g.add_circle(1, 1, 2)
    prim = recorder.groups[0].primitives[0]
    assert isinstance(prim, CirclePrimitive)
    assert (prim.x, prim.y, prim.diameter) == (7, 1, 2)
    assert prim.center == (8, 2)


def test_rhombus_and_rectangle(recorder):
    g = Graphics(recorder, Transform(0, 0, 8, 0))
    with recorder.begin_shape(RED):
        g.add_rhombus(0, 0, 8, 8)
        g.add_rectangle(0, 0, 4, 2)
    rhombus, rect = recorder.groups[0].primitives
    assert isinstance(rhombus, PolygonPrimitive)
    assert rhombus.to_shapely().area == pytest.approx(32)
    assert rect.to_shapely().area == pytest.approx(8)


def test_group_geometry_applies_holes(recorder):
    g = Graphics(recorder, Transform(0, 0, 10, 0))
    with recorder.begin_shape(RED):
        g.add_rectangle(0, 0, 10, 10)
        g.add_rectangle(2, 2, 6, 6, invert=True)
    assert recorder.groups[0].geometry().area == pytest.approx(64)


def test_recorder_tracks_background(recorder):
    recorder.set_background(RED)
    assert recorder.background == RED
    assert recorder.groups == []


def test_recorder_rejects_primitives_outside_shape(recorder):
    with pytest.raises(RuntimeError):
        recorder.add_circle(0, 0, 1)


def test_recorder_rejects_nested_shapes(recorder):
    with recorder.begin_shape(RED):
        with pytest.raises(RuntimeError):
            with recorder.begin_shape(RED):
                pass
    assert not recorder.is_shape_open


def test_begin_shape_closes_on_error(recorder):
    with pytest.raises(KeyError):
        with recorder.begin_shape(RED):
            raise KeyError("boom")
    assert not recorder.is_shape_open
    assert len(recorder.groups) == 1
