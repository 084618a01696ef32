import pytest

from igmesh.axes import Axes, BLUE, GREEN, RED
from igmesh.tuples import Vector


def test_default_size_is_one_thousand():
    axes = Axes()
    assert axes.axis_size == 1000
    x_axis = axes.segments()[0]
    assert x_axis.start == Vector(-1000.0, 0.0, 0.0)
    assert x_axis.end == Vector(1000.0, 0.0, 0.0)


def test_change_axis_size_updates_every_axis():
    axes = Axes()
    axes.change_axis_size(5000)
    for index, segment in enumerate(axes.segments()):
        assert segment.start[index] == -5000
        assert segment.end[index] == 5000
        assert segment.start == -segment.end


@pytest.mark.parametrize("size", [1.0, 25.0, 2000.0])
def test_each_axis_lies_on_its_own_coordinate(size):
    axes = Axes(size)
    for index, segment in enumerate(axes.segments()):
        for other in range(3):
            if other != index:
                assert segment.start[other] == 0
                assert segment.end[other] == 0
        assert (segment.end - segment.start).length_sq() == pytest.approx((2 * size) ** 2)


def test_axis_colours_are_red_green_blue():
    colors = [segment.color for segment in Axes().segments()]
    assert colors == [RED, GREEN, BLUE]
    assert RED == Vector(1, 0, 0)


def test_flat_arrays_hold_six_vertices():
    axes = Axes(10)
    assert len(axes.vertex_array) == 18
    assert len(axes.color_array) == 18
    assert axes.vertex_array[:6] == [-10, 0, 0, 10, 0, 0]
    assert axes.color_array[:6] == [1, 0, 0, 1, 0, 0]


def test_flat_arrays_match_segments():
    axes = Axes(7)
    vertices = axes.vertex_array
    points = [Vector(vertices[i:i + 3]) for i in range(0, 18, 3)]
    expected = [p for seg in axes.segments() for p in (seg.start, seg.end)]
    assert points == expected