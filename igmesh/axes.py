"""The three coloured coordinate axes drawn in every scene."""

from __future__ import annotations

from typing import NamedTuple

from igmesh.tuples import Vector

DEFAULT_AXIS_SIZE = 1000.0

RED = Vector(1.0, 0.0, 0.0)
GREEN = Vector(0.0, 1.0, 0.0)
BLUE = Vector(0.0, 0.0, 1.0)


class AxisSegment(NamedTuple):
    """One axis: a line from ``start`` to ``end`` drawn in ``color``."""

    start: Vector
    end: Vector
    color: Vector


class Axes:
    """X (red), Y (green) and Z (blue) axes, each spanning ``-size`` to ``size``."""

    def __init__(self, size: float = DEFAULT_AXIS_SIZE):
        self.axis_size = float(size)

    def change_axis_size(self, new_size: float) -> None:
        """Set the half-length of every axis."""
        self.axis_size = float(new_size)

    def segments(self) -> tuple[AxisSegment, AxisSegment, AxisSegment]:
        """The three axis lines, in X, Y, Z order."""
        s = self.axis_size
        return (
            AxisSegment(Vector(-s, 0.0, 0.0), Vector(s, 0.0, 0.0), RED),
            AxisSegment(Vector(0.0, -s, 0.0), Vector(0.0, s, 0.0), GREEN),
            AxisSegment(Vector(0.0, 0.0, -s), Vector(0.0, 0.0, s), BLUE),
        )

    @property
    def vertex_array(self) -> list[float]:
        """Flat list of the six endpoints, three floats each."""
        return [
            coord
            for segment in self.segments()
            for point in (segment.start, segment.end)
            for coord in point
        ]

    @property
    def color_array(self) -> list[float]:
        """Flat list of the per-vertex colours matching ``vertex_array``."""
        return [
            component
            for segment in self.segments()
            for _ in range(2)
            for component in segment.color
        ]