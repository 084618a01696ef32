"""Simple meshes with fixed topology: a cube and a hexagonal frustum."""

from __future__ import annotations

import math

from igmesh.mesh import LINE_COLOR, POINT_COLOR, Mesh
from igmesh.tuples import Vector

CUBE_COLOR = Vector(0.0, 1.0, 0.0)
PYRAMID_COLOR = Vector(1.0, 1.0, 0.0)
# The source colour table carries one brighter green component on vertex 2.
PYRAMID_ACCENT_COLOR = Vector(1.0, 1.5, 0.0)

HEXAGON_STEP = math.radians(60.0)

_CUBE_FACES = (
    (0, 1, 2), (1, 3, 2),    # front
    (1, 4, 3), (4, 5, 3),    # right
    (4, 7, 5), (7, 6, 5),    # back
    (7, 0, 6), (0, 2, 6),    # left
    (3, 5, 2), (5, 6, 2),    # top
    (0, 7, 1), (7, 4, 1),    # bottom
)

_PYRAMID_FACES = (
    # base
    (5, 0, 1), (4, 5, 1), (4, 1, 2), (4, 2, 3),
    # top
    (8, 10, 9), (8, 11, 10), (8, 7, 11), (7, 6, 11),
    # sides
    (1, 0, 7), (0, 6, 7),
    (0, 5, 6), (5, 11, 6),
    (5, 4, 11), (4, 10, 11),
    (2, 1, 8), (1, 7, 8),
    (3, 2, 9), (2, 8, 9),
    (4, 3, 10), (3, 9, 10),
)


def _cube_vertices(side: float) -> list[Vector]:
    h = side / 2
    return [
        Vector(-h, 0.0, h),
        Vector(h, 0.0, h),
        Vector(-h, side, h),
        Vector(h, side, h),
        Vector(h, 0.0, -h),
        Vector(h, side, -h),
        Vector(-h, side, -h),
        Vector(-h, 0.0, -h),
    ]


class Cube(Mesh):
    """A green cube standing on the XZ plane, centred on the Y axis."""

    def __init__(self, side: float = 1.0):
        self.side = float(side)
        vertices = _cube_vertices(self.side)
        super().__init__(
            vertices,
            [Vector(face) for face in _CUBE_FACES],
            [CUBE_COLOR] * len(vertices),
            [LINE_COLOR] * len(vertices),
            [POINT_COLOR] * len(vertices),
        )


def _hexagon(radius: float, y: float) -> list[Vector]:
    return [
        Vector(radius * math.cos(HEXAGON_STEP * i), y, radius * math.sin(HEXAGON_STEP * i))
        for i in range(6)
    ]


class HexagonalPyramid(Mesh):
    """A yellow hexagonal frustum with its base on the XZ plane.

    The larger of the two radii is always used for the base, so the solid
    stands upright whichever order they are given in.
    """

    def __init__(self, height: float = 1.0, radius: float = 0.5, top_radius: float = 1.0):
        self.height = float(height)
        self.radius = float(radius)
        self.top_radius = float(top_radius)

        base_radius, cap_radius = self.radius, self.top_radius
        if cap_radius > base_radius:
            base_radius, cap_radius = cap_radius, base_radius

        vertices = _hexagon(base_radius, 0.0) + _hexagon(cap_radius, self.height)
        colors = [PYRAMID_COLOR] * len(vertices)
        colors[2] = PYRAMID_ACCENT_COLOR
        super().__init__(
            vertices,
            [Vector(face) for face in _PYRAMID_FACES],
            colors,
            [LINE_COLOR] * len(vertices),
            [POINT_COLOR] * len(vertices),
        )