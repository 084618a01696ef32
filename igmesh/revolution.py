"""Surfaces of revolution built by sweeping a profile around the Y axis."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

from igmesh.mesh import Mesh
from igmesh.ply_reader import read_vertices
from igmesh.tuples import Vector

AXIS_EPSILON = 0.000007
_NO_POLE = Vector(-1.0, -1.0, -1.0)


class RevolutionData(NamedTuple):
    """Vertices and triangles of a swept profile."""

    vertices: list[Vector]
    faces: list[Vector]


def revolve(profile: Sequence, instances: int) -> RevolutionData:
    """Sweep ``profile`` around the Y axis in ``instances`` copies.

    Profile end points lying on the axis become poles that close the
    surface with a fan of triangles instead of being copied.
    """
    points = [Vector(p) for p in profile]
    if len(points) < 2:
        raise ValueError("a revolution profile needs at least two points")
    if instances < 1:
        raise ValueError("a revolution needs at least one instance")

    descending = points[0].y > points[-1].y
    ascending = not descending

    top_cap = bottom_cap = False
    if points[0].x < AXIS_EPSILON:
        if descending:
            top_cap = True
        else:
            bottom_cap = True
    if points[-1].x < AXIS_EPSILON:
        if descending:
            bottom_cap = True
        else:
            top_cap = True

    north = south = _NO_POLE
    if top_cap and bottom_cap:
        lower_end = points[-2].y > points[-1].y
        if descending:
            north, south = (points[-1], points[0]) if lower_end else (points[0], points[-1])
        if ascending:
            south, north = (points[-1], points[0]) if lower_end else (points[0], points[-1])
        points = points[1:-1]
    elif top_cap:
        if points[-1].y > points[0].y:
            north = points.pop()
            ascending = True
        else:
            north = points.pop(0)
            descending = True
    elif bottom_cap:
        if points[-1].y > points[0].y:
            south = points.pop(0)
            ascending = True
        else:
            south = points.pop()
            descending = True

    m = len(points)
    if m == 0:
        raise ValueError("the profile has no points off the axis")
    n = instances
    total = m * n
    step = 2 * math.pi / n

    vertices = [
        Vector(p.x * math.cos(step * i), p.y, -p.x * math.sin(step * i))
        for i in range(n)
        for p in points
    ]
    if top_cap and bottom_cap:
        vertices += [south, north]
    elif top_cap:
        vertices.append(north)
    elif bottom_cap:
        vertices.append(south)

    faces: list[Vector] = []
    for i in range(n):
        for j in range(m - 1):
            a = m * i + j
            b = m * ((i + 1) % n) + j
            if descending:
                faces += [Vector(a, b + 1, b), Vector(a, a + 1, b + 1)]
            elif ascending:
                faces += [Vector(a, b, b + 1), Vector(a, b + 1, a + 1)]

    pole = len(vertices) - 1
    north_index = pole
    south_index = len(vertices) - 2

    def last_ring_fan(centre: int, reverse: bool) -> list[Vector]:
        fan = []
        for i in range(n):
            here = m * (i + 1) - 1
            there = (m * (i + 2) - 1) % total
            fan.append(Vector(here, centre, there) if reverse else Vector(there, centre, here))
        return fan

    def first_ring_fan(centre: int, reverse: bool) -> list[Vector]:
        fan = []
        for i in range(n):
            here = m * i
            there = m * (i + 1) % total
            fan.append(Vector(there, centre, here) if reverse else Vector(here, centre, there))
        return fan

    if ascending:
        if top_cap and not bottom_cap:
            faces += last_ring_fan(pole, reverse=False)
        if bottom_cap and not top_cap:
            faces += first_ring_fan(pole, reverse=False)
        if top_cap and bottom_cap:
            faces += last_ring_fan(north_index, reverse=False)
            faces += first_ring_fan(south_index, reverse=False)
    if descending:
        if top_cap and not bottom_cap:
            faces += first_ring_fan(pole, reverse=True)
        if bottom_cap and not top_cap:
            faces += last_ring_fan(pole, reverse=True)
        if top_cap and bottom_cap:
            faces += first_ring_fan(north_index, reverse=True)
            faces += last_ring_fan(south_index, reverse=True)

    return RevolutionData(vertices, faces)


class RevolutionMesh(Mesh):
    """A mesh made by revolving a profile around the Y axis."""

    def __init__(self, profile: Sequence = (), instances: int = 20):
        self.instances = instances
        if profile:
            vertices, faces = revolve(profile, instances)
        else:
            vertices, faces = [], []
        super().__init__(vertices, faces)
        self.create_color_line_points()

    @classmethod
    def from_ply(cls, filename, instances: int) -> "RevolutionMesh":
        """Revolve the vertices of a PLY file taken as a profile."""
        return cls(read_vertices(filename), instances)