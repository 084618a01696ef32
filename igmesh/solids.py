"""Solids of revolution: sphere, cone and cylinder built from generated profiles."""

from __future__ import annotations

import logging
import math

from igmesh.revolution import RevolutionMesh
from igmesh.tuples import Vector

logger = logging.getLogger(__name__)


def sphere_profile(num_vertices: int = 10, radius: float = 20.0) -> list[Vector]:
    """Half a circle in the XY plane, from the south pole up to the north pole.

    The profile holds ``num_vertices + 1`` points spaced evenly in angle.
    """
    if num_vertices < 1:
        raise ValueError("a sphere profile needs at least one segment")
    step = math.pi / num_vertices
    return [
        Vector(radius * math.sin(step * i), radius * math.cos(step * i), 0.0)
        for i in range(num_vertices, -1, -1)
    ]


def cone_profile(num_vertices: int = 3, height: float = 20.0, radius: float = 20.0) -> list[Vector]:
    """The slanted side of a cone from its apex at the origin down to the base rim,
    followed by the centre of the base.
    """
    if num_vertices < 2:
        raise ValueError("a cone profile needs at least two points on its side")
    if height == 0 or radius == 0:
        raise ValueError("a cone needs a non-zero height and radius")
    slope = math.atan(height / radius)
    profile = []
    for i in range(num_vertices):
        drop = height * i / (num_vertices - 1)
        profile.append(Vector(drop / math.tan(slope), -drop, 0.0))
    profile.append(Vector(0.0, -height, 0.0))
    return profile


def cylinder_profile(num_vertices: int = 4, height: float = 20.0, radius: float = 20.0) -> list[Vector]:
    """The outline of a capped cylinder centred on the origin.

    It runs from the bottom centre, along the side split into
    ``num_vertices - 3`` segments, to the top centre: ``num_vertices`` points.
    """
    segments = num_vertices - 3
    if segments < 1:
        raise ValueError("a cylinder profile needs at least four points")
    logger.debug("cylinder side segments: %d", segments)
    half = height / 2
    segment_size = height / segments
    profile = [Vector(0.0, -half, 0.0), Vector(radius, -half, 0.0)]
    profile += [Vector(radius, -half + i * segment_size, 0.0) for i in range(1, segments)]
    profile += [Vector(radius, half, 0.0), Vector(0.0, half, 0.0)]
    return profile


class Sphere(RevolutionMesh):
    """A sphere centred on the origin; more profile points give a smoother surface."""

    def __init__(self, num_vertices: int = 10, instances: int = 20, radius: float = 20.0):
        self.radius = float(radius)
        super().__init__(sphere_profile(num_vertices, self.radius), instances)


class Cone(RevolutionMesh):
    """A cone with its apex at the origin and its base at ``y = -height``."""

    def __init__(
        self,
        num_vertices: int = 3,
        instances: int = 20,
        height: float = 20.0,
        radius: float = 20.0,
    ):
        self.height = float(height)
        self.radius = float(radius)
        super().__init__(cone_profile(num_vertices, self.height, self.radius), instances)


class Cylinder(RevolutionMesh):
    """A capped cylinder centred on the origin with its axis along Y."""

    def __init__(
        self,
        num_vertices: int = 4,
        instances: int = 20,
        height: float = 20.0,
        radius: float = 20.0,
    ):
        self.height = float(height)
        self.radius = float(radius)
        super().__init__(cylinder_profile(num_vertices, self.height, self.radius), instances)