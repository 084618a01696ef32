"""Trigonometry exercises on a regular hexagon in the XY plane."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

from igmesh.tuples import Vector

DEFAULT_RADIUS = 2.0
DEFAULT_ANGLE = 60.0
# The angle between AB and AF, 120 degrees, as a rounded radian value.
CROSS_ANGLE_RADIANS = 2.0944


class AngleMeasure(NamedTuple):
    """Steps of measuring the angle between segments AB and CB."""

    segment_ab: float
    segment_ac: float
    height: float
    degrees: float


class CrossProducts(NamedTuple):
    """The products AB x AF and AF x AB, with their shared magnitude."""

    ab_af: Vector
    af_ab: Vector
    magnitude: float


def segment_length(x1: float, x2: float, y1: float, y2: float) -> float:
    """Length of the segment from (x1, y1) to (x2, y2)."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def hexagon_vertices(
    radius: float = DEFAULT_RADIUS,
    step_degrees: float = DEFAULT_ANGLE,
    center: Sequence[float] = (0.0, 0.0, 0.0),
) -> list[Vector]:
    """Six vertices A..F around ``center``, spaced ``step_degrees`` apart from the +X axis."""
    step = math.radians(step_degrees)
    cx, cy, cz = (float(c) for c in center)
    first = Vector(cx + radius, cy, cz)
    rest = [
        Vector(cx + radius * math.cos(step * k), cy + radius * math.sin(step * k), 0.0)
        for k in range(1, 6)
    ]
    return [first, *rest]


def _fmt(point: Vector) -> str:
    return ", ".join(f"{c:g}" for c in point)


class Trigonometry:
    """A hexagon A..F, a copy of it centred on C, and measurements on them."""

    def __init__(self, radius: float = DEFAULT_RADIUS, angle: float = DEFAULT_ANGLE):
        self.radius = float(radius)
        self.angle = float(angle)
        self.vertices = hexagon_vertices(self.radius, self.angle)
        self.shifted_vertices = hexagon_vertices(self.radius, self.angle, self.vertices[2])
        self.colors = [Vector(0.0, 0.0, 0.0)] * len(self.vertices)

    def angle_abc(self) -> AngleMeasure:
        """The angle at B between AB and CB, found by halving triangle ABC."""
        a, b, c = self.vertices[0], self.vertices[1], self.vertices[2]
        ab = segment_length(b.x, a.x, b.y, a.y)
        ac = segment_length(c.x, a.x, c.y, a.y)
        height = math.sqrt(ab ** 2 - (ac / 2) ** 2)
        half_base_angle = math.degrees(math.atan(height / (ac / 2)))
        degrees = 2 * (180 - (90 + half_base_angle))
        return AngleMeasure(ab, ac, height, degrees)

    def length_cd(self) -> float:
        """Length of segment CD."""
        c, d = self.vertices[2], self.vertices[3]
        return segment_length(d.x, c.x, d.y, c.y)

    def cross_products(self) -> CrossProducts:
        """Determinant-style products of the position vectors of B and F."""
        origin = self.vertices[0]
        ax, ay, az = self.vertices[1]
        bx, by, bz = self.vertices[5]
        length_ab = segment_length(ax, origin.x, ay, origin.y)
        length_af = segment_length(bx, origin.x, by, origin.y)
        magnitude = length_ab * length_af * math.sin(CROSS_ANGLE_RADIANS)
        first = Vector(ay * bz - az * by, ax * bz - az * bx, ax * by - ay * bx)
        second = Vector(by * az - bz * ay, bx * az - bz * ax, bx * ay - by * ax)
        return CrossProducts(first, second, magnitude)

    def report(self) -> str:
        """All exercise results as printable text."""
        measure = self.angle_abc()
        products = self.cross_products()
        lines = ["HEXAGON VERTICES"]
        lines += [_fmt(v) for v in self.vertices]
        lines += ["", "HEXAGON CENTRED ON C"]
        lines += [_fmt(v) for v in self.shifted_vertices]
        lines += [
            "",
            "ANGLE BETWEEN AB AND CB",
            f"SEGMENT AB: {measure.segment_ab:g}",
            f"SEGMENT AC: {measure.segment_ac:g}",
            f"HEIGHT: {measure.height:g}",
            f"ANGLE: {measure.degrees:g} degrees",
            "",
            f"LENGTH OF SEGMENT CD: {self.length_cd():g}",
            "",
            "AB x AF",
            f"V at {_fmt(products.ab_af)}",
            f"magnitude {products.magnitude:g}",
            "AF x AB",
            f"V at {_fmt(products.af_ab)}",
            f"magnitude {products.magnitude:g}",
        ]
        return "\n".join(lines)