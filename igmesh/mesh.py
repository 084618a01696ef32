"""Indexed triangle meshes and the passes needed to draw them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import Iterator, Optional, Sequence

from igmesh.tuples import Vector

SOLID_DEFAULT_COLOR = Vector(1.0, 0.0, 1.0)
LINE_COLOR = Vector(0.0, 0.0, 0.0)
POINT_COLOR = Vector(1.0, 0.0, 0.0)
POINT_SIZE = 5.0


class PolygonMode(enum.Enum):
    """How the front faces of triangles are rasterised."""

    FILL = "fill"
    LINE = "line"
    POINT = "point"


@dataclass
class Display:
    """Which drawing modes are switched on."""

    points: bool = False
    lines: bool = False
    solid: bool = True

    def toggle(self, name: str) -> bool:
        """Flip the named mode ('points', 'lines' or 'solid'); return its new state."""
        if name not in {f.name for f in fields(self)}:
            raise ValueError(f"unknown display mode: {name!r}")
        value = not getattr(self, name)
        setattr(self, name, value)
        return value


@dataclass(frozen=True)
class RenderPass:
    """One drawing of all triangles in a given mode with a per-vertex colour table."""

    mode: PolygonMode
    vertices: tuple[Vector, ...]
    faces: tuple[Vector, ...]
    colors: tuple[Vector, ...]
    point_size: Optional[float] = None

    def triangles(self) -> Iterator[tuple[tuple[Vector, Vector, Vector], tuple[Vector, Vector, Vector]]]:
        """Each triangle's corner positions with their colours."""
        for face in self.faces:
            corners = tuple(self.vertices[i] for i in face)
            shades = tuple(self.colors[i] for i in face)
            yield corners, shades


@dataclass(frozen=True)
class _Buffers:
    vertices: tuple[Vector, ...]
    faces: tuple[Vector, ...]
    colors: tuple[Vector, ...]
    line_colors: tuple[Vector, ...]
    point_colors: tuple[Vector, ...]


class Mesh:
    """A mesh of vertices, triangles and colour tables for solid, line and point views.

    The tables are copied into buffers the first time the mesh is drawn;
    later draws reuse those buffers.
    """

    def __init__(
        self,
        vertices: Optional[Sequence[Vector]] = None,
        faces: Optional[Sequence[Vector]] = None,
        colors: Optional[Sequence[Vector]] = None,
        line_colors: Optional[Sequence[Vector]] = None,
        point_colors: Optional[Sequence[Vector]] = None,
    ):
        self.vertices: list[Vector] = list(vertices or [])
        self.faces: list[Vector] = list(faces or [])
        self.colors: list[Vector] = list(colors or [])
        self.line_colors: list[Vector] = list(line_colors or [])
        self.point_colors: list[Vector] = list(point_colors or [])
        self._buffers: Optional[_Buffers] = None

    def create_color_line_points(self) -> None:
        """Append one solid, line and point colour for every vertex."""
        for _ in self.vertices:
            self.colors.append(SOLID_DEFAULT_COLOR)
            self.line_colors.append(LINE_COLOR)
            self.point_colors.append(POINT_COLOR)

    def _upload(self) -> _Buffers:
        if self._buffers is None:
            self._buffers = _Buffers(
                tuple(self.vertices),
                tuple(self.faces),
                tuple(self.colors),
                tuple(self.line_colors),
                tuple(self.point_colors),
            )
        return self._buffers

    def draw(self, display: Display) -> list[RenderPass]:
        """The passes to render, in solid, line, point order, for the enabled modes."""
        buffers = self._upload()
        passes = []
        if display.solid:
            passes.append(RenderPass(PolygonMode.FILL, buffers.vertices, buffers.faces, buffers.colors))
        if display.lines:
            passes.append(RenderPass(PolygonMode.LINE, buffers.vertices, buffers.faces, buffers.line_colors))
        if display.points:
            passes.append(
                RenderPass(
                    PolygonMode.POINT,
                    buffers.vertices,
                    buffers.faces,
                    buffers.point_colors,
                    point_size=POINT_SIZE,
                )
            )
        return passes