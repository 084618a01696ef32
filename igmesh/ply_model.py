"""Meshes loaded from PLY files."""

from __future__ import annotations

from igmesh.mesh import Mesh
from igmesh.ply_reader import read


class PlyModel(Mesh):
    """A mesh whose vertices and triangles come from an ASCII PLY file.

    No colour tables are created; call ``create_color_line_points`` for them.
    """

    def __init__(self, filename):
        self.filename = filename
        vertices, faces = read(filename)
        super().__init__(vertices, faces)