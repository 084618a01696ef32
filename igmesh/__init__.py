"""Indexed triangle meshes, solids of revolution, ASCII PLY loading and a small 3D scene viewer."""

__version__ = "0.1.0"