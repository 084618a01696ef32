[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "igmesh"
version = "0.1.0"
description = "Indexed triangle meshes, solids of revolution, ASCII PLY loading and a small 3D scene viewer"
requires-python = ">=3.10"
keywords = ["mesh", "ply", "revolution", "3d", "geometry", "computer graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Education",
]
dependencies = [
    "matplotlib>=3.6",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
igmesh-viewer = "igmesh.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["igmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
