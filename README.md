# igmesh

Indexed triangle meshes, solids of revolution and a small keyboard-driven
3D scene, meant for learning the basics of computer graphics.

## Modules

- `igmesh.tuples.Vector`: an immutable numeric vector with component-wise
  `+`, `-`, scalar `*` and `/`, `dot` (also as `|`), `length_sq`,
  `normalized` (raises `ValueError` for a zero vector) and `cross` for
  three-component vectors.
- `igmesh.axes.Axes`: the red X, green Y and blue Z axes; `segments()`
  returns the three lines, `change_axis_size()` sets their half-length.
- `igmesh.ply_reader`: reader for ASCII PLY files holding triangles.
  `read(filename)` returns vertices and faces, `read_vertices(filename)`
  only the vertices; `.ply` is appended to names that lack it.
  `parse(text)` and `parse_vertices(text)` work on text already in memory.
  Malformed input or an unreadable file raises `PlyError`.
- `igmesh.mesh`: `Mesh` holds vertices, triangles and per-vertex colour
  tables for solid, line and point views. `Mesh.draw(display)` returns a
  list of `RenderPass` objects (solid, then lines, then points) for the
  modes switched on in a `Display`, whose fields `points`, `lines` and
  `solid` are flipped with `Display.toggle(name)`.
  `create_color_line_points()` appends default colours for every vertex.
- `igmesh.shapes`: `Cube(side)` and `HexagonalPyramid(height, radius,
  top_radius)`, a hexagonal frustum whose larger radius is always the base.
- `igmesh.revolution`: `revolve(profile, instances)` sweeps a profile
  around the Y axis, closing the surface with a triangle fan where a
  profile end lies on the axis. `RevolutionMesh` wraps it, and
  `RevolutionMesh.from_ply(filename, instances)` takes the profile from
  the vertices of a PLY file.
- `igmesh.solids`: `Sphere`, `Cone` and `Cylinder`, built from the
  profiles `sphere_profile`, `cone_profile` and `cylinder_profile`.
- `igmesh.ply_model.PlyModel`: a mesh read from a PLY file.
- `igmesh.trigonometry`: `segment_length`, `hexagon_vertices` and the
  `Trigonometry` class, which measures the angle at B (`angle_abc`), the
  length of CD (`length_cd`), the products of B and F (`cross_products`)
  and collects everything as text in `report()`.
- `igmesh.scene`: `Scene` with a `Camera`, a `MenuMode`, keyboard handling
  (`key_pressed`, `special_key` with `SpecialKey` codes), projection
  (`initialize`, `resize`, `projection`) and `draw()`, which returns a
  `Frame` describing everything to render. `default_scene()` builds the
  demonstration scene.
- `igmesh.viewer`: `render_scene(scene, axes3d)` draws a frame into a
  matplotlib 3D axes; `main()` is the command below.

## Example

```python
from igmesh.mesh import Display
from igmesh.solids import Sphere

sphere = Sphere(15, 50, 25)
print(len(sphere.vertices), len(sphere.faces))

display = Display()
display.toggle("lines")
for render_pass in sphere.draw(display):
    print(render_pass.mode, len(render_pass.faces))
```

## Viewer

```
igmesh-viewer
igmesh-viewer --width 800 --height 600 --title "My scene"
igmesh-viewer --output scene.png
```

The command builds the default scene and shows it in a matplotlib window;
with `--output` it writes one frame to an image file instead. The models
`plys/beethoven.ply` and `plys/copa.ply` are loaded from the current
directory when present and left out with a warning otherwise.

Keys:

- `O` enters object selection: `C` cube, `P` pyramid, `E` sphere,
  `N` cone, `B` Beethoven model, `U` cup, `Y` cylinder toggle visibility.
- `V` enters display selection: `D` points, `L` lines, `S` solid.
- `Q` leaves a menu and, from the main menu, closes the viewer.
- The arrow keys rotate the camera; Page Up and Page Down move it away
  or closer.

## What it does not do

Drawing a mesh produces plain data (`RenderPass` and `Frame` objects);
the package has no GPU or OpenGL renderer of its own, and the viewer is
a matplotlib approximation of the scene. Only ASCII PLY files with
triangular faces can be read; binary PLY, colours, normals and texture
coordinates are not supported, and nothing is ever written back to PLY.

## Tests

```
pip install -e .[test]
pytest
```