import pytest
from matplotlib.collections import LineCollection, PathCollection, PolyCollection
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from igmesh.scene import Scene, SceneObject, SpecialKey, Translate
from igmesh.shapes import Cube, HexagonalPyramid
from igmesh.viewer import main, render_scene


def _axes():
    figure = Figure(figsize=(5, 5), dpi=100)
    return figure.add_subplot(projection="3d")


def _scene():
    scene = Scene(
        [
            SceneObject("cube", Cube(25.0), (Translate(50, 0, 0),), key="C"),
            SceneObject("pyramid", HexagonalPyramid(50.0, 25.0, 12.5), (Translate(-50, 0, 0),), key="P"),
        ]
    )
    scene.initialize(500, 500)
    return scene


def _of_type(artists, kind):
    return [a for a in artists if isinstance(a, kind)]


def _is_outline(collection):
    faces = collection.get_facecolors()
    return len(faces) == 0 or all(c[3] == 0 for c in faces)


def test_solid_mode_draws_one_filled_collection_per_object():
    artists = render_scene(_scene(), _axes())
    polys = _of_type(artists, PolyCollection)
    assert len(polys) == 2
    assert not any(_is_outline(p) for p in polys)
    assert len(_of_type(artists, Line2D)) == 3
    assert _of_type(artists, LineCollection) == []


def test_hidden_object_is_not_drawn():
    scene = _scene()
    scene.key_pressed("O")
    scene.key_pressed("C")
    artists = render_scene(scene, _axes())
    assert len(_of_type(artists, PolyCollection)) == 1


def test_line_and_point_modes_add_artists():
    scene = _scene()
    scene.key_pressed("V")
    scene.key_pressed("L")
    scene.key_pressed("D")
    artists = render_scene(scene, _axes())
    polys = _of_type(artists, PolyCollection)
    assert len(polys) == 4
    assert sum(1 for p in polys if _is_outline(p)) == 2
    assert len(_of_type(artists, PathCollection)) == 2


def test_filled_collection_has_one_polygon_per_face():
    scene = _scene()
    artists = render_scene(scene, _axes())
    filled = _of_type(artists, PolyCollection)
    counts = sorted(len(f.get_facecolors()) for f in filled)
    assert counts == sorted(len(obj.mesh.faces) for obj in scene.objects)


def test_view_follows_camera():
    scene = _scene()
    scene.special_key(SpecialKey.DOWN)
    scene.special_key(SpecialKey.DOWN)
    scene.special_key(SpecialKey.LEFT)
    axes3d = _axes()
    render_scene(scene, axes3d)
    assert axes3d.elev == pytest.approx(scene.camera.angle_x)
    assert axes3d.azim == pytest.approx(-90.0 - scene.camera.angle_y)


def test_axis_lines_stay_inside_limits():
    axes3d = _axes()
    artists = render_scene(_scene(), axes3d)
    low, high = axes3d.get_xlim()
    for line in _of_type(artists, Line2D):
        xs, _, _ = line.get_data_3d()
        assert all(low <= x <= high for x in xs)


def test_empty_scene_uses_axis_size_for_limits():
    scene = Scene()
    axes3d = _axes()
    artists = render_scene(scene, axes3d)
    assert len(artists) == 3
    assert axes3d.get_xlim() == pytest.approx((-scene.axes.axis_size, scene.axes.axis_size))


def test_rendering_twice_does_not_accumulate():
    scene = _scene()
    axes3d = _axes()
    render_scene(scene, axes3d)
    render_scene(scene, axes3d)
    assert len(axes3d.collections) == 2


def test_main_writes_png(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "frame.png"
    assert main(["--output", str(output), "--width", "200", "--height", "200"]) == 0
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize("value", ["0", "-5", "wide"])
def test_main_rejects_bad_size(value):
    with pytest.raises(SystemExit) as info:
        main(["--width", value, "--output", "unused.png"])
    assert info.value.code == 2