"""Render scenes with matplotlib, interactively or into an image file."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from matplotlib.figure import Figure

from igmesh.mesh import PolygonMode
from igmesh.scene import Scene, SpecialKey, apply_transforms, default_scene

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 500
WINDOW_HEIGHT = 500
WINDOW_TITLE = "igmesh"
DPI = 100
LINE_WIDTH = 0.5

_SPECIAL_KEYS = {
    "left": SpecialKey.LEFT,
    "right": SpecialKey.RIGHT,
    "up": SpecialKey.UP,
    "down": SpecialKey.DOWN,
    "pageup": SpecialKey.PAGE_UP,
    "pagedown": SpecialKey.PAGE_DOWN,
}


def _to_plot(point) -> tuple[float, float, float]:
    # Scene Y is up; matplotlib draws Z up. This mapping is a proper rotation.
    return (float(point[0]), -float(point[2]), float(point[1]))


def _clamp_color(color) -> tuple[float, float, float]:
    return tuple(min(1.0, max(0.0, float(c))) for c in color)


def _mean_color(colors) -> tuple[float, float, float]:
    colors = list(colors)
    return _clamp_color(
        sum(c[k] for c in colors) / len(colors) for k in range(3)
    )


def _limits(points) -> Optional[tuple[tuple[float, float], ...]]:
    points = list(points)
    if not points:
        return None
    lows = [min(p[k] for p in points) for k in range(3)]
    highs = [max(p[k] for p in points) for k in range(3)]
    half = max(h - lo for lo, h in zip(lows, highs)) / 2 or 1.0
    half *= 1.05
    return tuple(((lo + h) / 2 - half, (lo + h) / 2 + half) for lo, h in zip(lows, highs))


def _triangle_collection(axes3d, points, faces):
    """Add the triangles of ``faces`` over ``points`` as one polygon collection."""
    xs, ys, zs = zip(*points)
    return axes3d.plot_trisurf(list(xs), list(ys), list(zs), triangles=faces, shade=False)


def render_scene(scene: Scene, axes3d) -> list:
    """Draw one frame of ``scene`` into a 3D matplotlib axes; return the artists added."""
    frame = scene.draw()
    axes3d.cla()
    axes3d.set_axis_off()

    placed = []
    for item in frame.items:
        if not item.passes:
            continue
        points = [_to_plot(apply_transforms(item.transforms, v)) for v in item.passes[0].vertices]
        placed.append((item, points))

    limits = _limits(p for _, pts in placed for p in pts)
    if limits is None:
        size = scene.axes.axis_size
        limits = ((-size, size),) * 3

    artists: list = []
    for segment in frame.axes:
        ends = [
            tuple(min(hi, max(lo, c)) for c, (lo, hi) in zip(_to_plot(p), limits))
            for p in (segment.start, segment.end)
        ]
        xs, ys, zs = zip(*ends)
        artists.extend(axes3d.plot(xs, ys, zs, color=_clamp_color(segment.color)))

    for item, points in placed:
        for render_pass in item.passes:
            faces = [tuple(int(i) for i in face) for face in render_pass.faces]
            shades = [_mean_color(render_pass.colors[i] for i in face) for face in faces]
            if render_pass.mode is PolygonMode.FILL:
                collection = _triangle_collection(axes3d, points, faces)
                collection.set_facecolor(shades)
                collection.set_edgecolor("none")
                artists.append(collection)
            elif render_pass.mode is PolygonMode.LINE:
                collection = _triangle_collection(axes3d, points, faces)
                collection.set_facecolor("none")
                collection.set_edgecolor(shades)
                collection.set_linewidth(LINE_WIDTH)
                artists.append(collection)
            else:
                xs, ys, zs = zip(*points)
                artists.append(
                    axes3d.scatter(
                        xs,
                        ys,
                        zs,
                        c=[_clamp_color(c) for c in render_pass.colors],
                        s=(render_pass.point_size or 1.0) ** 2,
                        depthshade=False,
                    )
                )

    axes3d.set_xlim(*limits[0])
    axes3d.set_ylim(*limits[1])
    axes3d.set_zlim(*limits[2])
    camera = scene.camera
    axes3d.view_init(elev=camera.angle_x, azim=-90.0 - camera.angle_y)
    axes3d.set_box_aspect((1, 1, 1), zoom=4 * scene.front_plane / camera.distance)
    return artists


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="igmesh", description="Show the demonstration scene.")
    parser.add_argument("--width", type=_positive_int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=WINDOW_HEIGHT)
    parser.add_argument("--title", default=WINDOW_TITLE)
    parser.add_argument("--output", help="write one frame to this image file instead of opening a window")
    return parser.parse_args(argv)


def _handle_key(scene: Scene, key: Optional[str]) -> bool:
    """Route a matplotlib key name to the scene; return True when it asks to quit."""
    if not key:
        return False
    if key in _SPECIAL_KEYS:
        scene.special_key(_SPECIAL_KEYS[key])
        return False
    if len(key) == 1:
        return scene.key_pressed(key)
    return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the demonstration scene and show it, or save one frame with --output."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    scene = default_scene()
    scene.initialize(args.width, args.height)
    figsize = (args.width / DPI, args.height / DPI)

    if args.output:
        figure = Figure(figsize=figsize, dpi=DPI)
        axes3d = figure.add_subplot(projection="3d")
        render_scene(scene, axes3d)
        figure.savefig(args.output)
        return 0

    import matplotlib.pyplot as plt

    keymaps = {name: [] for name in plt.rcParams if name.startswith("keymap.")}
    with plt.rc_context(keymaps):
        figure = plt.figure(figsize=figsize, dpi=DPI)
        if figure.canvas.manager is not None:
            figure.canvas.manager.set_window_title(args.title)
        axes3d = figure.add_subplot(projection="3d")
        render_scene(scene, axes3d)

        def on_key(event) -> None:
            if _handle_key(scene, event.key):
                plt.close(figure)
                return
            render_scene(scene, axes3d)
            figure.canvas.draw_idle()

        figure.canvas.mpl_connect("key_press_event", on_key)
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())