"""A scene of meshes with a camera, keyboard menus and per-frame draw lists."""

from __future__ import annotations

import enum
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional, Sequence, Union

from igmesh.axes import Axes, AxisSegment
from igmesh.mesh import Display, Mesh, RenderPass
from igmesh.ply_model import PlyModel
from igmesh.revolution import RevolutionMesh
from igmesh.shapes import Cube, HexagonalPyramid
from igmesh.solids import Cone, Cylinder, Sphere
from igmesh.tuples import Vector

logger = logging.getLogger(__name__)

FRONT_PLANE = 50.0
BACK_PLANE = 2000.0
SCENE_AXIS_SIZE = 5000.0
ZOOM_FACTOR = 1.2
PLY_DIRECTORY = "plys"

DISPLAY_KEYS = {"D": "points", "L": "lines", "S": "solid"}

OBJECT_MENU_HELP = (
    "OBJECT SELECTION MODE\n"
    "\t<key> - SHOW/HIDE THE OBJECT BOUND TO THAT KEY\n"
    "\tQ - BACK TO THE MAIN MENU"
)
DISPLAY_MENU_HELP = (
    "DISPLAY MODE SELECTION\n"
    "\tD - SHOW/HIDE POINTS\n"
    "\tL - SHOW/HIDE LINES\n"
    "\tS - SHOW/HIDE SOLID\n"
    "\tQ - BACK TO THE MAIN MENU"
)


class MenuMode(enum.Enum):
    """The keyboard menu the scene is in."""

    NONE = "none"
    SELECT_OBJECT = "select_object"
    SELECT_DISPLAY = "select_display"


class SpecialKey(enum.IntEnum):
    """Navigation keys, numbered as the windowing toolkit reports them."""

    LEFT = 100
    UP = 101
    RIGHT = 102
    DOWN = 103
    PAGE_UP = 104
    PAGE_DOWN = 105


class Translate(NamedTuple):
    """Translation by (x, y, z)."""

    x: float
    y: float
    z: float

    def apply(self, point: Vector) -> Vector:
        return Vector(point.x + self.x, point.y + self.y, point.z + self.z)


class Scale(NamedTuple):
    """Scaling by (x, y, z) along the axes."""

    x: float
    y: float
    z: float

    def apply(self, point: Vector) -> Vector:
        return Vector(point.x * self.x, point.y * self.y, point.z * self.z)


class Rotate(NamedTuple):
    """Rotation by ``angle`` degrees around the axis (x, y, z)."""

    angle: float
    x: float
    y: float
    z: float

    def apply(self, point: Vector) -> Vector:
        norm = math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)
        if norm == 0.0:
            raise ValueError("a rotation needs a non-zero axis")
        kx, ky, kz = self.x / norm, self.y / norm, self.z / norm
        theta = math.radians(self.angle)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        px, py, pz = point.x, point.y, point.z
        dot = kx * px + ky * py + kz * pz
        cx, cy, cz = ky * pz - kz * py, kz * px - kx * pz, kx * py - ky * px
        return Vector(
            px * cos_t + cx * sin_t + kx * dot * (1 - cos_t),
            py * cos_t + cy * sin_t + ky * dot * (1 - cos_t),
            pz * cos_t + cz * sin_t + kz * dot * (1 - cos_t),
        )


Transform = Union[Translate, Scale, Rotate]


def apply_transforms(transforms: Sequence[Transform], point) -> Vector:
    """Apply transforms listed in call order: the last one listed acts first."""
    result = Vector(point)
    for transform in reversed(transforms):
        result = transform.apply(result)
    return result


class Frustum(NamedTuple):
    """A perspective view volume."""

    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float


class Viewport(NamedTuple):
    """The window area that is drawn into."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class Camera:
    """An observer looking at the origin from ``distance`` along +Z, then rotated."""

    distance: float = 4 * FRONT_PLANE
    angle_x: float = 0.0
    angle_y: float = 0.0

    def transforms(self) -> tuple[Transform, ...]:
        """The view transforms in call order."""
        return (
            Translate(0.0, 0.0, -self.distance),
            Rotate(self.angle_y, 0.0, 1.0, 0.0),
            Rotate(self.angle_x, 1.0, 0.0, 0.0),
        )


@dataclass
class SceneObject:
    """A mesh placed in the scene, optionally toggled by a key in object mode."""

    name: str
    mesh: Mesh
    transforms: tuple[Transform, ...] = ()
    key: Optional[str] = None
    visible: bool = True

    def __post_init__(self):
        self.transforms = tuple(self.transforms)
        if self.key is not None:
            if len(self.key) != 1:
                raise ValueError(f"a selection key is one character, got {self.key!r}")
            self.key = self.key.upper()

    def transform_point(self, point) -> Vector:
        """Where a point of the mesh ends up in scene coordinates."""
        return apply_transforms(self.transforms, point)


@dataclass(frozen=True)
class DrawItem:
    """The passes of one object together with its placement."""

    name: str
    transforms: tuple[Transform, ...]
    passes: tuple[RenderPass, ...]


@dataclass(frozen=True)
class Frame:
    """Everything needed to render one picture of the scene."""

    view: tuple[Transform, ...]
    frustum: Optional[Frustum]
    viewport: Optional[Viewport]
    axes: tuple[AxisSegment, ...]
    items: tuple[DrawItem, ...] = field(default_factory=tuple)


def _normalize_key(key) -> str:
    if isinstance(key, int):
        key = chr(key)
    if not isinstance(key, str) or len(key) != 1:
        raise ValueError(f"a key is a single character, got {key!r}")
    return key.upper()


class Scene:
    """Objects, axes and a camera, driven by keyboard menus."""

    def __init__(self, objects: Iterable[SceneObject] = ()):
        self.objects: list[SceneObject] = list(objects)
        self.front_plane = FRONT_PLANE
        self.back_plane = BACK_PLANE
        self.camera = Camera(distance=4 * self.front_plane)
        self.axes = Axes()
        self.axes.change_axis_size(SCENE_AXIS_SIZE)
        self.display = Display()
        self.menu_mode = MenuMode.NONE
        self.width = 0.0
        self.height = 0.0
        self.frustum: Optional[Frustum] = None
        self.viewport: Optional[Viewport] = None

    def object(self, name: str) -> SceneObject:
        """The object with the given name."""
        for obj in self.objects:
            if obj.name == name:
                return obj
        raise KeyError(name)

    def initialize(self, width: int, height: int) -> Frustum:
        """Set up projection and viewport for a window of the given size."""
        self.width = float(width // 10)
        self.height = float(height // 10)
        frustum = self.projection(float(width) / float(height))
        self.viewport = Viewport(0, 0, width, height)
        return frustum

    def resize(self, width: int, height: int) -> Frustum:
        """Adapt projection and viewport to a new window size."""
        self.width = float(width // 10)
        self.height = float(height // 10)
        # The aspect ratio is taken as height over width on resizing.
        frustum = self.projection(float(height) / float(width))
        self.viewport = Viewport(0, 0, width, height)
        return frustum

    def projection(self, ratio_xy: float) -> Frustum:
        """The perspective frustum for the given width-to-height ratio."""
        wx = self.height * ratio_xy
        self.frustum = Frustum(
            -wx, wx, -self.height, self.height, self.front_plane, self.back_plane
        )
        return self.frustum

    def key_pressed(self, key) -> bool:
        """Handle an ordinary key; return True when the program should quit."""
        k = _normalize_key(key)

        if self.menu_mode is MenuMode.SELECT_OBJECT:
            for obj in self.objects:
                if obj.key == k:
                    obj.visible = not obj.visible
        elif self.menu_mode is MenuMode.SELECT_DISPLAY:
            if k in DISPLAY_KEYS:
                self.display.toggle(DISPLAY_KEYS[k])

        logger.info("key pressed: '%s'", key if isinstance(key, str) else chr(key))
        quit_requested = False

        if k == "Q":
            if self.menu_mode is not MenuMode.NONE:
                self.menu_mode = MenuMode.NONE
                logger.info("leaving menu")
            else:
                quit_requested = True
                logger.info("exiting")
        elif k == "O":
            self.menu_mode = MenuMode.SELECT_OBJECT
            logger.info(OBJECT_MENU_HELP)
        elif k == "V":
            self.menu_mode = MenuMode.SELECT_DISPLAY
            logger.info(DISPLAY_MENU_HELP)

        return quit_requested

    def special_key(self, key) -> None:
        """Move the camera with the arrow and page keys; other keys are ignored."""
        try:
            special = SpecialKey(key)
        except ValueError:
            return
        if special is SpecialKey.LEFT:
            self.camera.angle_y -= 1
        elif special is SpecialKey.RIGHT:
            self.camera.angle_y += 1
        elif special is SpecialKey.UP:
            self.camera.angle_x -= 1
        elif special is SpecialKey.DOWN:
            self.camera.angle_x += 1
        elif special is SpecialKey.PAGE_UP:
            self.camera.distance *= ZOOM_FACTOR
        elif special is SpecialKey.PAGE_DOWN:
            self.camera.distance /= ZOOM_FACTOR

    def draw(self) -> Frame:
        """The frame to render: view, axes and the passes of every visible object."""
        items = tuple(
            DrawItem(obj.name, obj.transforms, tuple(obj.mesh.draw(self.display)))
            for obj in self.objects
            if obj.visible
        )
        return Frame(
            view=self.camera.transforms(),
            frustum=self.frustum,
            viewport=self.viewport,
            axes=self.axes.segments(),
            items=items,
        )


def _ply_path(stem: str) -> str:
    return os.path.join(PLY_DIRECTORY, f"{stem}.ply")


def default_scene() -> Scene:
    """The demonstration scene; PLY models missing from ./plys are left out."""
    objects = [
        SceneObject("cube", Cube(25.0), (Translate(50, 0, 0),), key="C"),
        SceneObject(
            "pyramid", HexagonalPyramid(50.0, 25.0, 12.5), (Translate(-50, 0, 0),), key="P"
        ),
        SceneObject("sphere", Sphere(15, 50, 25), (Translate(0, 100, 0),), key="E"),
        SceneObject("cone", Cone(25, 20, 30.0, 30.0), (Translate(0, -50, 0),), key="N"),
    ]

    beethoven_path = _ply_path("beethoven")
    if os.path.exists(beethoven_path):
        beethoven = PlyModel(beethoven_path)
        beethoven.create_color_line_points()
        objects.append(
            SceneObject(
                "beethoven", beethoven, (Scale(5, 5, 5), Translate(20, 5.5, 0)), key="B"
            )
        )
    else:
        logger.warning("model '%s' not found; left out of the scene", beethoven_path)

    cup_path = _ply_path("copa")
    if os.path.exists(cup_path):
        objects.append(
            SceneObject(
                "cup", RevolutionMesh.from_ply(cup_path, 120), (Scale(5, 5, 5),), key="U"
            )
        )
    else:
        logger.warning("model '%s' not found; left out of the scene", cup_path)

    objects.append(
        SceneObject("cylinder", Cylinder(15, 50, 50, 10), (Translate(-100, 25, 0),), key="Y")
    )
    return Scene(objects)