"""The teapot scene: object layout, lights, input handling and per-frame matrices."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np

from teapotscene.camera import Camera
from teapotscene.light import Light
from teapotscene.maths import as_vec3, radians, rotate, scale, translate

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
MOVE_SPEED = 5.0
MOUSE_SENSITIVITY = 0.005

_CENTRE_X = WINDOW_WIDTH // 2
_CENTRE_Y = WINDOW_HEIGHT // 2

_WALL_POSITIONS = (
    (0.0, 4.0, -10.0),
    (0.0, 4.0, 10.0),
    (10.0, 4.0, 0.0),
    (-10.0, 4.0, 0.0),
    (0.0, 4.0, 0.0),
)
_WALL_ANGLES = (-270.0, -90.0, 90.0, 270.0, -180.0)
_WALL_AXES = (
    (1.0, 0.0, 0.0),
    (1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0),
)
_TEAPOT_POSITIONS = ((0.0, 0.0, 0.0),)


def _vec(x: float, y: float, z: float):
    return lambda: np.array([x, y, z], dtype=float)


@dataclass
class SceneObject:
    """A placed instance of a named model."""

    name: str
    position: np.ndarray = field(default_factory=_vec(0.0, 0.0, 0.0))
    rotation: np.ndarray = field(default_factory=_vec(0.0, 1.0, 0.0))
    scale: np.ndarray = field(default_factory=_vec(1.0, 1.0, 1.0))
    angle: float = 0.0

    def __post_init__(self) -> None:
        self.position = as_vec3(self.position).copy()
        self.rotation = as_vec3(self.rotation).copy()
        self.scale = as_vec3(self.scale).copy()

    def model_matrix(self) -> np.ndarray:
        """Translate, rotate and scale, applied to points as scale first."""
        return translate(self.position) @ rotate(self.angle, self.rotation) @ scale(self.scale)


def build_objects() -> list[SceneObject]:
    """The teapot, the floor and the five walls, in draw order."""
    objects = [
        SceneObject(
            name="teapot",
            position=pos,
            rotation=(1.0, 1.0, 1.0),
            scale=(0.75, 0.75, 0.75),
            angle=radians(20.0 * i),
        )
        for i, pos in enumerate(_TEAPOT_POSITIONS)
    ]
    objects.append(
        SceneObject(
            name="floor",
            position=(0.0, -0.85, 0.0),
            rotation=(0.0, 1.0, 0.0),
            scale=(1.0, 1.0, 1.0),
            angle=0.0,
        )
    )
    objects.extend(
        SceneObject(
            name="wall",
            position=pos,
            rotation=axis,
            scale=(5.0, 1.0, 5.0),
            angle=radians(angle),
        )
        for pos, angle, axis in zip(_WALL_POSITIONS, _WALL_ANGLES, _WALL_AXES)
    )
    return objects


def build_lights() -> Light:
    """Two point lights, a spot light and a directional light."""
    lights = Light()
    white = (1.0, 1.0, 1.0)
    lights.add_point_light((2.0, 2.0, 2.0), white, 1.0, 0.1, 0.02)
    lights.add_point_light((1.0, 1.0, -8.0), white, 1.0, 0.1, 0.02)
    lights.add_spot_light(
        (0.0, 3.0, 0.0),
        (0.0, -1.0, 0.0),
        white,
        1.0,
        0.1,
        0.02,
        math.cos(radians(45.0)),
    )
    lights.add_directional_light((1.0, -1.0, 0.0), (1.0, 1.0, 0.0))
    return lights


def keyboard_input(camera: Camera, pressed_keys: Iterable[str], delta_time: float) -> bool:
    """Move the camera for the held W/S/A/D keys; return True if Escape is held."""
    keys = {key.upper() for key in pressed_keys}
    step = MOVE_SPEED * delta_time
    if "W" in keys:
        camera.eye = camera.eye + step * camera.front
    if "S" in keys:
        camera.eye = camera.eye - step * camera.front
    if "A" in keys:
        camera.eye = camera.eye - step * camera.right
    if "D" in keys:
        camera.eye = camera.eye + step * camera.right
    return "ESCAPE" in keys


def mouse_input(camera: Camera, x_pos: float, y_pos: float) -> None:
    """Turn the camera by the cursor's offset from the window centre."""
    camera.yaw += MOUSE_SENSITIVITY * (x_pos - _CENTRE_X)
    camera.pitch += MOUSE_SENSITIVITY * (_CENTRE_Y - y_pos)
    camera.calculate_camera_vectors()


def frame_matrices(
    camera: Camera, objects: Sequence[SceneObject]
) -> list[tuple[SceneObject, np.ndarray, np.ndarray]]:
    """Update the camera and return each object with its MV and MVP matrices."""
    camera.target = camera.eye + camera.front
    camera.calculate_matrices()
    result = []
    for obj in objects:
        mv = camera.view @ obj.model_matrix()
        mvp = camera.projection @ mv
        result.append((obj, mv, mvp))
    return result