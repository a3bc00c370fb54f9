"""First-person camera producing view and projection matrices."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from teapotscene.maths import as_vec3, normalize, radians


def look_at(
    eye: Sequence[float] | np.ndarray,
    center: Sequence[float] | np.ndarray,
    up: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = as_vec3(eye)
    f = normalize(as_vec3(center) - eye)
    s = normalize(np.cross(f, as_vec3(up)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must be non-zero")
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


class Camera:
    """Camera steered by yaw and pitch angles."""

    def __init__(
        self,
        eye: Sequence[float] | np.ndarray,
        target: Sequence[float] | np.ndarray,
    ) -> None:
        self.fov = radians(45.0)
        self.aspect = 1024.0 / 768.0
        self.near = 0.2
        self.far = 100.0

        self.eye = as_vec3(eye).copy()
        self.target = as_vec3(target).copy()
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, -1.0])

        self.view = np.identity(4)
        self.projection = np.identity(4)

        self.yaw = radians(-90.0)
        self.pitch = 0.0
        self.roll = 0.0

    def calculate_matrices(self) -> None:
        """Refresh the camera vectors, then the view and projection matrices."""
        self.calculate_camera_vectors()
        self.view = look_at(self.eye, self.eye + self.front, self.world_up)
        self.projection = perspective(self.fov, self.aspect, self.near, self.far)

    def calculate_camera_vectors(self) -> None:
        """Recompute front, right and up from the yaw and pitch angles."""
        cos_pitch = math.cos(self.pitch)
        self.front = np.array(
            [
                math.cos(self.yaw) * cos_pitch,
                math.sin(self.pitch),
                math.sin(self.yaw) * cos_pitch,
            ]
        )
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = np.cross(self.right, self.front)