"""Homogeneous 4x4 transformation matrices and angle conversion.

Matrices are numpy arrays indexed ``[row, column]`` and act on column
vectors, so ``translate(v) @ point`` moves ``point`` by ``v``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_PI_APPROX = 3.1416


def as_vec3(v: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return ``v`` as a float array of shape (3,), or raise ValueError."""
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def normalize(v: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return ``v`` scaled to unit length; a zero vector raises ValueError."""
    arr = as_vec3(v)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def translate(v: Sequence[float] | np.ndarray) -> np.ndarray:
    """Matrix that translates by ``v``."""
    x, y, z = as_vec3(v)
    m = np.identity(4)
    m[0:3, 3] = (x, y, z)
    return m


def scale(v: Sequence[float] | np.ndarray) -> np.ndarray:
    """Matrix that scales each axis by the matching component of ``v``."""
    x, y, z = as_vec3(v)
    return np.diag((x, y, z, 1.0))


def radians(angle: float) -> float:
    """Convert degrees to radians using pi rounded to 3.1416."""
    return angle * _PI_APPROX / 180.0


def rotate(angle: float, v: Sequence[float] | np.ndarray) -> np.ndarray:
    """Matrix that rotates by ``angle`` radians about the axis ``v``."""
    x, y, z = normalize(v)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    m = np.identity(4)
    m[0:3, 0:3] = [
        [t * x * x + c, t * x * y - z * s, t * x * z + y * s],
        [t * x * y + z * s, t * y * y + c, t * y * z - x * s],
        [t * x * z - y * s, t * y * z + x * s, t * z * z + c],
    ]
    return m