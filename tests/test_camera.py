import math

import numpy as np
import pytest

from teapotscene.camera import Camera, look_at, perspective
from teapotscene.maths import radians


def test_look_at_maps_eye_to_origin():
    eye = np.array([1.0, 2.0, 3.0])
    view = look_at(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0])


def test_look_at_puts_center_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([-2.0, 0.5, 1.0])
    view = look_at(eye, center, (0.0, 1.0, 0.0))
    p = view @ np.append(center, 1.0)
    assert p[0] == pytest.approx(0.0, abs=1e-12)
    assert p[1] == pytest.approx(0.0, abs=1e-12)
    assert p[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_look_at_rotation_is_orthonormal():
    view = look_at((3.0, 1.0, 2.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    r = view[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))


def test_perspective_depth_range():
    near, far = 0.2, 100.0
    proj = perspective(radians(45.0), 4.0 / 3.0, near, far)
    for z, expected in ((-near, -1.0), (-far, 1.0)):
        clip = proj @ np.array([0.0, 0.0, z, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


def test_perspective_w_is_negative_z():
    proj = perspective(radians(60.0), 1.5, 0.1, 50.0)
    clip = proj @ np.array([0.3, 0.4, -7.0, 1.0])
    assert clip[3] == pytest.approx(7.0)


def test_perspective_aspect_ratio():
    proj = perspective(radians(45.0), 2.0, 0.2, 100.0)
    assert proj[1, 1] / proj[0, 0] == pytest.approx(2.0)


def test_perspective_errors():
    with pytest.raises(ValueError):
        perspective(radians(45.0), 0.0, 0.2, 100.0)
    with pytest.raises(ValueError):
        perspective(radians(45.0), 1.0, 5.0, 5.0)


def test_camera_defaults():
    cam = Camera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
    assert cam.yaw == pytest.approx(radians(-90.0))
    assert cam.pitch == 0.0
    assert cam.aspect == pytest.approx(1024.0 / 768.0)
    assert np.allclose(cam.front, [0.0, 0.0, -1.0])
    assert np.allclose(cam.eye, [0.0, 0.0, 5.0])


def test_camera_vectors_default_orientation():
    cam = Camera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
    cam.calculate_camera_vectors()
    assert np.allclose(cam.front, [0.0, 0.0, -1.0], atol=1e-4)
    assert np.allclose(cam.right, [1.0, 0.0, 0.0], atol=1e-4)
    assert np.allclose(cam.up, [0.0, 1.0, 0.0], atol=1e-4)


def test_camera_vectors_are_orthonormal():
    cam = Camera((0.0, 0.0, 0.0), (0.0, 0.0, -1.0))
    cam.yaw = 0.8
    cam.pitch = 0.3
    cam.calculate_camera_vectors()
    assert np.linalg.norm(cam.front) == pytest.approx(1.0)
    assert np.linalg.norm(cam.right) == pytest.approx(1.0)
    assert np.linalg.norm(cam.up) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-12)
    assert cam.front[1] == pytest.approx(math.sin(0.3))


def test_calculate_matrices():
    cam = Camera((1.0, 2.0, 5.0), (0.0, 0.0, 0.0))
    cam.yaw = 0.4
    cam.calculate_matrices()
    assert np.allclose(cam.view @ np.append(cam.eye, 1.0), [0.0, 0.0, 0.0, 1.0])
    ahead = cam.view @ np.append(cam.eye + 3.0 * cam.front, 1.0)
    assert np.allclose(ahead[:3], [0.0, 0.0, -3.0])
    assert np.allclose(
        cam.projection, perspective(cam.fov, cam.aspect, cam.near, cam.far)
    )