import math

import numpy as np
import pytest

from teapotscene.camera import Camera
from teapotscene.light import LightType
from teapotscene.maths import radians, scale, translate
from teapotscene.scene import (
    SceneObject,
    build_lights,
    build_objects,
    frame_matrices,
    keyboard_input,
    mouse_input,
)


def make_camera():
    return Camera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))


def test_build_objects_names_in_order():
    names = [obj.name for obj in build_objects()]
    assert names == ["teapot", "floor"] + ["wall"] * 5


def test_wall_layout_matches_source():
    walls = [obj for obj in build_objects() if obj.name == "wall"]
    positions = [tuple(w.position) for w in walls]
    assert positions == [
        (0.0, 4.0, -10.0),
        (0.0, 4.0, 10.0),
        (10.0, 4.0, 0.0),
        (-10.0, 4.0, 0.0),
        (0.0, 4.0, 0.0),
    ]
    angles = [w.angle for w in walls]
    assert angles == pytest.approx(
        [radians(a) for a in (-270.0, -90.0, 90.0, 270.0, -180.0)]
    )
    assert all(tuple(w.scale) == (5.0, 1.0, 5.0) for w in walls)


def test_floor_position():
    floor = next(obj for obj in build_objects() if obj.name == "floor")
    assert tuple(floor.position) == (0.0, -0.85, 0.0)
    assert floor.angle == 0.0


def test_teapot_model_matrix_without_rotation():
    teapot = build_objects()[0]
    expected = translate(teapot.position) @ scale((0.75, 0.75, 0.75))
    assert np.allclose(teapot.model_matrix(), expected)


def test_model_matrix_translation_column():
    obj = SceneObject(name="x", position=(1.0, 2.0, 3.0), angle=0.7)
    m = obj.model_matrix()
    assert np.allclose(m[:3, 3], [1.0, 2.0, 3.0])
    assert np.allclose(m[3], [0.0, 0.0, 0.0, 1.0])


def test_scene_object_rejects_bad_vector():
    with pytest.raises(ValueError):
        SceneObject(name="bad", position=(1.0, 2.0))


def test_build_lights_types_and_cutoff():
    lights = build_lights()
    types = [light.type for light in lights]
    assert types == [
        LightType.POINT,
        LightType.POINT,
        LightType.SPOT,
        LightType.DIRECTIONAL,
    ]
    spot = lights.light_sources[2]
    assert spot.cos_phi == pytest.approx(math.cos(radians(45.0)))
    assert np.allclose(lights.light_sources[3].colour, [1.0, 1.0, 0.0])


def test_keyboard_forward_moves_along_front():
    camera = make_camera()
    start = camera.eye.copy()
    closed = keyboard_input(camera, {"w"}, 0.5)
    assert closed is False
    assert np.allclose(camera.eye, start + 5.0 * 0.5 * camera.front)


def test_keyboard_opposite_keys_cancel():
    camera = make_camera()
    start = camera.eye.copy()
    keyboard_input(camera, {"W", "S", "A", "D"}, 0.25)
    assert np.allclose(camera.eye, start)


def test_keyboard_strafe_right():
    camera = make_camera()
    start = camera.eye.copy()
    keyboard_input(camera, ["D"], 0.1)
    assert np.allclose(camera.eye, start + 5.0 * 0.1 * camera.right)


def test_keyboard_escape_requests_close():
    camera = make_camera()
    assert keyboard_input(camera, {"Escape"}, 0.1) is True


def test_mouse_at_centre_keeps_angles():
    camera = make_camera()
    yaw, pitch = camera.yaw, camera.pitch
    mouse_input(camera, 512, 384)
    assert camera.yaw == pytest.approx(yaw)
    assert camera.pitch == pytest.approx(pitch)
    assert np.linalg.norm(camera.front) == pytest.approx(1.0)


def test_mouse_offset_turns_camera():
    camera = make_camera()
    yaw, pitch = camera.yaw, camera.pitch
    mouse_input(camera, 612, 284)
    assert camera.yaw - yaw == pytest.approx(0.5)
    assert camera.pitch - pitch == pytest.approx(0.5)
    assert camera.front[1] == pytest.approx(math.sin(camera.pitch))


def test_frame_matrices_consistent():
    camera = make_camera()
    objects = build_objects()
    frames = frame_matrices(camera, objects)
    assert [obj for obj, _, _ in frames] == objects
    assert np.allclose(camera.target, camera.eye + camera.front)
    for obj, mv, mvp in frames:
        assert np.allclose(mv, camera.view @ obj.model_matrix())
        assert np.allclose(mvp, camera.projection @ mv)