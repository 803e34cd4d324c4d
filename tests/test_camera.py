import math

import pytest

from softy.buffer import ColorBuffer
from softy.camera import Camera
from softy.matrix import Mat
from softy.vector import Vec


def _camera():
    return Camera(ColorBuffer(800, 600))


def test_aspect_is_width_over_height():
    assert _camera().aspect() == pytest.approx(800 / 600)


def test_defaults():
    cam = _camera()
    assert (cam.near, cam.far, cam.fov) == (1.0, 1000.0, 60.0)


def test_default_view_is_identity():
    assert _camera().view_matrix().equals(Mat.identity(4))


def test_view_moves_camera_position_to_origin():
    cam = _camera()
    cam.transform.position = Vec(1.0, 2.0, 3.0)
    moved = Vec(1.0, 2.0, 3.0, 1.0) * cam.view_matrix()
    assert moved.equals(Vec(0.0, 0.0, 0.0, 1.0))


def test_projection_focal_length_and_aspect():
    cam = _camera()
    p = cam.projection_matrix()
    assert p[1][1] == pytest.approx(1.0 / math.tan(math.radians(cam.fov / 2)))
    assert p[0][0] * cam.aspect() == pytest.approx(p[1][1])
    assert p[2][3] == -1.0
    assert p[3][3] == 0.0


@pytest.mark.parametrize("plane, ndc_z", [("near", -1.0), ("far", 1.0)])
def test_projection_maps_clip_planes(plane, ndc_z):
    cam = _camera()
    distance = getattr(cam, plane)
    clip = Vec(0.0, 0.0, -distance, 1.0) * cam.projection_matrix()
    assert clip[3] == pytest.approx(distance)
    assert clip[2] / clip[3] == pytest.approx(ndc_z)