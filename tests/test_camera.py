import math

import pytest

from mazeblocks.camera import Camera


def test_position_on_x_axis():
    cam = Camera()
    cam.set_position((20, 0, 0))
    assert cam.r == pytest.approx(20)
    assert cam.angle_x == pytest.approx(0)
    assert cam.angle_y == pytest.approx(0)
    assert cam.position == pytest.approx((20, 0, 0))


@pytest.mark.parametrize("point", [(20, 15, 17.5), (30, 15, 17.5), (-4, 3, 9)])
def test_radius_is_preserved(point):
    cam = Camera()
    cam.set_position(point)
    assert cam.r == pytest.approx(math.dist(point, (0, 0, 0)))
    assert math.dist(cam.position, (0, 0, 0)) == pytest.approx(cam.r)
    assert 0 <= cam.angle_x <= 180
    assert 0 <= cam.angle_y <= 90


def test_vertical_axis_rejected():
    with pytest.raises(ValueError):
        Camera().set_position((0, 10, 0))


def test_rotate_left_right_is_unbounded():
    cam = Camera()
    cam.set_position((20, 15, 17.5))
    before = cam.angle_y
    cam.rotate_left_right(400)
    assert cam.angle_y == pytest.approx(before + 400)


def test_rotate_up_down_limits():
    cam = Camera()
    cam.r = 20
    cam.angle_x = 45
    cam.rotate_up_down(10)
    assert cam.angle_x == pytest.approx(55)
    cam.rotate_up_down(50)
    assert cam.angle_x == pytest.approx(55)
    cam.rotate_up_down(-51)
    assert cam.angle_x == pytest.approx(55)


def test_zoom_limits():
    cam = Camera()
    cam.r = 20
    cam.zoom_in_out(-5)
    assert cam.r == pytest.approx(15)
    cam.zoom_in_out(-1)
    assert cam.r == pytest.approx(15)
    cam.zoom_in_out(50)
    assert cam.r == pytest.approx(15)
    cam.zoom_in_out(45)
    assert cam.r == pytest.approx(60)


def test_look_at():
    cam = Camera()
    cam.set_position((20, 15, 17.5))
    eye, center, up = cam.look_at()
    assert eye == pytest.approx(cam.position)
    assert center == (0.0, 0.0, 0.0)
    assert up == (0.0, 1.0, 0.0)