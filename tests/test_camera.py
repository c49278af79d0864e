import pytest

from prayengine.camera import Camera2D, get_camera
from prayengine.vector import Vector2, distance


def test_get_camera_returns_shared_instance():
    camera = get_camera()
    previous = camera.zoom
    try:
        camera.zoom = 3.5
        assert get_camera().zoom == 3.5
    finally:
        camera.zoom = previous


def test_default_camera_is_zeroed():
    camera = Camera2D()
    assert camera.zoom == 0.0
    assert camera.rotation == 0.0
    assert camera.offset == Vector2()
    assert camera.target == Vector2()


def test_identity_camera_keeps_points():
    camera = Camera2D(zoom=1.0)
    point = Vector2(12.5, -3.0)
    result = camera.world_to_screen(point)
    assert result.x == pytest.approx(point.x)
    assert result.y == pytest.approx(point.y)


def test_target_maps_to_offset():
    camera = Camera2D(offset=Vector2(100.0, 50.0), target=Vector2(10.0, 10.0), zoom=1.0, rotation=37.0)
    result = camera.world_to_screen(camera.target)
    assert result.x == pytest.approx(camera.offset.x)
    assert result.y == pytest.approx(camera.offset.y)


def test_zoom_scales_distance_from_target():
    camera = Camera2D(offset=Vector2(5.0, 5.0), target=Vector2(1.0, 1.0), zoom=2.0)
    point = Vector2(4.0, 5.0)
    screen = camera.world_to_screen(point)
    assert distance(camera.offset, screen) == pytest.approx(2.0 * distance(camera.target, point))


def test_rotation_turns_clockwise_on_screen():
    camera = Camera2D(zoom=1.0, rotation=90.0)
    result = camera.world_to_screen(Vector2(1.0, 0.0))
    assert result.x == pytest.approx(0.0, abs=1e-9)
    assert result.y == pytest.approx(1.0)