import math

import pytest

from prayengine.vector import (
    Vector2,
    add,
    calc_angle,
    calc_slope,
    calc_triangle,
    distance,
    equals,
    move_towards,
    point_on_circle,
)


def test_move_towards_returns_target_within_reach():
    target = Vector2(3.0, 4.0)
    assert move_towards(Vector2(), target, 10.0) == target


def test_move_towards_same_point_returns_target():
    target = Vector2(2.0, -7.0)
    assert move_towards(target, target, 0.0) == target


def test_move_towards_partial_step():
    current = Vector2(0.0, 0.0)
    target = Vector2(3.0, 4.0)
    step = 1.0
    moved = move_towards(current, target, step)
    assert distance(current, moved) == pytest.approx(step)
    assert distance(moved, target) == pytest.approx(distance(current, target) - step)


def test_move_towards_negative_step_moves_away():
    current = Vector2(1.0, 1.0)
    target = Vector2(5.0, 1.0)
    moved = move_towards(current, target, -2.0)
    assert distance(moved, target) == pytest.approx(distance(current, target) + 2.0)


def test_add_is_commutative_with_zero_identity():
    a = Vector2(1.5, -2.0)
    b = Vector2(-4.0, 8.25)
    assert add(a, b) == add(b, a)
    assert add(a, Vector2()) == a


def test_distance_symmetric_and_zero_for_same_point():
    a = Vector2(1.0, 2.0)
    b = Vector2(-3.0, 5.0)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0.0


def test_equals_uses_tolerance():
    assert equals(Vector2(1.0, 1.0), Vector2(1.0 + 1e-9, 1.0))
    assert not equals(Vector2(1.0, 1.0), Vector2(1.1, 1.0))


def test_point_on_circle_at_zero_angle():
    origin = Vector2(10.0, 20.0)
    point = point_on_circle(origin, 0.0, 5.0)
    assert point.x == pytest.approx(origin.x + 5.0)
    assert point.y == pytest.approx(origin.y)


@pytest.mark.parametrize("radians", [0.3, 1.0, 2.5, -1.2])
def test_point_on_circle_lies_at_radius(radians):
    origin = Vector2(-3.0, 4.0)
    assert distance(origin, point_on_circle(origin, radians, 7.0)) == pytest.approx(7.0)


def test_triangle_is_equilateral_around_origin():
    origin = Vector2(2.0, 3.0)
    radius = 6.0
    points = calc_triangle(origin, 30.0, radius)
    assert len(points) == 3
    for point in points:
        assert distance(origin, point) == pytest.approx(radius)
    sides = [distance(points[0], points[1]), distance(points[1], points[2]), distance(points[2], points[0])]
    assert sides[0] == pytest.approx(sides[1])
    assert sides[1] == pytest.approx(sides[2])
    first = point_on_circle(origin, math.radians(30.0), radius)
    assert equals(points[0], first)


def test_calc_angle():
    assert calc_angle(Vector2(1.0, 0.0), Vector2(0.0, 0.0)) == pytest.approx(0.0)
    assert calc_angle(Vector2(0.0, 0.0), Vector2(1.0, 0.0)) == pytest.approx(180.0)
    assert calc_angle(Vector2(0.0, 1.0), Vector2(0.0, 0.0)) == pytest.approx(90.0)


def test_calc_slope_vertical_line_is_one():
    assert calc_slope(Vector2(3.0, 1.0), Vector2(3.0, 9.0)) == 1.0


def test_calc_slope_symmetric():
    a = Vector2(0.0, 0.0)
    b = Vector2(2.0, 6.0)
    assert calc_slope(a, b) == pytest.approx(6.0 / 2.0)
    assert calc_slope(a, b) == pytest.approx(calc_slope(b, a))