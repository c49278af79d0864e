"""Two-dimensional vectors and the geometry helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from prayengine.common_utils import feq


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D point or direction."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def move_towards(current: Vector2, target: Vector2, max_distance_delta: float) -> Vector2:
    """Step from ``current`` towards ``target`` by at most ``max_distance_delta``.

    The target is returned once it lies within reach; a negative delta moves away.
    """
    delta_x = target.x - current.x
    delta_y = target.y - current.y
    sq_dist = delta_x * delta_x + delta_y * delta_y
    if feq(sq_dist, 0.0) or (
        max_distance_delta >= 0 and sq_dist <= max_distance_delta * max_distance_delta
    ):
        return target
    dist = math.sqrt(sq_dist)
    return Vector2(
        current.x + delta_x / dist * max_distance_delta,
        current.y + delta_y / dist * max_distance_delta,
    )


def add(v1: Vector2, v2: Vector2) -> Vector2:
    """Return the component-wise sum of two vectors."""
    return Vector2(v1.x + v2.x, v1.y + v2.y)


def distance(p1: Vector2, p2: Vector2) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def equals(v1: Vector2, v2: Vector2) -> bool:
    """Return True when both components are equal within single-precision epsilon."""
    return feq(v1.x, v2.x) and feq(v1.y, v2.y)


def point_on_circle(origin: Vector2, radians: float, radius: float) -> Vector2:
    """Return the point at angle ``radians`` on a circle of ``radius`` around ``origin``."""
    return Vector2(
        radius * math.cos(radians) + origin.x,
        radius * math.sin(radians) + origin.y,
    )


def calc_triangle(
    origin: Vector2, rotation_degrees: float, radius: float
) -> tuple[Vector2, Vector2, Vector2]:
    """Return the corners of an equilateral triangle centred on ``origin``."""
    return (
        point_on_circle(origin, math.radians(rotation_degrees), radius),
        point_on_circle(origin, math.radians(120 + rotation_degrees), radius),
        point_on_circle(origin, math.radians(240 + rotation_degrees), radius),
    )


def calc_angle(p1: Vector2, p2: Vector2) -> float:
    """Return the angle in degrees of the direction from ``p2`` to ``p1``."""
    return math.degrees(math.atan2(p1.y - p2.y, p1.x - p2.x))


def calc_slope(p1: Vector2, p2: Vector2) -> float:
    """Return the slope of the line through two points; 1.0 for a vertical line."""
    delta_x = p2.x - p1.x
    delta_y = p2.y - p1.y
    return 1.0 if delta_x == 0 else delta_y / delta_x