"""The 2D camera used when rendering world space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from prayengine.vector import Vector2


@dataclass
class Camera2D:
    """A 2D camera: ``target`` in the world appears at ``offset`` on screen.

    ``rotation`` is in degrees and ``zoom`` scales the world; every field
    starts at zero.
    """

    offset: Vector2 = field(default_factory=Vector2)
    target: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    zoom: float = 0.0

    def world_to_screen(self, point: Vector2) -> Vector2:
        """Return where a world-space point lands on screen."""
        dx = (point.x - self.target.x) * self.zoom
        dy = (point.y - self.target.y) * self.zoom
        angle = math.radians(self.rotation)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(
            dx * cos_a - dy * sin_a + self.offset.x,
            dx * sin_a + dy * cos_a + self.offset.y,
        )


_camera = Camera2D()


def get_camera() -> Camera2D:
    """Return the engine's shared camera."""
    return _camera