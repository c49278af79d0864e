"""Component types every game gets: a 2D transform and a 2D sprite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from prayengine.component import ComponentRegistry
from prayengine.vector import Vector2


@dataclass
class Transform2D:
    """Position in world space and rotation in degrees."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0


@dataclass
class Sprite2D:
    """A region of a texture drawn at the entity's transform.

    ``source`` is ``(x, y, width, height)`` within ``texture``; a negative
    width or height flips the image. ``origin`` is the pivot, relative to the
    drawn image, that lands on the entity's position. When ``shader`` is set,
    ``pre_shader_callback(entity, sprite)`` runs first and ``shader(image)``
    returns the image to draw.
    """

    texture: Any = None
    source: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    origin: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    shader: Optional[Callable[[Any], Any]] = None
    pre_shader_callback: Optional[Callable[[Any, "Sprite2D"], None]] = None


def register_default_components(components: ComponentRegistry) -> None:
    """Register :class:`Transform2D` and :class:`Sprite2D` without callbacks."""
    components.register(Transform2D, None, None)
    components.register(Sprite2D, None, None)