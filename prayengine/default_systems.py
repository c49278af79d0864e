"""Systems every game gets: drawing of sprites in world space."""

from __future__ import annotations

import math
from typing import Callable, Optional

import pygame

from prayengine.camera import Camera2D, get_camera
from prayengine.default_components import Sprite2D, Transform2D
from prayengine.entity_registry import EntityRegistry
from prayengine.system import System, SystemList
from prayengine.typeid import type_id
from prayengine.vector import Vector2, add

SPRITE_SYSTEM_NAME = "Sprite 2D System"


def _rotate(vector: Vector2, degrees: float) -> Vector2:
    angle = math.radians(degrees)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vector2(vector.x * cos_a - vector.y * sin_a, vector.x * sin_a + vector.y * cos_a)


def _source_image(sprite: Sprite2D) -> Optional[pygame.Surface]:
    x, y, width, height = sprite.source
    rect = pygame.Rect(int(x), int(y), int(abs(width)), int(abs(height)))
    rect = rect.clip(sprite.texture.get_rect())
    if rect.width == 0 or rect.height == 0:
        return None
    image = sprite.texture.subsurface(rect).copy()
    if width < 0 or height < 0:
        image = pygame.transform.flip(image, width < 0, height < 0)
    return image


def _transform(image: pygame.Surface, degrees: float, zoom: float) -> pygame.Surface:
    if zoom != 1:
        width, height = image.get_size()
        size = (max(1, round(width * abs(zoom))), max(1, round(height * abs(zoom))))
        image = pygame.transform.scale(image, size)
        if zoom < 0:
            image = pygame.transform.flip(image, True, True)
    if degrees % 360:
        image = pygame.transform.rotate(image, -degrees)
    return image


def render_sprites(
    entities: EntityRegistry, surface: pygame.Surface, camera: Optional[Camera2D] = None
) -> int:
    """Draw every registered entity with a :class:`Sprite2D` and return how many were drawn.

    An entity without a :class:`Transform2D` is drawn at the world origin.
    """
    if camera is None:
        camera = get_camera()
    if camera.zoom == 0:
        return 0
    sprite_id = type_id(Sprite2D)
    transform_id = type_id(Transform2D)
    drawn = 0
    for entity in entities.lookup_all([sprite_id]):
        sprite, transform = entity.get_components(sprite_id, transform_id)
        if transform is not None:
            position, rotation = transform.position, transform.rotation
        else:
            position, rotation = Vector2(), 0.0
        if sprite.texture is None:
            continue
        image = _source_image(sprite)
        if image is None:
            continue
        if sprite.shader is not None:
            if sprite.pre_shader_callback is not None:
                sprite.pre_shader_callback(entity, sprite)
            image = sprite.shader(image)

        angle = rotation + sprite.rotation
        width, height = image.get_size()
        to_center = Vector2(width / 2 - sprite.origin.x, height / 2 - sprite.origin.y)
        center = camera.world_to_screen(add(position, _rotate(to_center, angle)))
        image = _transform(image, angle + camera.rotation, camera.zoom)
        surface.blit(image, image.get_rect(center=(round(center.x), round(center.y))))
        drawn += 1
    return drawn


def make_sprite_system(
    entities: EntityRegistry,
    surface_provider: Callable[[], pygame.Surface],
    camera: Optional[Camera2D] = None,
) -> System:
    """Return the system that draws sprites onto ``surface_provider()`` in world space."""

    def render_world_space() -> None:
        render_sprites(entities, surface_provider(), camera)

    return System(name=SPRITE_SYSTEM_NAME, render_world_space=render_world_space)


def register_default_systems(
    systems: SystemList,
    entities: EntityRegistry,
    surface_provider: Callable[[], pygame.Surface],
    camera: Optional[Camera2D] = None,
) -> System:
    """Register the sprite system in ``systems`` and return the stored system."""
    return systems.register(make_sprite_system(entities, surface_provider, camera))