# prayengine

A small entity-component-system (ECS) engine for 2D games, drawing with pygame.

Entities are bags of components. Components are registered types with optional
initialize and deinitialize callbacks. Systems are named sets of hooks that run
at fixed points of the game loop, in the order they were registered.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the engine window

```
prayengine
```

This opens a resizable window, registers the default components and the sprite
system, and runs the main loop until the window is closed or Escape is pressed.
Options:

- `--width`, `--height`: window size (default 1500 x 1500; the window is not
  allowed to shrink below it)
- `--title`: window title
- `--fps`: target frame rate (default 60)
- `--frames N`: stop after N frames

## Pieces

- `prayengine.component.ComponentRegistry` keeps each component type's
  `ComponentInitializer`: its type id, the type itself (called with no
  arguments to make a fresh component), and the optional `initialize` and
  `deinitialize` callbacks. Registering the same type twice raises
  `BadParamError`; asking for an unknown id raises `NotFoundError`.
- `prayengine.entity.Entity` is built from a list of component ids and a
  registry. It creates each registered component (unknown ids are skipped),
  hands one back with `get_component` or several with `get_components`
  (None where missing), and runs each deinitializer when `free` is called.
- `prayengine.entity_registry.EntityRegistry` holds live entities. `register`
  raises `BadParamError` for an entity already present, `unregister` raises
  `NotFoundError` for one that is not, `lookup` returns the first entity that
  has every component asked for (or None) and `lookup_all` returns all of them.
  `destroy` frees every registered entity.
- `prayengine.system.SystemList` holds `System` objects and runs their
  `start`, `stop`, `game_update`, `render_world_space` and
  `render_screen_space` hooks with the `run_*` methods. Hooks left unset are
  replaced by `noop`.
- `prayengine.default_components` provides `Transform2D` and `Sprite2D` and
  `register_default_components`. `prayengine.default_systems` provides
  `render_sprites`, `make_sprite_system` and `register_default_systems`, which
  draw every entity with a `Sprite2D` (a region of a pygame surface) at its
  `Transform2D`, through the camera.
- `prayengine.camera.get_camera` returns the shared `Camera2D`, whose
  `world_to_screen` maps world points to the screen. Its zoom starts at 0,
  which draws nothing; set `zoom = 1.0` to see sprites.
- `prayengine.engine.Engine` opens the window with `initialize`, runs the
  loop with `run` and tears everything down with `destroy`.

Helpers: `prayengine.vector` (`Vector2`, `move_towards`, `distance`,
`calc_triangle`, `calc_angle`, `point_on_circle`, `calc_slope` and more),
`prayengine.fnv` (FNV-1 and FNV-1a hashes), `prayengine.typeid` (`type_id`,
`type_name`, `TypeInfo`), `prayengine.common_utils` (`feq`, `clamp`,
`in_bounds`, `hexdump`, `random_float`), `prayengine.bool_mat.BoolMatrix`,
`prayengine.linked_list.LinkedList`, `prayengine.array_list.ArrayList`,
`prayengine.tmem.MemoryTracker` (counts allocations) and `prayengine.errors`
(`Rc` result codes and the exceptions that carry them).

## A short example

```python
from dataclasses import dataclass

from prayengine.component import ComponentRegistry
from prayengine.entity import Entity
from prayengine.entity_registry import EntityRegistry
from prayengine.typeid import type_id


@dataclass
class Health:
    current: int = 100


components = ComponentRegistry()
components.register(Health, None, None)

entities = EntityRegistry()
hero = Entity([type_id(Health)], components)
entities.register(hero)

found = entities.lookup([type_id(Health)])
print(found.get_component(type_id(Health)).current)  # 100
```

## What it does not do

There is no physics, no asset loading, no audio and no input handling beyond
closing the window; the `prayengine` command shows an empty window unless a
game registers its own entities and systems.