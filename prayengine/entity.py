"""Entities: an id plus the components built for it."""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Optional

from prayengine.component import ComponentRegistry
from prayengine.errors import NotFoundError

_entity_ids = itertools.count()


class Entity:
    """A bag of components built from the registered component types.

    Ids that are not registered in ``components`` are skipped.
    """

    def __init__(self, component_ids: Iterable[int], components: ComponentRegistry):
        self.entity_id = next(_entity_ids)
        self._components = components
        self._lookup: list[tuple[int, Any]] = []
        for component_id in component_ids:
            try:
                initializer = components.get_initializer(component_id)
            except NotFoundError:
                continue
            instance = initializer.component_type()
            if initializer.initialize is not None:
                initializer.initialize(instance)
            self._lookup.append((component_id, instance))

    def __len__(self) -> int:
        return len(self._lookup)

    def __repr__(self) -> str:
        return f"Entity(entity_id={self.entity_id}, components={len(self._lookup)})"

    def get_component(self, component_id: int) -> Optional[Any]:
        """Return the component with ``component_id``, or None if the entity has none."""
        return next((inst for cid, inst in self._lookup if cid == component_id), None)

    def get_components(self, *args: int) -> tuple:
        """Return the components for each id given, None where one is missing."""
        return tuple(self.get_component(component_id) for component_id in args)

    def free(self) -> None:
        """Run each component's deinitializer and drop all components."""
        for component_id, instance in self._lookup:
            try:
                initializer = self._components.get_initializer(component_id)
            except NotFoundError:
                continue
            if initializer.deinitialize is not None:
                initializer.deinitialize(instance)
        self._lookup.clear()
        return None