"""The set of live entities and component-based queries over it."""

from __future__ import annotations

from typing import Iterable, Optional

from prayengine.entity import Entity
from prayengine.errors import BadParamError, NotFoundError


class EntityRegistry:
    """Registered entities kept in slots; freed slots are reused first."""

    def __init__(self):
        self._slots: list[Optional[Entity]] = []

    def __contains__(self, entity) -> bool:
        return entity is not None and any(slot is entity for slot in self._slots)

    def _entities(self):
        return (slot for slot in self._slots if slot is not None)

    def register(self, entity: Entity) -> None:
        """Add ``entity``; raise :class:`BadParamError` if it is already registered."""
        if entity in self:
            raise BadParamError("entity is already registered")
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = entity
                return
        self._slots.append(entity)

    def unregister(self, entity: Entity) -> None:
        """Remove ``entity``; raise :class:`NotFoundError` if it is not registered."""
        for index, slot in enumerate(self._slots):
            if slot is not None and slot is entity:
                self._slots[index] = None
                return
        raise NotFoundError("entity is not registered")

    @staticmethod
    def _matches(entity: Entity, component_ids: list[int]) -> bool:
        return all(entity.get_component(cid) is not None for cid in component_ids)

    def lookup(self, component_ids: Iterable[int]) -> Optional[Entity]:
        """Return the first entity that has every listed component, or None."""
        wanted = list(component_ids)
        return next((e for e in self._entities() if self._matches(e, wanted)), None)

    def lookup_all(self, component_ids: Iterable[int]) -> list[Entity]:
        """Return every entity that has all listed components, in slot order."""
        wanted = list(component_ids)
        return [e for e in self._entities() if self._matches(e, wanted)]

    def destroy(self) -> None:
        """Free every registered entity and empty the registry."""
        for entity in self._entities():
            entity.free()
        self._slots.clear()