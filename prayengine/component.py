"""Registry of component types and the callbacks that set them up and tear them down."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from prayengine.errors import BadParamError, NotFoundError
from prayengine.typeid import type_id

Consumer = Callable[[Any], None]


@dataclass(frozen=True)
class ComponentInitializer:
    """How to build one component type.

    ``component_type`` is called with no arguments to make a fresh component.
    ``initialize`` then runs on it, and ``deinitialize`` runs when its entity
    is freed. Either callback may be None.
    """

    id: int
    component_type: Callable[[], Any]
    initialize: Optional[Consumer] = None
    deinitialize: Optional[Consumer] = None


class ComponentRegistry:
    """Known component types, keyed by their type id, in registration order."""

    def __init__(self):
        self._initializers: dict[int, ComponentInitializer] = {}

    def __len__(self) -> int:
        return len(self._initializers)

    def register(
        self,
        component_type,
        initialize: Optional[Consumer] = None,
        deinitialize: Optional[Consumer] = None,
    ) -> ComponentInitializer:
        """Register ``component_type`` under its type id.

        Raises :class:`BadParamError` if a component with the same id is
        already registered.
        """
        component_id = type_id(component_type)
        if component_id in self._initializers:
            raise BadParamError(f"component {component_id:#010x} is already registered")
        initializer = ComponentInitializer(component_id, component_type, initialize, deinitialize)
        self._initializers[component_id] = initializer
        return initializer

    def get_initializer(self, component_id: int) -> ComponentInitializer:
        """Return the initializer for ``component_id``; raise :class:`NotFoundError` if unknown."""
        try:
            return self._initializers[component_id]
        except KeyError:
            raise NotFoundError(f"component {component_id!r} is not registered") from None

    def clear(self) -> None:
        """Forget every registered component."""
        self._initializers.clear()