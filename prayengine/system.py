"""Systems: named bundles of per-phase callbacks run in registration order."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

SYSTEM_NAME_LEN = 50

Hook = Callable[[], None]


def noop() -> None:
    """Stand in for a hook a system leaves out; counts how often it ran."""
    noop.calls += 1


noop.calls = 0


@dataclass(frozen=True)
class System:
    """A system's name and its optional lifecycle and update hooks."""

    name: str = ""
    start: Optional[Hook] = None
    stop: Optional[Hook] = None
    game_update: Optional[Hook] = None
    render_world_space: Optional[Hook] = None
    render_screen_space: Optional[Hook] = None

    def __post_init__(self) -> None:
        if len(self.name.encode("utf-8")) >= SYSTEM_NAME_LEN:
            raise ValueError(f"system name must be shorter than {SYSTEM_NAME_LEN} bytes")


_HOOKS = ("start", "stop", "game_update", "render_world_space", "render_screen_space")


class SystemList:
    """Registered systems; each ``run_*`` calls one hook of every system in order."""

    def __init__(self):
        self._systems: list[System] = []

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[System]:
        return iter(self._systems)

    def register(self, system: System) -> System:
        """Store a copy of ``system`` with missing hooks set to :func:`noop` and return it."""
        filled = {hook: noop for hook in _HOOKS if getattr(system, hook) is None}
        stored = dataclasses.replace(system, **filled)
        self._systems.append(stored)
        return stored

    def _run(self, hook: str) -> None:
        for system in self._systems:
            getattr(system, hook)()

    def run_start(self) -> None:
        self._run("start")

    def run_stop(self) -> None:
        self._run("stop")

    def run_game_update(self) -> None:
        self._run("game_update")

    def run_render_world_space(self) -> None:
        self._run("render_world_space")

    def run_render_screen_space(self) -> None:
        self._run("render_screen_space")

    def clear(self) -> None:
        """Remove every system."""
        self._systems.clear()