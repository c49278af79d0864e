"""Tracked allocations with running memory statistics."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class MemStats:
    """A snapshot of allocation statistics, in bytes and counts."""

    current: int = 0
    peak: int = 0
    alltime: int = 0
    allocations: int = 0
    frees: int = 0


@dataclass(eq=False)
class Allocation:
    """A zero-filled buffer handed out by a :class:`MemoryTracker`."""

    size: int
    data: bytearray = field(repr=False)


class MemoryTracker:
    """Hands out buffers and keeps thread-safe totals of what is live."""

    def __init__(self):
        self._lock = threading.Lock()
        self._live: set[Allocation] = set()
        self._stats = MemStats()

    def reset(self) -> None:
        """Zero the statistics and forget outstanding allocations."""
        with self._lock:
            self._stats = MemStats()
            self._live.clear()

    def _allocate(self, size: int) -> Allocation:
        if size < 0:
            raise ValueError("allocation size must be non-negative")
        allocation = Allocation(size, bytearray(size))
        with self._lock:
            self._live.add(allocation)
            stats = self._stats
            current = stats.current + size
            self._stats = replace(
                stats,
                current=current,
                alltime=stats.alltime + size,
                peak=max(stats.peak, current),
                allocations=stats.allocations + 1,
            )
        return allocation

    def calloc(self, num: int, size: int) -> Allocation:
        """Allocate ``num`` elements of ``size`` bytes each."""
        if num < 0 or size < 0:
            raise ValueError("num and size must be non-negative")
        return self._allocate(num * size)

    def malloc(self, size: int) -> Allocation:
        """Allocate ``size`` bytes."""
        return self._allocate(size)

    def free(self, allocation: Allocation) -> None:
        """Release an allocation made by this tracker."""
        with self._lock:
            if allocation not in self._live:
                raise ValueError("allocation is not live in this tracker")
            self._live.remove(allocation)
            stats = self._stats
            self._stats = replace(
                stats,
                current=stats.current - allocation.size,
                frees=stats.frees + 1,
            )

    def stats(self) -> MemStats:
        """Return the current statistics."""
        with self._lock:
            return self._stats

    def format_stats(self) -> str:
        """Return the statistics as a printable block of text."""
        current = self.stats()
        return (
            "tmem stats:\n"
            f"\tcurrent : {current.current}b\n"
            f"\talltime : {current.alltime}b\n"
            f"\tpeak    : {current.peak}b\n"
            f"\tallocs  : {current.allocations}\n"
            f"\tfrees   : {current.frees}\n"
        )