"""A fixed-length list with bounds-checked access and explicit resizing."""

from __future__ import annotations

from typing import Any, Iterator

from prayengine.errors import OutOfBoundsError


class ArrayList:
    """A list of ``length`` slots, each starting as ``default``.

    Reads outside the list return None; writes outside it raise
    :class:`OutOfBoundsError`. Negative indices are out of bounds. The
    default value is shared by every slot it fills, so it should be immutable.
    """

    def __init__(self, length: int = 0, default: Any = None):
        if length < 0:
            raise ValueError("length must be non-negative")
        self._default = default
        self._items = [default] * length

    @property
    def default(self) -> Any:
        return self._default

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._items.append(value)

    def resize(self, length: int) -> None:
        """Truncate or extend to ``length`` slots, filling new ones with the default."""
        if length < 0:
            raise ValueError("length must be non-negative")
        if length == 0:
            self.clear()
            return
        del self._items[length:]
        self._items.extend([self._default] * (length - len(self._items)))

    def clear(self) -> None:
        """Remove every slot."""
        self._items.clear()

    def get(self, index: int) -> Any:
        """Return the value at ``index``, or None when it is out of bounds."""
        if not self._in_range(index):
            return None
        return self._items[index]

    def set(self, index: int, value: Any) -> None:
        """Store ``value`` at ``index``."""
        if not self._in_range(index):
            raise OutOfBoundsError(f"index {index} out of range for length {len(self._items)}")
        self._items[index] = value