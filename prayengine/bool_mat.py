"""A bit-packed matrix of booleans."""

from __future__ import annotations


class BoolMatrix:
    """A ``rows`` x ``cols`` grid of booleans, indexed as ``(x, y)``.

    Reads outside the grid return ``out_of_bounds``; writes outside it are ignored.
    """

    def __init__(self, rows: int, cols: int, initial: bool = False, out_of_bounds: bool = False):
        if rows < 0 or cols < 0:
            raise ValueError("rows and cols must be non-negative")
        self._rows = rows
        self._cols = cols
        self._out_of_bounds = bool(out_of_bounds)
        bytes_per_row = -(-cols // 8)
        fill = 0xFF if initial else 0x00
        self._data = [bytearray([fill]) * bytes_per_row for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def out_of_bounds(self) -> bool:
        return self._out_of_bounds

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._cols and 0 <= y < self._rows

    def get(self, x: int, y: int) -> bool:
        """Return the value at column ``x``, row ``y``."""
        if not self._inside(x, y):
            return self._out_of_bounds
        return bool(self._data[y][x // 8] & (1 << (x % 8)))

    def set(self, x: int, y: int, value: bool) -> None:
        """Set the value at column ``x``, row ``y``; ignored outside the grid."""
        if not self._inside(x, y):
            return
        mask = 1 << (x % 8)
        row = self._data[y]
        if value:
            row[x // 8] |= mask
        else:
            row[x // 8] &= ~mask & 0xFF

    def copy(self) -> BoolMatrix:
        """Return an independent copy of this matrix."""
        clone = BoolMatrix(self._rows, self._cols, False, self._out_of_bounds)
        clone._data = [bytearray(row) for row in self._data]
        return clone