"""Small numeric helpers, a hex dump formatter and random floats."""

from __future__ import annotations

import random

FLT_EPSILON = 2.0**-23
_HEX_COLUMNS = 16


def feq(a: float, b: float) -> bool:
    """Return True when ``a`` and ``b`` differ by less than single-precision epsilon."""
    return abs(a - b) < FLT_EPSILON


def in_bounds(value, low, high) -> bool:
    """Return True when ``low <= value < high``."""
    return low <= value < high


def clamp(value, low, high):
    """Limit ``value`` to the range ``[low, high]``."""
    return min(high, max(low, value))


def hexdump(data) -> str:
    """Format bytes as rows of 16 upper-case hex cells, each row padded and ended by a newline."""
    raw = memoryview(data).tobytes()
    rows = []
    for start in range(0, len(raw), _HEX_COLUMNS):
        cells = "".join(f"{byte:02X} " for byte in raw[start:start + _HEX_COLUMNS])
        rows.append(cells.ljust(_HEX_COLUMNS * 3) + "\n")
    return "".join(rows)


def random_float(low: float, high: float) -> float:
    """Return a random float between ``low`` and ``high``."""
    return low + random.random() * (high - low)