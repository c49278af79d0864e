"""Result codes and the exceptions raised for them."""

from __future__ import annotations

from enum import IntEnum


class Rc(IntEnum):
    """Result codes used throughout the engine."""

    OK = 0
    ERROR = -1
    MEM_ALLOC_ERROR = -2
    BAD_PARAM = -3
    OUT_OF_BOUNDS = -4
    NOT_FOUND = -5


def rc_to_str(rc) -> str:
    """Return the name of a result code, or ``"UNKNOWN"``."""
    try:
        return Rc(rc).name
    except ValueError:
        return "UNKNOWN"


class PrayError(Exception):
    """Base class for engine errors; ``rc`` holds the matching result code."""

    rc: Rc = Rc.ERROR


class AllocationError(PrayError):
    """Memory for an object could not be obtained."""

    rc = Rc.MEM_ALLOC_ERROR


class BadParamError(PrayError, ValueError):
    """An argument was rejected, e.g. a duplicate registration."""

    rc = Rc.BAD_PARAM


class OutOfBoundsError(PrayError, IndexError):
    """An index lies outside the container."""

    rc = Rc.OUT_OF_BOUNDS


class NotFoundError(PrayError, LookupError):
    """A requested item is not present."""

    rc = Rc.NOT_FOUND