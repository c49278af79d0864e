"""Runtime type identifiers derived from type names."""

from __future__ import annotations

from dataclasses import dataclass

from prayengine.fnv import fnv1a_32

TYPE_NAME_LEN = 50


def _check_name(name: str) -> None:
    if len(name.encode("utf-8")) >= TYPE_NAME_LEN:
        raise ValueError(f"type name {name!r} must be shorter than {TYPE_NAME_LEN} bytes")


@dataclass
class TypeInfo:
    """A named type whose id is 0 until :meth:`register` is called."""

    name: str
    id: int = 0

    def __post_init__(self) -> None:
        _check_name(self.name)

    def register(self) -> int:
        """Set the id to the FNV-1a hash of the name and return it."""
        self.id = fnv1a_32(self.name)
        return self.id


def type_name(obj) -> str:
    """Return the type name for a TypeInfo, a name, a class or an instance."""
    if isinstance(obj, TypeInfo):
        return obj.name
    if isinstance(obj, str):
        return obj
    if isinstance(obj, type):
        return obj.__name__
    return type(obj).__name__


def type_id(obj) -> int:
    """Return the type id for a TypeInfo, a name, a class or an instance.

    A TypeInfo yields its stored id; anything else is hashed from its name.
    """
    if isinstance(obj, TypeInfo):
        return obj.id
    name = type_name(obj)
    _check_name(name)
    return fnv1a_32(name)