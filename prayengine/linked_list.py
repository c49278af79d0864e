"""An intrusive doubly linked list whose nodes carry a data reference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A list node; ``data`` points at the object that owns it."""

    data: Any = None
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list of :class:`Node` objects, compared by identity.

    Adding a node that is already in the list does nothing.
    """

    def __init__(self):
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __contains__(self, node) -> bool:
        return any(current is node for current in self)

    def is_empty(self) -> bool:
        return self.head is None

    def append(self, node: Node) -> None:
        """Add ``node`` at the back."""
        self.push_back(node)

    def push_front(self, node: Node) -> None:
        """Add ``node`` at the front."""
        if node in self:
            return
        node.prev = None
        node.next = self.head
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def push_back(self, node: Node) -> None:
        """Add ``node`` at the back."""
        if node in self:
            return
        node.next = None
        node.prev = self.tail
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def pop_front(self) -> Optional[Node]:
        """Remove and return the first node, or None when empty."""
        node = self.head
        if node is None:
            return None
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        node.next = None
        self._size -= 1
        return node

    def pop_back(self) -> Optional[Node]:
        """Remove and return the last node, or None when empty."""
        node = self.tail
        if node is None:
            return None
        self.tail = node.prev
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        node.prev = None
        self._size -= 1
        return node

    def remove(self, node: Node) -> Optional[Node]:
        """Unlink ``node`` and return it, or return None if it is not in the list."""
        if node is None or node not in self:
            return None
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        node.next = None
        node.prev = None
        self._size -= 1
        return node