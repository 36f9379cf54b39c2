"""Doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class LinkedNode:
    """A node of a doubly linked list."""

    data: Any
    prev: Optional[LinkedNode] = None
    next: Optional[LinkedNode] = None


class LinkedList:
    """A doubly linked list with head and tail references."""

    def __init__(self, values=()):
        self.head: Optional[LinkedNode] = None
        self.tail: Optional[LinkedNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value) -> LinkedNode:
        """Add ``value`` at the tail and return its node."""
        node = LinkedNode(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            node.prev = self.tail
            self.tail = node
        self._size += 1
        return node

    def find(self, value) -> Optional[LinkedNode]:
        """Return the first node holding ``value``, or None."""
        node = self.head
        while node is not None:
            if node.data == value:
                return node
            node = node.next
        return None

    def remove_node(self, node: LinkedNode) -> None:
        """Unlink ``node`` from the list.

        Raises ValueError if ``node`` is None.
        """
        if node is None:
            raise ValueError("no node to remove")
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        node.prev = node.next = None
        self._size -= 1

    def __iter__(self) -> Iterator:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "\t".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"