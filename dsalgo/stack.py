"""Stack built on a singly linked chain of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _SNode:
    data: Any
    next: Optional[_SNode] = None


class Stack:
    """A last-in, first-out stack."""

    def __init__(self, values=()):
        self._head: Optional[_SNode] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, x) -> None:
        """Put ``x`` on top of the stack."""
        self._head = _SNode(x, self._head)
        self._size += 1

    def pop(self):
        """Remove and return the top value; an empty stack gives None."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def top(self):
        """Return the top value without removing it.

        Raises IndexError if the stack is empty.
        """
        if self._head is None:
            raise IndexError("top of empty stack")
        return self._head.data

    def is_empty(self) -> bool:
        return self._head is None

    def __iter__(self) -> Iterator:
        """Yield the values from top to bottom."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Stack(top->{list(self)!r})"