"""Binary search tree of unique, ordered keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class BSNode:
    """A node of a binary search tree."""

    data: Any
    left: Optional[BSNode] = None
    right: Optional[BSNode] = None


class BinarySearchTree:
    """A binary search tree that holds each key at most once.

    Keys in a node's left subtree are smaller than the node's key and keys
    in its right subtree are larger.
    """

    def __init__(self, values=()):
        self.root: Optional[BSNode] = None
        for value in values:
            self.insert(value)

    def search(self, x) -> Optional[BSNode]:
        """Return the node holding ``x``, or None if it is absent."""
        node = self.root
        while node is not None:
            if x < node.data:
                node = node.left
            elif x > node.data:
                node = node.right
            else:
                return node
        return None

    def insert(self, x) -> None:
        """Add ``x`` to the tree; a key already present is left as it is."""
        if self.root is None:
            self.root = BSNode(x)
            return

        parent = None
        node = self.root
        while node is not None:
            parent = node
            if x < node.data:
                node = node.left
            elif x > node.data:
                node = node.right
            else:
                return

        if x < parent.data:
            parent.left = BSNode(x)
        else:
            parent.right = BSNode(x)

    def delete(self, x) -> None:
        """Remove ``x`` from the tree.

        A node with two children is replaced by the largest node of its
        left subtree. Raises KeyError if ``x`` is not in the tree.
        """
        parent = None
        node = self.root
        while node is not None and node.data != x:
            parent = node
            node = node.left if x < node.data else node.right

        if node is None:
            raise KeyError(x)

        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            self._relink(parent, node, child)
            return

        max_parent = node
        max_node = node.left
        while max_node.right is not None:
            max_parent = max_node
            max_node = max_node.right

        if max_parent.left is max_node:
            max_parent.left = max_node.left
        else:
            max_parent.right = max_node.left

        max_node.left = node.left
        max_node.right = node.right
        self._relink(parent, node, max_node)

    def _relink(self, parent, old, new) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def inorder(self) -> list:
        """Return the keys in ascending order."""
        return list(self)

    def __contains__(self, x) -> bool:
        return self.search(x) is not None

    def __iter__(self) -> Iterator:
        pending = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"