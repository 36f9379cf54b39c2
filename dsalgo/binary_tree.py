"""Binary tree with the four classic traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BNode:
    """A node of a binary tree."""

    data: Any
    left: Optional[BNode] = None
    right: Optional[BNode] = None


class BinaryTree:
    """A binary tree that can be traversed in pre-, in-, post- and level order."""

    def __init__(self, root: Optional[BNode] = None):
        self.root = root

    @classmethod
    def custom(cls) -> BinaryTree:
        """Build the fixed sample tree rooted at 'C'.

        'C' has 'B' (with left child 'A') on its left and a right-leaning
        chain 'D', 'E', 'F', 'G' on its right.
        """
        root = BNode("C")
        root.left = BNode("B", left=BNode("A"))
        root.right = BNode("D", right=BNode("E", right=BNode("F", right=BNode("G"))))
        return cls(root)

    def insert(self, x) -> None:
        """Insert ``x`` in search order: larger keys go right, others left.

        Raises ValueError if ``x`` is already in the tree.
        """
        if self.root is None:
            self.root = BNode(x)
            return
        node = self.root
        while True:
            if node.data == x:
                raise ValueError(f"value already present: {x!r}")
            if node.data < x:
                if node.right is None:
                    node.right = BNode(x)
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = BNode(x)
                    return
                node = node.left

    def preorder(self) -> list:
        """Return the values root first, then left subtree, then right."""
        result = []
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.data)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return result

    def inorder(self) -> list:
        """Return the values left subtree first, then root, then right."""
        result = []
        pending = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            result.append(node.data)
            node = node.right
        return result

    def postorder(self) -> list:
        """Return the values left subtree first, then right, then root."""
        result = []
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> list:
        """Return the values level by level, each level left to right."""
        result = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result