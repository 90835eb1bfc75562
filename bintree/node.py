"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def add_left(self, value: int) -> Node:
        """Attach a new leaf as the left child, replacing any existing one."""
        if self.left is not None:
            self.left.parent = None
        self.left = Node(value, self)
        return self.left

    def add_right(self, value: int) -> Node:
        """Attach a new leaf as the right child, replacing any existing one."""
        if self.right is not None:
            self.right.parent = None
        self.right = Node(value, self)
        return self.right

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child becomes its left child."""
        node = Node(value, self)
        node.left = self.left
        if self.left is not None:
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child becomes its right child."""
        node = Node(value, self)
        node.right = self.right
        if self.right is not None:
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def delete(self) -> None:
        """Detach this node from its parent and unlink its whole subtree."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        for node in list(self._subtree()):
            node.parent = None
            node.left = None
            node.right = None

    def _subtree(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)