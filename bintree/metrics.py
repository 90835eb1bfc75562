"""Measurements and relations over binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def _walk(tree: Optional[Node]) -> Iterator[tuple[Node, int]]:
    """Yield every node of the tree with its level below the given root."""
    if tree is None:
        return
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        yield node, level
        if node.right is not None:
            stack.append((node.right, level + 1))
        if node.left is not None:
            stack.append((node.left, level + 1))


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if the node exists and has no children."""
    return node is not None and node.is_leaf()


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    return max((level for _, level in _walk(tree)), default=0)


def _levels(tree: Optional[Node]) -> int:
    return 0 if tree is None else height(tree) + 1


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root; 0 for None."""
    count = 0
    if tree is None:
        return count
    node = tree.parent
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node, _ in _walk(tree) if node.is_leaf())


def inner_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node, _ in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's level count minus the right's; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node, _ in _walk(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one level."""
    if tree is None:
        return False
    levels = 0
    node: Optional[Node] = tree
    while node is not None:
        levels += 1
        node = node.left
    for node, level in _walk(tree):
        if node.is_leaf():
            if level + 1 != levels:
                return False
        elif node.left is None or node.right is None:
            return False
    return True


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, if any."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)