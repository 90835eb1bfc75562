"""Text drawing of binary trees."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.metrics import height
from bintree.node import Node


def _write(row: list[str], column: int, text: str) -> None:
    end = column + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[column:end] = text


def _draw(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    label = f"({node.value:03d})"
    width = len(label)
    is_left = node.parent is not None and node.parent.left is node
    left = _draw(node.left, offset, level + 1, rows)
    right = _draw(node.right, offset + left + width, level + 1, rows)
    _write(rows[level], offset + left, label)
    if level:
        above = rows[level - 1]
        half = width // 2
        if is_left:
            _write(above, offset + left + half, "-" * (width + right))
        else:
            _write(above, offset - half, "-" * (left + width))
        _write(above, offset + left + half, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    lines = []
    for row in rows:
        line = "".join(row).ljust(2)
        lines.append(line[:2] + line[2:].rstrip(" "))
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))