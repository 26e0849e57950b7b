"""ASCII drawing of binary trees."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintree.node import Node


def _put(row: List[str], index: int, char: str) -> None:
    if index < 0:
        return
    if index >= len(row):
        row.extend(" " * (index - len(row) + 1))
    row[index] = char


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _draw(tree: Optional[Node], offset: int, depth: int, rows: List[List[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, one newline-terminated line per level."""
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(_height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        stripped = text.rstrip(" ")
        if len(stripped) < 2:
            stripped = text[:2].ljust(2)
        lines.append(stripped + "\n")
    return "".join(lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_tree(tree))