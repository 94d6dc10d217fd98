"""Drawing a binary tree as text."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node


def _height(node: Node) -> int:
    return max((1 + _height(child) for child in (node.left, node.right) if child), default=0)


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _draw(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, rows)
    right = _draw(node.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        if is_left:
            _write(above, offset + left + width // 2, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the tree drawn as lines of text, one level per line."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))