"""Depth-first traversals of binary trees."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from bintree.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield node values in pre-order: node, left subtree, right subtree."""
    stack: List[Node] = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield node values in in-order: left subtree, node, right subtree."""
    stack: List[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield node values in post-order: left subtree, right subtree, node."""
    stack: List[Tuple[Node, bool]] = [(tree, False)] if tree is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))