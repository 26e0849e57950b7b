"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from bintree.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack: List[Node] = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _nodes_with_depth(tree: Optional[Node]) -> Iterator[Tuple[Node, int]]:
    stack: List[Tuple[Node, int]] = [(tree, 0)] if tree is not None else []
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend(
            (child, depth + 1) for child in (node.right, node.left) if child is not None
        )


def _edge_height(tree: Optional[Node]) -> int:
    """Height in edges, with an empty tree counting as -1."""
    return max((depth for _, depth in _nodes_with_depth(tree)), default=-1)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for no tree."""
    return max(_edge_height(tree), 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def count_leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def count_internal(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right's; 0 for no tree.

    A missing subtree counts as height -1.
    """
    if tree is None:
        return 0
    return _edge_height(tree.left) - _edge_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two; False for no tree."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one depth."""
    if tree is None:
        return False
    leaf_depths = set()
    for node, depth in _nodes_with_depth(tree):
        if (node.left is None) != (node.right is None):
            return False
        if node.is_leaf():
            leaf_depths.add(depth)
            if len(leaf_depths) > 1:
                return False
    return True