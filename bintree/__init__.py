"""Linked binary tree nodes with traversals, metrics, an ASCII tree printer and demos."""

__version__ = "0.1.0"
__all__ = ["node", "render", "traversal", "metrics", "demo"]