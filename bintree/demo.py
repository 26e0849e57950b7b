"""Example programs that build small trees and report on them."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from bintree import metrics, traversal
from bintree.node import Node
from bintree.render import print_tree


def _pointer(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


def _basic_tree() -> Node:
    """Root 98 with children 12 and 128; 54 right of 12, 402 right of 128."""
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_node_tree(right_left: int = 256, left_right: int = 56) -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(left_right, root.left)
    root.right.left = Node(right_left, root.right)
    root.right.right = Node(512, root.right)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _demo_build(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    print_tree(root, out)


def _demo_insert_left(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _basic_tree()
    print_tree(root, out)
    root.delete()


def _demo_is_leaf(out: TextIO) -> None:
    root = _basic_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}", file=out)


def _demo_is_root(out: TextIO) -> None:
    root = _basic_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a root: {int(node.is_root())}", file=out)


def _traversal_demo(walk: Callable[[Optional[Node]], object]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _seven_node_tree()
        print_tree(root, out)
        for value in walk(root):  # type: ignore[attr-defined]
            print(value, file=out)

    return demo


def _measure_demo(label: str, measure: Callable[[Optional[Node]], int]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _basic_tree()
        print_tree(root, out)
        for node in (root, root.right, root.left.right):
            print(f"{label} {node.value}: {measure(node)}", file=out)

    return demo


def _demo_depth(out: TextIO) -> None:
    root = _basic_tree()
    print_tree(root, out)
    for node in (root, root.right, root.left.right):
        print(f"Depth of {node.value}: {node.depth()}", file=out)


def _demo_balance(out: TextIO) -> None:
    root = _basic_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {metrics.balance(node):+d}", file=out)


def _demo_is_full(out: TextIO) -> None:
    root = _basic_tree()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(metrics.is_full(node))}", file=out)


def _demo_is_perfect(out: TextIO) -> None:
    root = _basic_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    print_tree(root, out)
    print(f"Perfect: {int(metrics.is_perfect(root))}\n", file=out)

    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(metrics.is_perfect(root))}\n", file=out)

    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(metrics.is_perfect(root))}", file=out)


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_pointer(node.sibling())}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_pointer(node.uncle())}", file=out)


_DEMOS: Dict[int, Callable[[TextIO], None]] = {
    0: _demo_build,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_is_leaf,
    5: _demo_is_root,
    6: _traversal_demo(traversal.preorder),
    7: _traversal_demo(traversal.inorder),
    8: _traversal_demo(traversal.postorder),
    9: _measure_demo("Height from", metrics.height),
    10: _demo_depth,
    11: _measure_demo("Size of", metrics.size),
    12: _measure_demo("Leaves in", metrics.count_leaves),
    13: _measure_demo("Nodes in", metrics.count_internal),
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}

DEMO_NUMBERS = tuple(sorted(_DEMOS))


def run_demo(number: int, file: Optional[TextIO] = None) -> None:
    """Run the numbered demo, writing its report to ``file`` (stdout by default)."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number!r}") from None
    demo(sys.stdout if file is None else file)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demos named on the command line, in order."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo",
        description="Build example binary trees and report on them.",
    )
    parser.add_argument(
        "numbers",
        metavar="N",
        type=int,
        nargs="+",
        choices=DEMO_NUMBERS,
        help=f"demo number ({DEMO_NUMBERS[0]}-{DEMO_NUMBERS[-1]})",
    )
    args = parser.parse_args(argv)
    numbers: List[int] = args.numbers
    for number in numbers:
        run_demo(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())