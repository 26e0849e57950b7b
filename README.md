# bintree

A small library of linked binary tree nodes. Each node holds an integer
value and links to its parent and its left and right children.

## What it offers

- `bintree.node.Node`: create a node with `Node(value, parent)`. This
  records the parent but does not attach the node to it; assign it to
  `parent.left` or `parent.right` yourself, or use `insert_left(value)`
  and `insert_right(value)`, which create and attach the new child in
  one step. If that slot already holds a child, the old child moves down
  to the same side under the new node. A node also answers `is_leaf()`,
  `is_root()`, `depth()` (edges up to the root), `sibling()` and
  `uncle()` (both `None` where there is none). `delete()` detaches the
  subtree from its parent and unlinks every node in it.
- `bintree.traversal`: `preorder`, `inorder` and `postorder` are
  generators that yield the values of a tree in that order. Passing
  `None` yields nothing.
- `bintree.metrics`:
  - `height(tree)`: edges on the longest downward path (0 for a single
    node and for `None`).
  - `size(tree)`: number of nodes.
  - `count_leaves(tree)`: nodes with no children.
  - `count_internal(tree)`: nodes with at least one child.
  - `balance(tree)`: height of the left subtree minus that of the right,
    where a missing subtree counts as -1; 0 for `None`.
  - `is_full(tree)`: every node has zero or two children (`False` for
    `None`).
  - `is_perfect(tree)`: full, with all leaves at the same depth (`False`
    for `None`).
- `bintree.render`: `format_tree(tree)` returns an ASCII drawing of the
  tree, one line per level, each ending in a newline, with values shown
  zero-padded to three digits. `print_tree(tree, file)` writes that
  drawing to `file`, or to standard output if `file` is omitted.
  An empty tree draws as the empty string.

## Example

```python
from bintree.node import Node
from bintree.metrics import height, size
from bintree.traversal import inorder
from bintree.render import print_tree

root = Node(98, None)
root.left = Node(12, root)
root.right = Node(402, root)
root.left.insert_right(54)
root.insert_right(128)

print_tree(root)
print(list(inorder(root)))   # [12, 54, 98, 128, 402]
print(height(root), size(root))   # 2 5
```

The printed tree looks like this:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

## Demonstrations

`bintree.demo` holds numbered demonstrations, 0 to 18, one for each
feature: building a tree, inserting, deleting, the node checks, the
three traversals and each metric. Each builds a small tree, prints it
and reports on it. Run them from Python with `run_demo(number, file)`
(a number outside 0-18 raises `ValueError`), or from the command line,
naming one or more numbers to run in order:

```
bintree-demo 0
bintree-demo 6 7 8
```

## Running the tests

```
pip install -e .[test]
pytest
```