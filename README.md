# bintree

A small binary tree of integers. Each `Node` holds a `value` and links
to its `parent`, `left` and `right` nodes, and offers insertion,
traversal, measurement and relation queries. Trees can be drawn as
ASCII art, and a demo command prints a set of worked examples.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.add_left(12)     # replaces any existing left subtree
right = root.add_right(402)  # replaces any existing right subtree

# Insert between a parent and its existing child
root.insert_right(128)   # 128 becomes root's right child, 402 moves under it
left.insert_right(54)
```

`insert_left` works the same way on the left side: the old left child
becomes the left child of the new node.

`delete()` detaches a node from its parent and unlinks every node in
its subtree.

## Queries

```python
list(root.preorder())    # values, node first, then left, then right
list(root.inorder())     # values, left subtree, node, right subtree
list(root.postorder())   # values, children before parents

root.height()            # edges on the longest downward path (a leaf is 0)
root.level_height()      # levels on the longest downward path (a leaf is 1)
right.depth()            # number of ancestors
root.size()              # number of nodes in the subtree
root.leaves()            # nodes with no children
root.nodes()             # nodes with at least one child
root.balance()           # left level height minus right level height
root.is_full()
root.is_perfect()
root.is_leaf()
root.is_root()
left.sibling()           # the parent's other child, or None
left.uncle()             # the parent's sibling, or None
```

`sibling()` and `uncle()` return `None` unless the parent (or
grandparent) has both children. They tell the two children apart by
value, so a node whose value equals its sibling's is treated as the
left child.

`is_full()` compares the fullness of the two subtrees, counting a
missing subtree as not full; a leaf is full. `is_perfect()` is true for
a leaf, and otherwise when both sides have the same level height and
the number of leaves is `power(2, level height)`.

`bintree.node.power(x, y)` returns `x ** y`, with any exponent below 1
treated as 1.

## Drawing

```python
from bintree.render import render, print_tree

text = render(root)      # the drawing as a string, "" for None
print_tree(root)         # write it to standard output
print_tree(root, file)   # or to any text stream
```

Each value is drawn as a zero-padded box such as `(098)`, one level per
line, with dashed links between levels:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demo

The `bintree-demo` command builds small example trees and prints the
results of the numbered examples, 0 to 18. Give one or more numbers to
run those, or none to run them all:

```
bintree-demo 0
bintree-demo 14 16
bintree-demo
```

From Python, `bintree.demo.run_demo(task)` returns the text an example
prints, and raises `ValueError` for an unknown number.