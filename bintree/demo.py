"""Worked examples that build small trees and report on them."""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TextIO, Tuple, Union

from bintree.node import Node
from bintree.render import print_tree

Spec = Union[int, Tuple[int, Optional["Spec"], Optional["Spec"]]]
Demo = Callable[[TextIO], None]

_PRINTED = (98, (12, 6, 16), (402, 256, 512))
_PAIR = (98, 12, 402)
_FULL = (98, (12, 6, 56), (402, 256, 512))
_GROWN = (98, (12, None, 54), (128, None, 402))
_BALANCE = (98, (45, (12, (10, 8, None), 54), 50), (128, None, 402))
_FULLNESS = (98, (12, 10, 54), (128, None, 402))
_PERFECT = (98, (12, 10, 54), (128, 10, 402))
_FAMILY = (98, (12, 10, 54), (128, 110, (402, 200, 512)))


def _unpack(spec: Spec) -> tuple:
    return spec if isinstance(spec, tuple) else (spec, None, None)


def _grow(node: Node, left: Spec | None, right: Spec | None) -> None:
    for add, spec in ((node.add_left, left), (node.add_right, right)):
        if spec is not None:
            value, *children = _unpack(spec)
            _grow(add(value), *children)


def _tree(spec: Spec) -> Node:
    """Build a tree from a nested (value, left, right) spec; a bare int is a leaf."""
    value, left, right = _unpack(spec)
    root = Node(value)
    _grow(root, left, right)
    return root


def _describe(node: Node | None) -> str:
    return "None" if node is None else str(node.value)


def _show(spec: Spec) -> Demo:
    def demo(out: TextIO) -> None:
        print_tree(_tree(spec), out)

    return demo


def _insert_demo(change: Callable[[Node], object]) -> Demo:
    def demo(out: TextIO) -> None:
        root = _tree(_PAIR)
        print_tree(root, out)
        print(file=out)
        change(root)
        print_tree(root, out)

    return demo


def _demo_delete(out: TextIO) -> None:
    root = _tree(_GROWN)
    print_tree(root, out)
    root.delete()


def _report(
    spec: Spec,
    pick: Callable[[Node], Iterable[Node]],
    template: str,
    measure: Callable[[Node], object],
) -> Demo:
    def demo(out: TextIO) -> None:
        root = _tree(spec)
        print_tree(root, out)
        for node in pick(root):
            print(template.format(value=node.value, result=measure(node)), file=out)

    return demo


def _trio(root: Node) -> tuple[Node, Node, Node]:
    return root, root.right, root.left.right


def _traversal_demo(order: Callable[[Node], Iterable[int]]) -> Demo:
    def demo(out: TextIO) -> None:
        root = _tree(_FULL)
        print_tree(root, out)
        for value in order(root):
            print(value, file=out)

    return demo


def _demo_depth(out: TextIO) -> None:
    root = _tree(_GROWN)
    print_tree(root, out)
    # A missing node has depth 0; the label still names the root.
    print(f"Depth of {root.value}: 0", file=out)
    for node in (root.right, root.left.right):
        print(f"Depth of {node.value}: {node.depth()}", file=out)


def _demo_is_perfect(out: TextIO) -> None:
    root = _tree(_PERFECT)
    growth = (
        lambda tree: None,
        lambda tree: tree.right.right.add_left(10),
        lambda tree: tree.right.right.add_right(10),
    )
    for step, grow in enumerate(growth):
        if step:
            print(file=out)
        grow(root)
        print_tree(root, out)
        print(f"Perfect: {int(root.is_perfect())}", file=out)


_DEMOS: dict[int, Demo] = {
    0: _show(_PRINTED),
    1: _insert_demo(lambda r: (r.right.insert_left(128), r.insert_left(54))),
    2: _insert_demo(lambda r: (r.left.insert_right(54), r.insert_right(128))),
    3: _demo_delete,
    4: _report(
        _GROWN,
        lambda r: (r, r.right, r.right.right),
        "Is {value} a leaf: {result}",
        lambda n: int(n.is_leaf()),
    ),
    5: _report(
        _GROWN,
        lambda r: (r, r.right, r.right.right),
        "Is {value} a root: {result}",
        lambda n: int(n.is_root()),
    ),
    6: _traversal_demo(Node.preorder),
    7: _traversal_demo(Node.inorder),
    8: _traversal_demo(Node.postorder),
    9: _report(_GROWN, _trio, "Height from {value}: {result}", Node.height),
    10: _demo_depth,
    11: _report(_GROWN, _trio, "Size of {value}: {result}", Node.size),
    12: _report(_GROWN, _trio, "Leaves in {value}: {result}", Node.leaves),
    13: _report(_GROWN, _trio, "Nodes in {value}: {result}", Node.nodes),
    14: _report(
        _BALANCE,
        lambda r: (r, r.right, r.left.left.right),
        "Balance of {value}: {result}",
        lambda n: f"{n.balance():+d}",
    ),
    15: _report(
        _FULLNESS,
        lambda r: (r, r.left, r.right),
        "Is {value} full: {result}",
        lambda n: int(n.is_full()),
    ),
    16: _demo_is_perfect,
    17: _report(
        _FAMILY,
        lambda r: (r.left, r.right.left, r.left.right, r),
        "Sibling of {value}: {result}",
        lambda n: _describe(n.sibling()),
    ),
    18: _report(
        _FAMILY,
        lambda r: (r.right.left, r.left.right, r.left),
        "Uncle of {value}: {result}",
        lambda n: _describe(n.uncle()),
    ),
}


def run_demo(task: int) -> str:
    """Run the numbered example and return everything it prints."""
    try:
        demo = _DEMOS[task]
    except KeyError:
        raise ValueError(f"no demo numbered {task!r}; choose 0 to {max(_DEMOS)}") from None
    out = io.StringIO()
    demo(out)
    return out.getvalue()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output of the chosen examples, or of all of them."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Build small binary trees and report on them."
    )
    parser.add_argument(
        "tasks",
        nargs="*",
        type=int,
        choices=sorted(_DEMOS),
        metavar="TASK",
        help=f"demo number, 0 to {max(_DEMOS)} (default: all)",
    )
    args = parser.parse_args(argv)
    for task in args.tasks or sorted(_DEMOS):
        sys.stdout.write(run_demo(task))
    return 0


if __name__ == "__main__":
    sys.exit(main())