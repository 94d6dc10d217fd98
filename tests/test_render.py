import io

import pytest

from bintree.demo import _tree
from bintree.node import Node
from bintree.render import print_tree, render

SAMPLE = (98, (12, 6, 16), (402, 256, 512))


def _levels(root):
    pending = [(root, 0)]
    while pending:
        node, level = pending.pop()
        yield node, level
        pending.extend(
            (child, level + 1) for child in (node.left, node.right) if child is not None
        )


@pytest.mark.parametrize(
    "tree, expected",
    [
        (None, ""),
        (Node(98), "(098)\n"),
        (Node(-5), "(-05)\n"),
        (
            _tree(SAMPLE),
            "       .-------(098)-------.\n"
            "  .--(012)--.         .--(402)--.\n"
            "(006)     (016)     (256)     (512)\n",
        ),
    ],
)
def test_render_values(tree, expected):
    assert render(tree) == expected


def test_one_line_per_level():
    root = _tree(SAMPLE)
    root.right.right.add_left(7)
    assert len(render(root).splitlines()) == root.height() + 1


def test_labels_on_their_levels():
    root = _tree(SAMPLE)
    root.left.insert_right(54)
    lines = render(root).splitlines()
    for node, level in _levels(root):
        assert node.depth() == level
        assert f"({node.value:03d})" in lines[level]


def test_no_trailing_spaces():
    root = _tree(SAMPLE)
    root.left.left.add_right(3)
    for line in render(root).splitlines():
        assert line == line.rstrip(" ")


def test_subtree_renders_from_its_own_root():
    subtree = _tree(SAMPLE).left
    drawing = render(subtree)
    lines = drawing.splitlines()
    assert len(lines) == subtree.height() + 1
    assert "(012)" in lines[0]
    assert "(098)" not in drawing


@pytest.mark.parametrize("tree", [_tree(SAMPLE), None])
def test_print_tree_writes_render(tree):
    buffer = io.StringIO()
    print_tree(tree, buffer)
    assert buffer.getvalue() == render(tree)


def test_print_tree_defaults_to_stdout(capsys):
    root = _tree(SAMPLE)
    print_tree(root)
    assert capsys.readouterr().out == render(root)