"""Binary tree nodes and the measurements taken on them."""

from __future__ import annotations

from collections.abc import Iterator


def power(x: int, y: int) -> int:
    """Return ``x`` raised to ``y``; an exponent below 1 gives ``x`` itself."""
    return x ** max(y, 1)


def _level_height(node: Node | None) -> int:
    return 0 if node is None else node.level_height()


def _full(node: Node | None) -> bool:
    if node is None:
        return False
    return _full(node.left) == _full(node.right)


class Node:
    """A binary tree node holding an integer value and links to its family."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    # Building

    def add_left(self, value: int) -> Node:
        """Attach a new left child, replacing any existing left subtree."""
        child = Node(value, self)
        self.left = child
        return child

    def add_right(self, value: int) -> Node:
        """Attach a new right child, replacing any existing right subtree."""
        child = Node(value, self)
        self.right = child
        return child

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child becomes its left child."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            child.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child becomes its right child."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            child.right.parent = child
        self.right = child
        return child

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink every node in it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
            self.parent = None
        stack = [self]
        while stack:
            node = stack.pop()
            for child in node._children():
                child.parent = None
                stack.append(child)
            node.left = None
            node.right = None

    # Predicates

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True when the node has no parent."""
        return self.parent is None

    # Traversals

    def preorder(self) -> Iterator[int]:
        """Yield values node first, then left subtree, then right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values left subtree first, then the node, then right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values left subtree first, then right subtree, then the node."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    # Measurements

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        if self.is_leaf():
            return 0
        return 1 + max(child.height() for child in self._children())

    def level_height(self) -> int:
        """Number of levels in the subtree, counting this node as one."""
        if self.is_leaf():
            return 1
        return 1 + max(child.level_height() for child in self._children())

    def depth(self) -> int:
        """Number of ancestors above this node."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return 1 + sum(child.size() for child in self._children())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        if self.is_leaf():
            return 1
        return sum(child.leaves() for child in self._children())

    def nodes(self) -> int:
        """Number of nodes in the subtree that have at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(child.nodes() for child in self._children())

    def balance(self) -> int:
        """Left level height minus right level height."""
        return _level_height(self.left) - _level_height(self.right)

    def is_full(self) -> bool:
        """True when both subtrees give the same fullness answer.

        A missing subtree counts as not full, so a leaf is full.
        """
        return _full(self.left) == _full(self.right)

    def is_perfect(self) -> bool:
        """True when both sides are equally tall and every leaf is present."""
        if self.is_leaf():
            return True
        left_height = _level_height(self.left)
        if left_height != _level_height(self.right):
            return False
        return power(2, left_height) == self.leaves()

    # Relatives

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if the parent has two."""
        parent = self.parent
        if parent is None or parent.left is None or parent.right is None:
            return None
        if parent.left.value == self.value:
            return parent.right
        return parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if there is one."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is None or grandparent.right is None:
            return None
        if grandparent.left.value == parent.value:
            return grandparent.right
        return grandparent.left