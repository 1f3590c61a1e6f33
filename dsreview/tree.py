"""General and binary tree nodes with depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Node:
    """A tree node holding a value and any number of children."""

    value: Any
    children: list[Node] = field(default_factory=list)

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return not self.children


@dataclass
class Tree:
    """A tree identified by its root node."""

    root: Node | None = None


@dataclass
class BinaryNode:
    """A node holding a value and at most a left and a right child."""

    value: Any
    left: BinaryNode | None = None
    right: BinaryNode | None = None

    def is_leaf(self) -> bool:
        """Return True when the node has neither a left nor a right child."""
        return self.left is None and self.right is None

    def traverse_in_order(self) -> Iterator[Any]:
        """Yield the left subtree, then this value, then the right subtree."""
        if self.left is not None:
            yield from self.left.traverse_in_order()
        yield self.value
        if self.right is not None:
            yield from self.right.traverse_in_order()

    def traverse_pre_order(self) -> Iterator[Any]:
        """Yield this value before the subtrees, each subtree visited in order."""
        yield self.value
        if self.left is not None:
            yield from self.left.traverse_in_order()
        if self.right is not None:
            yield from self.right.traverse_in_order()

    def traverse_post_order(self) -> Iterator[Any]:
        """Yield the subtrees, each visited in order, before this value."""
        if self.left is not None:
            yield from self.left.traverse_in_order()
        if self.right is not None:
            yield from self.right.traverse_in_order()
        yield self.value


@dataclass
class BinaryTree:
    """A binary tree identified by its root node."""

    root: BinaryNode | None = None