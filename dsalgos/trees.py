"""Binary trees built from pre-order input and binary search trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "preorder",
    "inorder",
    "postorder",
    "BinaryTree",
    "BinarySearchTree",
]


@dataclass
class TreeNode:
    """A node holding ``value`` with optional left and right subtrees."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(node: TreeNode | None) -> list[Any]:
    """Return values in root, left, right order."""
    result: list[Any] = []
    pending = [node] if node is not None else []
    while pending:
        current = pending.pop()
        result.append(current.value)
        if current.right is not None:
            pending.append(current.right)
        if current.left is not None:
            pending.append(current.left)
    return result


def inorder(node: TreeNode | None) -> list[Any]:
    """Return values in left, root, right order."""
    result: list[Any] = []
    pending: list[TreeNode] = []
    current = node
    while pending or current is not None:
        while current is not None:
            pending.append(current)
            current = current.left
        current = pending.pop()
        result.append(current.value)
        current = current.right
    return result


def postorder(node: TreeNode | None) -> list[Any]:
    """Return values in left, right, root order."""
    reversed_order: list[Any] = []
    pending = [node] if node is not None else []
    while pending:
        current = pending.pop()
        reversed_order.append(current.value)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    reversed_order.reverse()
    return reversed_order


class BinaryTree:
    """A binary tree with no ordering rule between its nodes."""

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    @classmethod
    def from_preorder(cls, values: Iterable[int]) -> BinaryTree:
        """Build a tree from values in pre-order, where 0 marks a missing subtree.

        Every node is followed by its left subtree and then its right subtree.
        """
        items = iter(values)

        def build() -> TreeNode | None:
            try:
                value = next(items)
            except StopIteration:
                raise ValueError("pre-order input ends before the tree is complete") from None
            if value == 0:
                return None
            node = TreeNode(value)
            node.left = build()
            node.right = build()
            return node

        root = build()
        if next(items, None) is not None:
            raise ValueError("pre-order input holds values after the tree is complete")
        return cls(root)

    def preorder(self) -> list[Any]:
        return preorder(self.root)

    def inorder(self) -> list[Any]:
        return inorder(self.root)

    def postorder(self) -> list[Any]:
        return postorder(self.root)


class BinarySearchTree:
    """A binary tree keeping smaller values left and larger values right.

    Each value may appear only once.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; a value already present is refused."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            self._size += 1
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
            else:
                raise ValueError(f"can not insert same element {value!r}")
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove ``value``; a node with two children takes its in-order successor."""
        parent: TreeNode | None = None
        current = self.root
        while current is not None and current.value != value:
            parent = current
            current = current.left if value < current.value else current.right
        if current is None:
            raise KeyError(f"{value!r} not found")
        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.value = successor.value
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = current.left if current.left is not None else current.right
            if parent is None:
                self.root = child
            elif parent.left is current:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def __contains__(self, value: Any) -> bool:
        current = self.root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def min(self) -> Any:
        """Return the smallest value."""
        if self.root is None:
            raise ValueError("min() of an empty tree")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.value

    def max(self) -> Any:
        """Return the largest value."""
        if self.root is None:
            raise ValueError("max() of an empty tree")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.value

    def preorder(self) -> list[Any]:
        return preorder(self.root)

    def inorder(self) -> list[Any]:
        return inorder(self.root)

    def postorder(self) -> list[Any]:
        return postorder(self.root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        return iter(self.inorder())