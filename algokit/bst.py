"""A binary search tree with insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _TreeNode:
    key: Any
    left: _TreeNode | None = None
    right: _TreeNode | None = None


def _leftmost(node: _TreeNode) -> _TreeNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _TreeNode | None, key: Any) -> tuple[_TreeNode | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
        return node, removed
    if key > node.key:
        node.right, removed = _delete(node.right, key)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = _leftmost(node.right)
    node.key = successor.key
    node.right, _ = _delete(node.right, successor.key)
    return node, True


class BinarySearchTree:
    """Unbalanced binary search tree; equal keys go to the right subtree."""

    def __init__(self, keys: Iterable[Any] | None = None) -> None:
        self.root: _TreeNode | None = None
        self._count = 0
        if keys is not None:
            for key in keys:
                self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        node = _TreeNode(key)
        self._count += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; a missing key leaves the tree unchanged.

        A node with two children takes the key of its in-order successor.
        """
        self.root, removed = _delete(self.root, key)
        if removed:
            self._count -= 1

    def min_key(self) -> Any:
        """Return the smallest key."""
        if self.root is None:
            raise ValueError("empty tree has no minimum")
        return _leftmost(self.root).key

    def __iter__(self) -> Iterator[Any]:
        pending: list[_TreeNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"