"""Unbalanced binary search tree with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class _Node:
    key: Any
    parent: _Node | None = field(default=None, repr=False)
    left: _Node | None = field(default=None, repr=False)
    right: _Node | None = field(default=None, repr=False)


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """A plain binary search tree; equal keys are placed in the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> None:
        """Insert a key; duplicates are allowed."""
        parent: _Node | None = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if key < current.key else current.right
        node = _Node(key, parent=parent)
        if parent is None:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def search(self, key: Any) -> _Node | None:
        """Return the node holding ``key`` (with parent/left/right links) or None."""
        current = self._root
        while current is not None and current.key != key:
            current = current.left if key < current.key else current.right
        return current

    def _transplant(self, old: _Node, new: _Node | None) -> None:
        if old.parent is None:
            self._root = new
        elif old.parent.left is old:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        node = self.search(key)
        if node is None:
            raise KeyError(key)
        if node.left is None:
            self._transplant(node, node.right)
        elif node.right is None:
            self._transplant(node, node.left)
        else:
            successor = _leftmost(node.right)
            if successor.parent is not node:
                self._transplant(successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            self._transplant(node, successor)
            successor.left = node.left
            successor.left.parent = successor
        self._size -= 1

    def minimum(self) -> Any:
        """Return the smallest key; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        return _leftmost(self._root).key

    def _iter_inorder(self) -> Iterator[Any]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.key
            current = current.right

    def inorder(self) -> list[Any]:
        return list(self._iter_inorder())

    def preorder(self) -> list[Any]:
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[Any]:
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return self._iter_inorder()