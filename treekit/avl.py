"""Self-balancing AVL tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class _Node:
    key: Any
    height: int = 1
    left: _Node | None = field(default=None, repr=False)
    right: _Node | None = field(default=None, repr=False)


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(y: _Node) -> _Node:
    x = y.right
    y.right = x.left
    x.left = y
    _update(y)
    _update(x)
    return x


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """An AVL tree; equal keys go to the right unless duplicates are refused."""

    def __init__(self, values: Iterable[Any] = (), allow_duplicates: bool = True) -> None:
        self._root: _Node | None = None
        self._size = 0
        self.allow_duplicates = allow_duplicates
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was refused as a duplicate."""
        inserted = False

        def _insert(node: _Node | None) -> _Node:
            nonlocal inserted
            if node is None:
                inserted = True
                return _Node(key)
            if key < node.key:
                node.left = _insert(node.left)
            elif key > node.key or self.allow_duplicates:
                node.right = _insert(node.right)
            else:
                return node
            return _rebalance(node)

        self._root = _insert(self._root)
        if inserted:
            self._size += 1
        return inserted

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; return False if it was absent."""
        removed = False

        def _delete(node: _Node | None, target: Any) -> _Node | None:
            nonlocal removed
            if node is None:
                return None
            if target < node.key:
                node.left = _delete(node.left, target)
            elif target > node.key:
                node.right = _delete(node.right, target)
            elif node.left is None or node.right is None:
                removed = True
                return node.left if node.left is not None else node.right
            else:
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.key = successor.key
                node.right = _delete(node.right, successor.key)
            return _rebalance(node)

        self._root = _delete(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        return list(self)

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def render(self, indent: int = 6) -> str:
        """Draw the tree sideways, root at the left, larger keys above."""
        parts: list[str] = []

        def _draw(node: _Node | None, parent: _Node | None, depth: int) -> None:
            if node is None:
                return
            _draw(node.right, node, depth + 1)
            parent_key = parent.key if parent is not None else -1
            parts.append(f"\n{' ' * (depth * indent)}{node.key}(h={node.height}, p={parent_key})\n")
            _draw(node.left, node, depth + 1)

        _draw(self._root, None, 0)
        return "".join(parts)