"""Priority queue stored as a binary search tree ordered by priority."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class _Entry:
    value: Any
    priority: Any
    parent: _Entry | None = field(default=None, repr=False)
    left: _Entry | None = field(default=None, repr=False)
    right: _Entry | None = field(default=None, repr=False)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a value search: whether it was found, nodes visited, its priority."""

    found: bool
    comparisons: int
    priority: Any = None


class PriorityQueue:
    """Min-priority queue; among equal priorities the latest insertion comes first."""

    def __init__(self) -> None:
        self._root: _Entry | None = None
        self._size = 0

    def insert(self, value: Any, priority: Any) -> None:
        parent: _Entry | None = None
        current = self._root
        go_right = False
        while current is not None:
            parent = current
            go_right = current.priority < priority
            current = current.right if go_right else current.left
        entry = _Entry(value, priority, parent=parent)
        if parent is None:
            self._root = entry
        elif go_right:
            parent.right = entry
        else:
            parent.left = entry
        self._size += 1

    def _min_entry(self) -> _Entry:
        if self._root is None:
            raise IndexError("priority queue is empty")
        entry = self._root
        while entry.left is not None:
            entry = entry.left
        return entry

    def peek_min(self) -> tuple[Any, Any]:
        """Return (value, priority) of the entry with the lowest priority."""
        entry = self._min_entry()
        return entry.value, entry.priority

    def pop_min(self) -> tuple[Any, Any]:
        """Remove and return (value, priority) of the lowest-priority entry."""
        entry = self._min_entry()
        child = entry.right
        if entry.parent is None:
            self._root = child
        else:
            entry.parent.left = child
        if child is not None:
            child.parent = entry.parent
        self._size -= 1
        return entry.value, entry.priority

    def search(self, value: Any) -> SearchResult:
        """Walk the tree in order looking for ``value``, counting visited nodes."""
        comparisons = 0
        found: _Entry | None = None
        stack: list[tuple[_Entry, bool]] = []
        if self._root is not None:
            stack.append((self._root, False))
        while stack:
            entry, visited = stack.pop()
            if not visited:
                if found is not None:
                    continue
                comparisons += 1
                stack.append((entry, True))
                if entry.left is not None:
                    stack.append((entry.left, False))
            else:
                if entry.value == value:
                    found = entry
                if entry.right is not None:
                    stack.append((entry.right, False))
        if found is None:
            return SearchResult(False, comparisons)
        return SearchResult(True, comparisons, found.priority)

    def _walk(self, reverse: bool) -> Iterator[tuple[Any, Any]]:
        stack: list[_Entry] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.right if reverse else current.left
            current = stack.pop()
            yield current.value, current.priority
            current = current.left if reverse else current.right

    def items(self) -> list[tuple[Any, Any]]:
        """(value, priority) pairs in ascending priority order."""
        return list(self._walk(reverse=False))

    def items_descending(self) -> list[tuple[Any, Any]]:
        """(value, priority) pairs in descending priority order."""
        return list(self._walk(reverse=True))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None