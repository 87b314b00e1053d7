"""A doubly linked list addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["DoublyLinkedList"]


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """A chain of nodes linked both forwards and backwards.

    Positions run from 1 (the head) to ``len(self)``.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def prepend(self, value: Any) -> None:
        """Insert ``value`` before the head."""
        node = _Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _Node(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1 to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"position {position} out of range; use 1 to {self._size + 1}"
            )
        if position == 1:
            self.prepend(value)
        elif position == self._size + 1:
            self.append(value)
        else:
            after = self._node_at(position)
            before = after.prev
            assert before is not None
            node = _Node(value)
            node.prev, node.next = before, after
            before.next = node
            after.prev = node
            self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at ``position`` (1 to len) and return its value."""
        if self._head is None:
            raise IndexError("can not delete from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range; use 1 to {self._size}")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"