"""A singly linked list addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["SinglyLinkedList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class SinglyLinkedList:
    """A chain of nodes, each pointing to the one after it.

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
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _Node(value)
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
            before = self._node_at(position - 1)
            before.next = _Node(value, before.next)
            self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at ``position`` (1 to len) and return its value."""
        if self._head is None:
            raise IndexError("list underflow")
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range; use 1 to {self._size}")
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            before = self._node_at(position - 1)
            node = before.next
            assert node is not None
            before.next = node.next
            if node is self._tail:
                self._tail = before
        self._size -= 1
        return node.value

    def sort(self) -> None:
        """Sort the values in ascending order in place (bubble sort, stable)."""
        for done in range(self._size - 1):
            node = self._head
            for _ in range(self._size - done - 1):
                assert node is not None and node.next is not None
                if node.value > node.next.value:
                    node.value, node.next.value = node.next.value, node.value
                node = node.next

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: _Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def extend(self, other: Iterable[Any]) -> None:
        """Append every value of ``other`` after the last node."""
        for value in list(other):
            self.append(value)

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"