"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    data: int
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Linked list whose nodes point to both neighbours."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for value in values:
            self.insert_end(value)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_front(self, data: int) -> None:
        """Put data before the first node."""
        node = _Node(data, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node

    def insert_end(self, data: int) -> None:
        """Put data after the last node."""
        node = _Node(data, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node