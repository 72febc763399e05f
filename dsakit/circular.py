"""A circular singly linked list addressed through its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class CircularLinkedList:
    """Singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._last: _Node | None = None
        for value in values:
            self.insert_end(value)

    def _nodes(self) -> Iterator[_Node]:
        last = self._last
        if last is None:
            return
        node = last.next
        while True:
            assert node is not None
            yield node
            if node is last:
                return
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, key: object) -> bool:
        return any(value == key for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _link_after_last(self, data: int) -> _Node:
        node = _Node(data)
        if self._last is None:
            node.next = node
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        return node

    def insert_front(self, data: int) -> None:
        """Insert data before the first node."""
        self._link_after_last(data)

    def insert_end(self, data: int) -> None:
        """Insert data after the last node."""
        self._last = self._link_after_last(data)

    def insert_at(self, data: int, pos: int) -> None:
        """Insert data so it becomes the pos-th node (1-based).

        Valid positions run from 1 to one past the end; others raise IndexError.
        """
        if pos < 1:
            raise IndexError(f"invalid position {pos}")
        if pos == 1:
            self.insert_front(data)
            return
        last = self._last
        if last is None:
            raise IndexError(f"invalid position {pos}")
        head = last.next
        current = head
        for _ in range(pos - 2):
            assert current is not None
            current = current.next
            if current is head:
                raise IndexError(f"invalid position {pos}")
        assert current is not None
        node = _Node(data, current.next)
        current.next = node
        if current is last:
            self._last = node

    def delete_first(self) -> int:
        """Remove the first node and return its value."""
        last = self._last
        if last is None:
            raise IndexError("delete from an empty list")
        head = last.next
        assert head is not None
        if head is last:
            self._last = None
        else:
            last.next = head.next
        return head.data

    def delete_last(self) -> int:
        """Remove the last node and return its value."""
        last = self._last
        if last is None:
            raise IndexError("delete from an empty list")
        head = last.next
        if head is last:
            self._last = None
            return last.data
        current = head
        assert current is not None
        while current.next is not last:
            current = current.next
            assert current is not None
        current.next = head
        self._last = current
        return last.data

    def delete_value(self, key: int) -> None:
        """Remove the first node holding key; raises ValueError if none does."""
        last = self._last
        if last is None:
            raise IndexError("delete from an empty list")
        prev = last
        for node in self._nodes():
            if node.data == key:
                if node is prev:
                    self._last = None
                else:
                    prev.next = node.next
                    if node is last:
                        self._last = prev
                return
            prev = node
        raise ValueError(f"{key!r} not in list")