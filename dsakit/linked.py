"""Singly linked lists built from ``Node`` objects and the usual list operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def _nodes(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a list holding the values in order; an empty input gives None."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[int]:
    """The values of the list as a Python list."""
    return [] if head is None else list(head)


def search(head: Node | None, key: int) -> bool:
    """True if some node holds key."""
    return any(node.data == key for node in _nodes(head))


def length(head: Node | None) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def insert_front(head: Node | None, data: int) -> Node:
    """Put a new node before head and return it."""
    return Node(data, head)


def insert_end(head: Node | None, data: int) -> Node:
    """Append a new node and return the head."""
    node = Node(data)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def insert_at(head: Node | None, pos: int, data: int) -> Node | None:
    """Insert data so that it becomes the pos-th node (1-based).

    A position below 1 or beyond one past the end leaves the list unchanged.
    """
    if pos < 1:
        return head
    if pos == 1:
        return Node(data, head)
    current = head
    for _ in range(pos - 2):
        if current is None:
            break
        current = current.next
    if current is None:
        return head
    current.next = Node(data, current.next)
    return head


def delete_head(head: Node | None) -> Node | None:
    """Drop the first node and return the new head."""
    return None if head is None else head.next


def delete_end(head: Node | None) -> Node | None:
    """Drop the last node and return the head."""
    if head is None or head.next is None:
        return None
    second_last = head
    while second_last.next is not None and second_last.next.next is not None:
        second_last = second_last.next
    second_last.next = None
    return head


def delete_at(head: Node | None, pos: int) -> Node | None:
    """Drop the pos-th node (1-based); raises IndexError if there is none."""
    if head is None:
        return head
    if pos == 1:
        return head.next
    if pos < 1:
        raise IndexError(f"no node at position {pos}")
    prev = head
    current = head.next
    for _ in range(pos - 2):
        if current is None:
            break
        prev, current = current, current.next
    if current is None:
        raise IndexError(f"no node at position {pos}")
    prev.next = current.next
    return head


def reverse(head: Node | None) -> Node | None:
    """Reverse the links in place and return the new head."""
    prev: Node | None = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def reverse_recursive(head: Node | None) -> Node | None:
    """Reverse the links in place by recursion and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def middle(head: Node | None) -> Node | None:
    """The middle node, found with slow and fast pointers.

    For an even count the second of the two middle nodes is returned.
    """
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def middle_by_count(head: Node | None) -> Node | None:
    """The middle node, found by counting the nodes first."""
    if head is None:
        return None
    steps = length(head) // 2
    node = head
    for _ in range(steps):
        node = node.next  # type: ignore[assignment]
    return node