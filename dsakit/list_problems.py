"""Interview-style problems on singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.linked import Node, reverse


def _nodes(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def is_palindrome(head: Node | None) -> bool:
    """True if the values read the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second_half = reverse(slow.next)
    try:
        return all(
            a.data == b.data for a, b in zip(_nodes(head), _nodes(second_half))
        )
    finally:
        slow.next = reverse(second_half)


def sort_values(head: Node | None) -> Node | None:
    """Sort by copying the values out, sorting and writing them back."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, sorted(node.data for node in nodes)):
        node.data = value
    return head


def merge(first: Node | None, second: Node | None) -> Node | None:
    """Splice two sorted lists into one sorted list."""
    dummy = Node(0)
    tail = dummy
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_sort(head: Node | None) -> Node | None:
    """Sort by relinking nodes with a top-down merge sort."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return merge(merge_sort(head), merge_sort(right))


def sort_012_counting(head: Node | None) -> Node | None:
    """Sort a list of 0s, 1s and 2s by counting and overwriting the values."""
    counts = {0: 0, 1: 0, 2: 0}
    for node in _nodes(head):
        if node.data in counts:
            counts[node.data] += 1
    fill = (digit for digit, count in counts.items() for _ in range(count))
    for node, digit in zip(_nodes(head), fill):
        node.data = digit
    return head


def sort_012(head: Node | None) -> Node | None:
    """Sort a list of 0s, 1s and 2s by relinking; other values count as 2."""
    if head is None or head.next is None:
        return head
    dummies = [Node(0), Node(1), Node(2)]
    tails = list(dummies)
    current = head
    while current is not None:
        following = current.next
        current.next = None
        bucket = current.data if current.data in (0, 1) else 2
        tails[bucket].next = current
        tails[bucket] = current
        current = following
    tails[0].next = dummies[1].next or dummies[2].next
    tails[1].next = dummies[2].next
    return dummies[0].next or dummies[1].next or dummies[2].next


def add_one(head: Node | None) -> Node:
    """Add one to the number whose decimal digits the list holds, most significant first."""
    carry = 1
    for node in reversed(list(_nodes(head))):
        total = node.data + carry
        node.data, carry = total % 10, total // 10
        if not carry:
            return head  # type: ignore[return-value]
    return Node(carry, head)


def add_one_by_reversal(head: Node | None) -> Node:
    """Add one by reversing the digits, propagating the carry, then reversing back."""
    head = reverse(head)
    carry = 1
    for node in _nodes(head):
        node.data += carry
        if node.data < 10:
            carry = 0
            break
        node.data = 0
    head = reverse(head)
    if carry:
        return Node(1, head)
    return head  # type: ignore[return-value]


def add_two_numbers(first: Node | None, second: Node | None) -> Node | None:
    """Sum two numbers stored as digit lists, least significant digit first."""
    dummy = Node(-1)
    tail = dummy
    carry = 0
    while first is not None or second is not None or carry:
        total = carry
        if first is not None:
            total += first.data
            first = first.next
        if second is not None:
            total += second.data
            second = second.next
        tail.next = Node(total % 10)
        tail = tail.next
        carry = total // 10
    return dummy.next


def delete_middle(head: Node | None) -> Node | None:
    """Remove the middle node (the second one for an even count)."""
    if head is None or head.next is None:
        return None
    prev = head
    slow = head.next
    fast = head.next.next
    while fast is not None and fast.next is not None:
        prev, slow = slow, slow.next  # type: ignore[assignment]
        fast = fast.next.next
    prev.next = slow.next
    return head


def odd_even(head: Node | None) -> Node | None:
    """Relink so nodes at odd positions come first, then those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head