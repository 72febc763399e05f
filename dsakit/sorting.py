"""In-place comparison sorts over mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence


def _swap(values: MutableSequence[int], i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def heapify(values: MutableSequence[int], size: int, root: int) -> None:
    """Sift values[root] down so the subtree within values[:size] is a max-heap."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        _swap(values, root, largest)
        root = largest


def heap_sort(values: MutableSequence[int]) -> None:
    """Sort in place using a binary max-heap."""
    size = len(values)
    for root in range(size // 2 - 1, -1, -1):
        heapify(values, size, root)
    for end in range(size - 1, 0, -1):
        _swap(values, 0, end)
        heapify(values, end, 0)


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort in place by adjacent swaps, stopping early once a pass swaps nothing."""
    for last in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if values[j] > values[j + 1]:
                _swap(values, j, j + 1)
                swapped = True
        if not swapped:
            break


def bubble_sort_recursive(values: MutableSequence[int]) -> None:
    """Bubble sort where each pass recurses on the unsorted prefix."""

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        swapped = False
        for i in range(size - 1):
            if values[i] > values[i + 1]:
                _swap(values, i, i + 1)
                swapped = True
        if swapped:
            sort_prefix(size - 1)

    sort_prefix(len(values))


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort in place by swapping each value back into position."""
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j - 1] > values[j]:
            _swap(values, j - 1, j)
            j -= 1


def insertion_sort_recursive(values: MutableSequence[int]) -> None:
    """Insertion sort that sorts the prefix recursively, then inserts the last value."""

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        sort_prefix(size - 1)
        last = values[size - 1]
        j = size - 2
        while j >= 0 and values[j] > last:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = last

    sort_prefix(len(values))


def _merge(values: MutableSequence[int], low: int, mid: int, high: int) -> None:
    left = values[low:mid + 1]
    right = values[mid + 1:high + 1]
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    values[low:high + 1] = merged


def merge_sort(values: MutableSequence[int]) -> None:
    """Stable top-down merge sort, in place."""

    def sort_range(low: int, high: int) -> None:
        if low >= high:
            return
        mid = (low + high) // 2
        sort_range(low, mid)
        sort_range(mid + 1, high)
        _merge(values, low, mid, high)

    sort_range(0, len(values) - 1)


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Lomuto partition of values[low:high + 1] around values[high].

    Returns the pivot's final index: smaller values lie before it,
    the rest after it.
    """
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            _swap(values, boundary, j)
    _swap(values, boundary + 1, high)
    return boundary + 1


def quick_sort(values: MutableSequence[int]) -> None:
    """Quicksort in place using the last element of each range as pivot."""

    def sort_range(low: int, high: int) -> None:
        if low < high:
            pivot_index = partition(values, low, high)
            sort_range(low, pivot_index - 1)
            sort_range(pivot_index + 1, high)

    sort_range(0, len(values) - 1)


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort in place by repeatedly moving the smallest remaining value forward."""
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        _swap(values, smallest, i)