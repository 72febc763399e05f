"""Classic problems on integer sequences: searching, merging and counting."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence
from functools import reduce
from itertools import groupby, islice, pairwise
from operator import xor

_END = object()


def _distinct(values: Iterable[int]) -> Iterator[int]:
    """Yield each run of equal neighbouring values once."""
    return (key for key, _ in groupby(values))


def _common(first: Iterable[int], second: Iterable[int]) -> Iterator[int]:
    """Walk two sorted iterables together, yielding values found in both."""
    it1, it2 = iter(first), iter(second)
    x, y = next(it1, _END), next(it2, _END)
    while x is not _END and y is not _END:
        if x < y:
            x = next(it1, _END)
        elif x > y:
            y = next(it2, _END)
        else:
            yield x
            x, y = next(it1, _END), next(it2, _END)


def intersection_unique(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Common values of two sorted sequences, each reported once."""
    return list(_common(_distinct(a), _distinct(b)))


def intersection(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Common values of two sorted sequences, keeping shared duplicates."""
    return list(_common(a, b))


def is_sorted(values: Iterable[int]) -> bool:
    """True if the values never decrease."""
    return all(prev <= cur for prev, cur in pairwise(values))


def largest(values: Sequence[int]) -> int:
    """The largest value; raises ValueError for an empty sequence."""
    if not values:
        raise ValueError("largest() of an empty sequence")
    return max(values)


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Length of the longest contiguous run summing to k.

    Uses a sliding window, so it is only correct for non-negative values.
    """
    start = 0
    total = 0
    best = 0
    for end, value in enumerate(values):
        total += value
        while total > k and start <= end:
            total -= values[start]
            start += 1
        if total == k:
            best = max(best, end - start + 1)
    return best


def longest_subarray_with_sum_any(values: Iterable[int], k: int) -> int:
    """Length of the longest contiguous run summing to k, for any signs."""
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for index, value in enumerate(values):
        total += value
        if total == k:
            best = index + 1
        earlier = first_seen.get(total - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(total, index)
    return best


def find_missing(values: Iterable[int], n: int) -> int:
    """The number from 1..n absent from the first n - 1 values."""
    expected = reduce(xor, range(1, n + 1), 0)
    present = reduce(xor, islice(values, max(n - 1, 0)), 0)
    return expected ^ present


def missing_number(values: Sequence[int]) -> int:
    """The number from 0..len(values) absent from the values."""
    size = len(values)
    return size * (size + 1) // 2 - sum(values)


def move_zeroes(values: list[int]) -> None:
    """Move every zero to the end in place, keeping the other values' order."""
    nonzero = [value for value in values if value != 0]
    values[:] = nonzero + [0] * (len(values) - len(nonzero))


def remove_duplicates(values: list[int]) -> int:
    """Drop repeated neighbours in place and return the new length."""
    values[:] = _distinct(values)
    return len(values)


def second_largest(values: Sequence[int]) -> int | None:
    """The largest value below the maximum, or None if there is none."""
    if not values:
        raise ValueError("second_largest() of an empty sequence")
    top = values[0]
    second: int | None = None
    for value in values[1:]:
        if value > top:
            second, top = top, value
        elif value < top and (second is None or value > second):
            second = value
    return second


def second_smallest(values: Sequence[int]) -> int | None:
    """The smallest value above the minimum, or None if there is none."""
    if not values:
        raise ValueError("second_smallest() of an empty sequence")
    bottom = values[0]
    second: int | None = None
    for value in values[1:]:
        if value < bottom:
            second, bottom = bottom, value
        elif value > bottom and (second is None or value < second):
            second = value
    return second


def max_consecutive_ones(values: Iterable[int]) -> int:
    """Length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(values) if key == 1),
        default=0,
    )


def single_number(values: Iterable[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, values, 0)


def union_sorted(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Sorted union of two sorted sequences without duplicates."""
    return list(_distinct(heapq.merge(a, b)))