# dsakit

A small collection of classic data-structure and algorithm exercises, written
as plain Python functions and classes. It has no dependencies beyond the
standard library.

## Modules

- `dsakit.arrays`: problems on integer sequences.
  - `intersection(a, b)` and `intersection_unique(a, b)`: common values of two
    sorted sequences, with shared duplicates kept or each value once.
  - `union_sorted(a, b)`: sorted union of two sorted sequences, no duplicates.
  - `is_sorted`, `largest` (raises `ValueError` when empty).
  - `second_largest`, `second_smallest`: return `None` when no such value
    exists and raise `ValueError` for an empty sequence.
  - `longest_subarray_with_sum(values, k)`: sliding window, only correct for
    non-negative values; `longest_subarray_with_sum_any(values, k)` works for
    values of any sign.
  - `find_missing(values, n)`: the number from 1..n missing from the first
    n - 1 values; `missing_number(values)`: the number from 0..len(values)
    missing from the values.
  - `move_zeroes` and `remove_duplicates` change the list in place;
    `remove_duplicates` returns the new length.
  - `max_consecutive_ones`, `single_number`.
- `dsakit.sorting`: in-place sorts that return `None`: `bubble_sort`,
  `bubble_sort_recursive`, `insertion_sort`, `insertion_sort_recursive`,
  `selection_sort`, `merge_sort`, `quick_sort` (with the Lomuto `partition`)
  and `heap_sort` (with `heapify`).
- `dsakit.linked`: singly linked lists built from `Node` (iterable over its
  values), with `from_iterable`, `to_list`, `search`, `length`,
  `insert_front`, `insert_end`, `insert_at`, `delete_head`, `delete_end`,
  `delete_at` (raises `IndexError` for a missing position), `reverse`,
  `reverse_recursive`, `middle` and `middle_by_count`. Functions take and
  return head nodes; an empty list is `None`.
- `dsakit.list_problems`: linked-list exercises: `is_palindrome`,
  `merge` and `merge_sort`, `sort_values`, `sort_012`, `sort_012_counting`,
  `add_one`, `add_one_by_reversal`, `add_two_numbers`, `delete_middle` and
  `odd_even`.
- `dsakit.circular`: `CircularLinkedList`, supporting iteration, `len`, `in`,
  `insert_front`, `insert_end`, `insert_at` (1-based, `IndexError` when out of
  range), `delete_first`, `delete_last` and `delete_value`.
- `dsakit.doubly`: `DoublyLinkedList`, iterable forwards and with
  `reversed()`, with `len`, `insert_front` and `insert_end`.
- `dsakit.stack`: `precedence`, `is_operator`, `infix_to_postfix` (single
  letter operands, all operators left-associative) and
  `next_greater_element`.
- `dsakit.strings`: `trim_spaces`, `reverse_words` and
  `remove_outer_parentheses`.

## Examples

```python
from dsakit.arrays import intersection_unique, union_sorted
from dsakit.sorting import quick_sort
from dsakit.linked import from_iterable, reverse, to_list
from dsakit.stack import infix_to_postfix
from dsakit.strings import reverse_words

intersection_unique([1, 2, 2, 3, 4, 5], [2, 2, 3, 5, 6])   # [2, 3, 5]
union_sorted([1, 2, 4, 5, 6], [2, 3, 5, 7])                # [1, 2, 3, 4, 5, 6, 7]

values = [10, 7, 8, 9, 1, 5]
quick_sort(values)
values                                                     # [1, 5, 7, 8, 9, 10]

head = from_iterable([1, 2, 3, 4, 5])
to_list(reverse(head))                                     # [5, 4, 3, 2, 1]

infix_to_postfix("a+b*(c^d-e)")                            # "abcd^e-*+"
reverse_words("  the sky   is blue ")                      # "blue is sky the"
```

## What it does not do

This is a library only: it has no command-line program, and nothing reads
input or prints results. Call the functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```