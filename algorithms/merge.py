"""
merge.py - Merge Sort
======================
Top-down merge sort over the closed range [left, right].

The merge step copies both halves out, then writes the result back one
slot at a time.  Every write is a Set step, including the two drain
loops that flush whichever half still has elements (those writes have no
Compare in front of them).

Stability: the left element wins unless the comparator says the right
one must come first, so equal bars keep their relative order.
"""

from typing import Generator, List, Sequence

from algorithms.step import Ordering, Step, Compare, Set, should_swap


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, left, right):",                # 0
    "    if left < right:",                             # 1
    "        mid ← (left + right) // 2",                # 2
    "        merge_sort(arr, left, mid)",               # 3
    "        merge_sort(arr, mid+1, right)",            # 4
    "        merge(arr, left, mid, right)",             # 5
    "def merge(arr, left, mid, right):",                # 6
    "    while both halves non-empty:",                 # 7
    "        compare L[i], R[j];  write smaller",       # 8
    "    write remaining L, then remaining R",          # 9
]


def merge_sort(
    values: Sequence,
    ordering: Ordering = Ordering.ASCENDING,
) -> Generator[Step, None, None]:
    arr = list(values)
    yield from _sort(arr, 0, len(arr) - 1, ordering)


def _sort(arr: List, left: int, right: int, ordering: Ordering) -> Generator[Step, None, None]:
    if left < right:
        mid = (left + right) // 2
        yield from _sort(arr, left, mid, ordering)
        yield from _sort(arr, mid + 1, right, ordering)
        yield from _merge(arr, left, mid, right, ordering)


def _merge(
    arr: List,
    left: int,
    mid: int,
    right: int,
    ordering: Ordering,
) -> Generator[Step, None, None]:
    left_arr  = arr[left:mid + 1]
    right_arr = arr[mid + 1:right + 1]

    i = j = 0
    k = left

    while i < len(left_arr) and j < len(right_arr):
        yield Compare(left + i, mid + 1 + j)
        if not should_swap(left_arr[i], right_arr[j], ordering):
            arr[k] = left_arr[i]
            i += 1
        else:
            arr[k] = right_arr[j]
            j += 1
        yield Set(k, arr[k])
        k += 1

    # drain
    while i < len(left_arr):
        arr[k] = left_arr[i]
        yield Set(k, arr[k])
        i += 1
        k += 1

    while j < len(right_arr):
        arr[k] = right_arr[j]
        yield Set(k, arr[k])
        j += 1
        k += 1
