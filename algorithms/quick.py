"""
quick.py - Quick Sort (Lomuto partition)
=========================================
Pivot is always the last element of the range.  Partition walks j over
[low, high) comparing each bar with the pivot; bars that belong before
the pivot are swapped down to the growing prefix [low, i].  Finally the
pivot is swapped into slot i+1.

Swaps are only emitted when the two positions differ.

Sub-ranges go on an explicit stack (right pushed before left) instead of
recursing, so an already-sorted array of a few hundred bars does not blow
the interpreter's recursion limit.  Pop order is exactly the recursive
"left first, then right" order, so the trace is the same.
"""

from typing import Generator, List, Sequence, Tuple

from algorithms.step import Ordering, Step, Compare, Swap, should_swap


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, low, high):",              # 0
    "    if low < high:",                           # 1
    "        p ← partition(arr, low, high)",        # 2
    "        quick_sort(arr, low, p-1)",            # 3
    "        quick_sort(arr, p+1, high)",           # 4
    "def partition(arr, low, high):",               # 5
    "    pivot ← arr[high];  i ← low-1",            # 6
    "    for j in low .. high-1:",                  # 7
    "        if arr[j] belongs before pivot:",      # 8
    "            i ← i+1;  swap arr[i], arr[j]",    # 9
    "    swap arr[i+1], arr[high];  return i+1",    # 10
]


def quick_sort(
    values: Sequence,
    ordering: Ordering = Ordering.ASCENDING,
) -> Generator[Step, None, None]:
    arr = list(values)
    stack: List[Tuple[int, int]] = [(0, len(arr) - 1)]

    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        p = yield from _partition(arr, low, high, ordering)
        stack.append((p + 1, high))
        stack.append((low, p - 1))


def _partition(
    arr: List,
    low: int,
    high: int,
    ordering: Ordering,
) -> Generator[Step, None, int]:
    pivot = arr[high]
    i = low - 1

    for j in range(low, high):
        yield Compare(j, high)
        if should_swap(pivot, arr[j], ordering):
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            if i != j:
                yield Swap(i, j)

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    if i + 1 != high:
        yield Swap(i + 1, high)
    return i + 1
