"""
bubble.py - Bubble Sort
========================
Generator-based bubble sort.  Yields a Step for every event:
  1. Compare two adjacent bars            →  Compare(j, j+1)
  2. Exchange them if they are inverted   →  Swap(j, j+1)

Every pass runs to the end; there is no early exit when a pass makes no
swaps, so the number of Compares depends only on the array length.
"""

from typing import Generator, List, Sequence

from algorithms.step import Ordering, Step, Compare, Swap, should_swap


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                     # 0
    "    for i in 0 .. n-2:",                    # 1
    "        for j in 0 .. n-i-2:",              # 2
    "            compare arr[j], arr[j+1]",      # 3
    "            if out of order:",              # 4
    "                swap arr[j], arr[j+1]",     # 5
]


def bubble_sort(
    values: Sequence,
    ordering: Ordering = Ordering.ASCENDING,
) -> Generator[Step, None, None]:
    arr = list(values)
    n   = len(arr)

    for i in range(n - 1):
        for j in range(n - i - 1):
            yield Compare(j, j + 1)
            if should_swap(arr[j], arr[j + 1], ordering):
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                yield Swap(j, j + 1)
