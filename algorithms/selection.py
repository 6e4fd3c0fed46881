"""
selection.py - Selection Sort
==============================
For each position i, scan the unsorted tail for the bar that belongs
there, then swap it into place once.

Events:
  • Compare(target, j)  – current best candidate vs. the next bar
  • Swap(i, target)     – only when the best candidate is not already at i
"""

from typing import Generator, List, Sequence

from algorithms.step import Ordering, Step, Compare, Swap, should_swap


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                  # 0
    "    for i in 0 .. n-2:",                    # 1
    "        target ← i",                        # 2
    "        for j in i+1 .. n-1:",              # 3
    "            compare arr[target], arr[j]",   # 4
    "            if arr[j] belongs first:",      # 5
    "                target ← j",                # 6
    "        if target ≠ i:",                    # 7
    "            swap arr[i], arr[target]",      # 8
]


def selection_sort(
    values: Sequence,
    ordering: Ordering = Ordering.ASCENDING,
) -> Generator[Step, None, None]:
    arr = list(values)
    n   = len(arr)

    for i in range(n - 1):
        target = i
        for j in range(i + 1, n):
            yield Compare(target, j)
            if should_swap(arr[target], arr[j], ordering):
                target = j

        if target != i:
            arr[i], arr[target] = arr[target], arr[i]
            yield Swap(i, target)
