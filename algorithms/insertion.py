"""
insertion.py - Insertion Sort
==============================
Shifts bars right instead of swapping, so the trace is made of Compare
and Set steps only:

  1. Pick up key = arr[i]                     →  Compare(i, i-1)
  2. While the bar to the left must move:
       shift it one slot right               →  Set(j+1, arr[j])
       look one further left                 →  Compare(j, i)
  3. Drop the key into the hole              →  Set(j+1, key)

The second index of the inner Compare stays `i` even after the first
shift, when that slot no longer holds the key.  The pairs are kept as-is
because the animation highlights exactly those two bars.
"""

from typing import Generator, List, Sequence

from algorithms.step import Ordering, Step, Compare, Set, should_swap


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                     # 0
    "    for i in 1 .. n-1:",                       # 1
    "        key ← arr[i];  j ← i-1",               # 2
    "        while j ≥ 0 and arr[j] after key:",    # 3
    "            arr[j+1] ← arr[j]",                # 4
    "            j ← j-1",                          # 5
    "        arr[j+1] ← key",                       # 6
]


def insertion_sort(
    values: Sequence,
    ordering: Ordering = Ordering.ASCENDING,
) -> Generator[Step, None, None]:
    arr = list(values)
    n   = len(arr)

    for i in range(1, n):
        key = arr[i]
        j   = i - 1

        yield Compare(i, j)

        while j >= 0 and should_swap(arr[j], key, ordering):
            arr[j + 1] = arr[j]
            yield Set(j + 1, arr[j])
            j -= 1
            if j >= 0:
                yield Compare(j, i)

        arr[j + 1] = key
        yield Set(j + 1, key)
