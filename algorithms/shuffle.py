"""
shuffle.py - Fisher–Yates Shuffle Trace
========================================
Produces a trace of Swap steps that turns the input into a uniformly
random permutation.  Positions are visited from the end: slot i is
exchanged with a random slot j in [0, i].  A Swap is only emitted when
i ≠ j.
"""

import random
from typing import Generator, Optional, Sequence

from algorithms.step import Step, Swap, Trace


def fisher_yates(values: Sequence, rng: random.Random) -> Generator[Step, None, None]:
    for i in range(len(values) - 1, 0, -1):
        j = rng.randrange(i + 1)
        if i != j:
            yield Swap(i, j)


def shuffle_trace(values: Sequence, rng: Optional[random.Random] = None) -> Trace:
    """Whole shuffle as a Trace.  Pass a seeded `rng` for repeatable output."""
    return tuple(fisher_yates(values, rng or random.Random()))
