"""
step.py - Trace Step Records
=============================
Every sorting algorithm is a generator that yields Step objects.
A Step is one atomic, replayable instruction against the array:

    • Compare(i, j)       – two positions are being compared (no mutation)
    • Swap(i, j)          – the values at i and j are exchanged
    • Set(index, value)   – position `index` is overwritten with `value`

A Trace is the full tuple of Steps for one run.  It is computed before
playback begins and never changes afterwards.

Design decisions:
  - The three variants are frozen dataclasses, so a Trace can be shared
    and compared freely.  `kind` is a class-level tag the renderer can
    switch on without isinstance checks.
  - Ordering lives here too because the comparator is the one piece of
    logic every algorithm shares.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple, Union


# ---------------------------------------------------------------------------
# Ordering & comparator
# ---------------------------------------------------------------------------
class Ordering(Enum):
    ASCENDING  = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "Ordering":
        if self is Ordering.ASCENDING:
            return Ordering.DESCENDING
        return Ordering.ASCENDING


def should_swap(a, b, ordering: Ordering) -> bool:
    """True when `a` must come after `b` under `ordering`."""
    if ordering is Ordering.ASCENDING:
        return a > b
    return a < b


# ---------------------------------------------------------------------------
# Step variants
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Compare:
    kind: ClassVar[str] = "compare"

    i: int
    j: int

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.i, self.j)


@dataclass(frozen=True)
class Swap:
    kind: ClassVar[str] = "swap"

    i: int
    j: int

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.i, self.j)


@dataclass(frozen=True)
class Set:
    kind: ClassVar[str] = "set"

    index: int
    value: float

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.index,)


Step  = Union[Compare, Swap, Set]
Trace = Tuple[Step, ...]
