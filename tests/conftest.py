"""Shared helpers for the visualizer test suite."""

from typing import List, Sequence, Tuple

import pytest

from algorithms import REGISTRY
from algorithms.step import Ordering, Step, Trace
from engine.playback import apply_step


ALGORITHM_KEYS = list(REGISTRY)
ORDERINGS = [Ordering.ASCENDING, Ordering.DESCENDING]


def replay(values: Sequence, trace: Trace) -> List:
    """Apply *trace* to a copy of *values* and return the result."""
    live = list(values)
    for step in trace:
        apply_step(step, live)
    return live


def is_sorted(values: Sequence, ordering: Ordering) -> bool:
    pairs = zip(values, values[1:])
    if ordering is Ordering.ASCENDING:
        return all(a <= b for a, b in pairs)
    return all(a >= b for a, b in pairs)


class RecordingRenderer:
    """Renderer that remembers every notification it receives."""

    def __init__(self):
        self.calls: List[Tuple[str, object, List]] = []

    def render_initial(self, sequence):
        self.calls.append(("initial", None, list(sequence)))

    def apply_step(self, step: Step, sequence):
        self.calls.append(("step", step, list(sequence)))

    def mark_finalized(self, sequence):
        self.calls.append(("final", None, list(sequence)))

    def kinds(self) -> List[str]:
        return [kind for kind, _, _ in self.calls]

    @property
    def steps(self) -> List[Step]:
        return [step for kind, step, _ in self.calls if kind == "step"]


@pytest.fixture
def recorder() -> RecordingRenderer:
    return RecordingRenderer()
