"""
algorithms/__init__.py - Algorithm Registry & Trace Generation
===============================================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm, generate

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, stable, …),
        …
    }

`generate()` is the entry point the engine uses: it validates the input,
looks the algorithm up and drains its generator into an immutable Trace.
Adding an algorithm means writing the generator and adding one entry here.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.shuffle   import fisher_yates, shuffle_trace
from algorithms.step      import Ordering, Step, Trace, Compare, Swap, Set, should_swap
from sequence import validate_values

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AlgoInfo - metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                # registry key, e.g. "bubble"
    label:            str                # human label, e.g. "Bubble Sort"
    fn:               Callable           # the generator function
    pseudocode:       List[str]          # lines for the side-panel
    stable:           bool = False       # equal bars keep their order?
    complexity_time:  str  = ""          # e.g. "O(n²)"
    complexity_space: str  = ""          # e.g. "O(1)"
    description:      str  = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        stable=True, complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent bars that are out of order.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the bar for each slot and swaps it in once.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        stable=True, complexity_time="O(n²)", complexity_space="O(1)",
        description="Shifts larger bars right and drops each key into its hole.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        stable=True, complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sorts each half, then merges them back slot by slot.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last bar, then sorts both sides.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


# ---------------------------------------------------------------------------
# Trace generation
# ---------------------------------------------------------------------------
def generate(
    algorithm: str,
    values: Sequence,
    ordering: Ordering = Ordering.ASCENDING,
) -> Trace:
    """
    Run `algorithm` over a private copy of `values` and return every Step.

    Raises:
        ValueError – unknown algorithm key, or values that are not finite numbers.
    """
    info = get_algorithm(algorithm)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algorithm}")
    if not isinstance(ordering, Ordering):
        raise ValueError(f"Unknown ordering: {ordering!r}")

    arr   = validate_values(values)
    trace = tuple(info.fn(arr, ordering))
    logger.debug("Generated %d steps for %s (%s, n=%d)",
                 len(trace), info.key, ordering.value, len(arr))
    return trace


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "generate",
    "fisher_yates",
    "shuffle_trace",
    "Ordering",
    "Step",
    "Trace",
    "Compare",
    "Swap",
    "Set",
    "should_swap",
]
