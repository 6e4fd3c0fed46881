"""
playback.py - Trace Playback Controller
========================================
Replays a Trace one Step at a time against the live list and a Renderer,
at a caller-controlled cadence, with pause / resume / cancel.

Per step:
    1. cancelled?  → stop, return CANCELLED (no rollback)
    2. paused?     → poll every PAUSE_POLL_MS until resumed or cancelled
    3. apply the Step to the live list, notify the renderer
    4. sleep speed_ms

After the last step (and only if not cancelled) the renderer is told to
mark the whole sequence as sorted.  A cancelled run, or one played with
finalize=False, ends with a plain render_initial() redraw so no bar is
left highlighted.

Concurrency:
  Everything here runs on a single asyncio loop.  The only suspension
  points are the inter-step sleep and the pause poll, so a Step is always
  applied completely or not at all.  Cancellation is a flag checked at
  each step boundary; it takes effect within one step.
"""

import asyncio
import logging
import random
from enum import Enum
from typing import Callable, List, Optional, Protocol, Sequence, Union

from algorithms.step import Step, Trace, Compare, Swap, Set
from algorithms.shuffle import shuffle_trace

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Timing (milliseconds)
# ---------------------------------------------------------------------------
DEFAULT_SPEED_MS = 50
SHUFFLE_SPEED_MS = 10      # shuffle always runs at the fastest cadence
PAUSE_POLL_MS    = 100

SPEED_PRESETS = {
    "slow":   300,
    "medium": 50,
    "fast":   10,
    "turbo":  1,
}

Speed = Union[float, Callable[[], float]]


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------
class PlaybackOutcome(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Control signal
# ---------------------------------------------------------------------------
class ControlSignal:
    """
    Pause / cancel flags for one playback.  The owner flips them; play()
    polls them.  A fresh signal is used per playback, so a cancel never
    leaks into the next run.
    """

    def __init__(self):
        self._paused:    bool = False
        self._cancelled: bool = False

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def toggle_pause(self) -> bool:
        self._paused = not self._paused
        return self._paused

    def cancel(self) -> None:
        self._cancelled = True
        self._paused    = False

    def is_paused(self) -> bool:
        return self._paused

    def is_cancelled(self) -> bool:
        return self._cancelled


# ---------------------------------------------------------------------------
# Renderer interface
# ---------------------------------------------------------------------------
class Renderer(Protocol):
    def render_initial(self, sequence: Sequence) -> None: ...

    def apply_step(self, step: Step, sequence: Sequence) -> None: ...

    def mark_finalized(self, sequence: Sequence) -> None: ...


# ---------------------------------------------------------------------------
# Step application
# ---------------------------------------------------------------------------
def apply_step(step: Step, live: List) -> None:
    """Mutate `live` according to one Step.  Compare leaves it untouched."""
    n = len(live)
    for idx in _indices_of(step):
        if not 0 <= idx < n:
            raise IndexError(f"{step!r} is out of range for a sequence of length {n}")

    if isinstance(step, Swap):
        live[step.i], live[step.j] = live[step.j], live[step.i]
    elif isinstance(step, Set):
        live[step.index] = step.value


def _indices_of(step: Step):
    if isinstance(step, (Compare, Swap, Set)):
        return step.indices
    raise TypeError(f"Not a trace step: {step!r}")


def _delay_ms(speed: Speed) -> float:
    return speed() if callable(speed) else speed


def _cancelled(renderer: Renderer, live: List) -> PlaybackOutcome:
    # no rollback, only the highlights go
    renderer.render_initial(live)
    return PlaybackOutcome.CANCELLED


# ---------------------------------------------------------------------------
# Playback
# ---------------------------------------------------------------------------
async def play(
    trace: Trace,
    live: List,
    renderer: Renderer,
    speed_ms: Speed = DEFAULT_SPEED_MS,
    signal: Optional[ControlSignal] = None,
    finalize: bool = True,
    poll_ms: float = PAUSE_POLL_MS,
) -> PlaybackOutcome:
    """
    Apply `trace` to `live` in order, notifying `renderer` after each Step.

    Args:
        trace    : Steps to replay.
        live     : The list being animated; mutated in place.
        renderer : Receives render_initial / apply_step / mark_finalized.
        speed_ms : Delay after each step, or a callable returning it
                   (re-read every step so speed changes apply mid-run).
        signal   : Pause / cancel flags.  A private one is used if omitted.
        finalize : Call renderer.mark_finalized() on completion; otherwise
                   the bars are redrawn without highlights.
        poll_ms  : How often a paused playback re-checks its signal.

    Returns:
        PlaybackOutcome.COMPLETED or PlaybackOutcome.CANCELLED.
    """
    signal = signal or ControlSignal()
    renderer.render_initial(live)

    for idx, step in enumerate(trace):
        if signal.is_cancelled():
            logger.info("Playback cancelled at step %d/%d", idx, len(trace))
            return _cancelled(renderer, live)

        while signal.is_paused():
            await asyncio.sleep(poll_ms / 1000)
            if signal.is_cancelled():
                logger.info("Playback cancelled while paused at step %d/%d", idx, len(trace))
                return _cancelled(renderer, live)

        apply_step(step, live)
        renderer.apply_step(step, live)

        await asyncio.sleep(max(0.0, _delay_ms(speed_ms)) / 1000)

    if signal.is_cancelled():
        logger.info("Playback cancelled after the last step")
        return _cancelled(renderer, live)

    if finalize:
        renderer.mark_finalized(live)
    else:
        # plain redraw clears the last step's highlight
        renderer.render_initial(live)
    return PlaybackOutcome.COMPLETED


async def shuffle(
    live: List,
    renderer: Renderer,
    signal: Optional[ControlSignal] = None,
    rng: Optional[random.Random] = None,
    speed_ms: Speed = SHUFFLE_SPEED_MS,
) -> PlaybackOutcome:
    """Fisher–Yates shuffle `live` in place, animated like any other trace."""
    trace = shuffle_trace(live, rng)
    logger.debug("Shuffling %d bars with %d swaps", len(live), len(trace))
    return await play(trace, live, renderer, speed_ms, signal, finalize=False)
