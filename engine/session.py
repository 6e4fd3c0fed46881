"""
session.py - Visualizer Session
================================
The SortingSession is the ONLY object the control surface talks to.
It owns the live array and at most one running playback (a sort or a
shuffle), and turns button presses into state transitions.

State machine:
    IDLE       →  shuffle()   →  SHUFFLING  →  (done / cancelled)  →  IDLE
    IDLE       →  start()     →  SORTING    →  (done / cancelled)  →  IDLE
    SHUFFLING  →  start()     →  cancel shuffle, await it, SORTING
    SORTING    →  shuffle()   →  cancel sort, await it, SHUFFLING
    SORTING    →  pause() / resume()  (stays SORTING)

Changing the size, the ordering or the algorithm stops whatever is
running.  Size changes regenerate the array; ordering and algorithm
changes reshuffle it.

Thread safety:
  Not thread-safe.  All calls must come from the event loop that runs
  the playbacks (see engine.runner.LoopRunner for the Flask bridge).
"""

import asyncio
import logging
import numbers
import random
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional

from algorithms import generate, get_algorithm
from algorithms.step import Ordering
from engine.playback import (
    ControlSignal,
    PlaybackOutcome,
    Renderer,
    DEFAULT_SPEED_MS,
    SHUFFLE_SPEED_MS,
    play,
    shuffle,
)
from sequence import DEFAULT_SIZE, generate_array, validate_size

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE      = "idle"
    SHUFFLING = "shuffling"
    SORTING   = "sorting"


def _check_speed(speed_ms) -> float:
    if isinstance(speed_ms, bool) or not isinstance(speed_ms, numbers.Real):
        raise ValueError(f"Speed must be a number of milliseconds, got {speed_ms!r}")
    if speed_ms < 0:
        raise ValueError(f"Speed must not be negative, got {speed_ms}")
    return speed_ms


def _check_algorithm(key: str) -> str:
    if get_algorithm(key) is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return key


class SortingSession:
    """
    Attributes:
        values           : The live array.  Mutated only by the active playback.
        renderer         : Receives every visual update.
        algorithm        : Registry key used by start() when none is given.
        ordering         : Current Ordering.
        speed_ms         : Delay between sort steps; read on every step.
        shuffle_speed_ms : Delay between shuffle steps.
        state            : Current SessionState.
    """

    def __init__(
        self,
        renderer: Renderer,
        size: int = DEFAULT_SIZE,
        speed_ms: float = DEFAULT_SPEED_MS,
        ordering: Ordering = Ordering.ASCENDING,
        algorithm: str = "bubble",
        rng: Optional[random.Random] = None,
        shuffle_speed_ms: float = SHUFFLE_SPEED_MS,
    ):
        self.renderer         = renderer
        self.rng              = rng or random.Random()
        self.values           = generate_array(size, self.rng)
        self.algorithm        = _check_algorithm(algorithm)
        self.ordering         = ordering
        self.speed_ms         = _check_speed(speed_ms)
        self.shuffle_speed_ms = _check_speed(shuffle_speed_ms)
        self.state            = SessionState.IDLE

        self._signal: Optional[ControlSignal] = None
        self._active: Optional["asyncio.Task[PlaybackOutcome]"] = None

        self.renderer.render_initial(self.values)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    async def start(self, algorithm: Optional[str] = None) -> PlaybackOutcome:
        """Sort the live array, cancelling whatever is running first."""
        key = _check_algorithm(algorithm or self.algorithm)
        self.algorithm = key

        def make(signal: ControlSignal) -> Awaitable[PlaybackOutcome]:
            # snapshot taken only after the previous playback has stopped
            trace = generate(key, self.values, self.ordering)
            logger.info("Sorting %d bars with %s (%s): %d steps",
                        len(self.values), key, self.ordering.value, len(trace))
            return play(trace, self.values, self.renderer, lambda: self.speed_ms, signal)

        return await self._launch(SessionState.SORTING, make)

    async def shuffle(self) -> PlaybackOutcome:
        def make(signal: ControlSignal) -> Awaitable[PlaybackOutcome]:
            logger.info("Shuffling %d bars", len(self.values))
            return shuffle(self.values, self.renderer, signal, self.rng, lambda: self.shuffle_speed_ms)

        return await self._launch(SessionState.SHUFFLING, make)

    async def stop(self) -> None:
        """Cancel the active playback (if any) and wait until it has let go."""
        while self._active is not None and not self._active.done():
            active = self._active
            self._signal.cancel()
            # asyncio.wait does not re-raise; the task's own caller sees its errors
            await asyncio.wait({active})

    # ------------------------------------------------------------------
    # Pause / resume (sorting only)
    # ------------------------------------------------------------------
    def pause(self) -> None:
        if self.state is SessionState.SORTING and self._signal is not None:
            self._signal.pause()

    def resume(self) -> None:
        if self.state is SessionState.SORTING and self._signal is not None:
            self._signal.resume()

    def toggle_pause(self) -> bool:
        if self.state is not SessionState.SORTING or self._signal is None:
            return False
        paused = self._signal.toggle_pause()
        logger.info("Sort %s", "paused" if paused else "resumed")
        return paused

    @property
    def is_paused(self) -> bool:
        return self._signal is not None and self._signal.is_paused()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def set_speed(self, speed_ms: float) -> None:
        self.speed_ms = _check_speed(speed_ms)

    async def set_size(self, size: int) -> None:
        size = validate_size(size)
        await self.stop()
        self.values = generate_array(size, self.rng)
        logger.info("Regenerated array with %d bars", size)
        self.renderer.render_initial(self.values)

    async def set_algorithm(self, key: str) -> PlaybackOutcome:
        self.algorithm = _check_algorithm(key)
        return await self.shuffle()

    async def toggle_order(self) -> PlaybackOutcome:
        await self.stop()
        self.ordering = self.ordering.flipped()
        logger.info("Ordering is now %s", self.ordering.value)
        return await self.shuffle()

    def status(self) -> Dict[str, Any]:
        return {
            "state":     self.state.value,
            "paused":    self.is_paused,
            "algorithm": self.algorithm,
            "ordering":  self.ordering.value,
            "speed_ms":  self.speed_ms,
            "size":      len(self.values),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    async def _launch(
        self,
        state: SessionState,
        make: Callable[[ControlSignal], Awaitable[PlaybackOutcome]],
    ) -> PlaybackOutcome:
        await self.stop()

        # no await between stop() returning and the new task being registered
        signal = ControlSignal()
        task   = asyncio.ensure_future(make(signal))
        self._signal = signal
        self._active = task
        self.state   = state

        try:
            outcome = await task
        finally:
            if self._active is task:
                self._active = None
                self._signal = None
                self.state   = SessionState.IDLE

        logger.info("%s %s", state.value.capitalize(), outcome.value)
        return outcome
