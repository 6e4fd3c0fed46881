"""
engine/
-------
Playback & session layer.

    from engine import play, shuffle, ControlSignal, SortingSession
"""

from engine.playback import (
    ControlSignal,
    PlaybackOutcome,
    Renderer,
    DEFAULT_SPEED_MS,
    SHUFFLE_SPEED_MS,
    PAUSE_POLL_MS,
    SPEED_PRESETS,
    apply_step,
    play,
    shuffle,
)
from engine.session import SortingSession, SessionState
from engine.runner import LoopRunner

__all__ = [
    "ControlSignal",
    "PlaybackOutcome",
    "Renderer",
    "DEFAULT_SPEED_MS",
    "SHUFFLE_SPEED_MS",
    "PAUSE_POLL_MS",
    "SPEED_PRESETS",
    "apply_step",
    "play",
    "shuffle",
    "SortingSession",
    "SessionState",
    "LoopRunner",
]
