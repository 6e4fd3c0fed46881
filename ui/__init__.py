"""
ui/
---
Presentation layer.

    from ui import render_bars, BarRenderer
    from ui import algorithm_selector, playback_controls, …
"""

from ui.canvas import render_bars, highlights_for, BarRenderer, CanvasConfig

from ui.controls import (
    algorithm_selector,
    algorithm_card,
    playback_controls,
    settings_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_bars",
    "highlights_for",
    "BarRenderer",
    "CanvasConfig",
    "algorithm_selector",
    "algorithm_card",
    "playback_controls",
    "settings_panel",
    "pseudocode_viewer",
]
