"""
controls.py - UI Control Panels
================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_selector  – dropdown of registered sorts + card for the selected one
  • playback_controls   – start / pause / shuffle / stop / ordering
  • settings_panel      – speed and size sliders, speed presets as slider stops
  • pseudocode_viewer   – the selected algorithm's pseudocode

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - main.py stitches them together.
"""

from html import escape
from typing import List

from algorithms import AlgoInfo
from algorithms.step import Ordering
from engine.playback import SPEED_PRESETS
from sequence import MAX_SIZE


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bubble") -> str:
    options = []
    selected = None
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        if sel:
            selected = algo
        options.append(
            f'<option value="{algo.key}" title="{escape(algo.description)}" {sel}>'
            f'{escape(algo.label)} ({algo.complexity_time})</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>
      <div id="algo-info">{algorithm_card(selected) if selected else ''}</div>
    </div>
    """


def algorithm_card(algo: AlgoInfo) -> str:
    """Description and complexity of one algorithm, shown under the dropdown."""
    stability = "Stable" if algo.stable else "Not stable"
    return f"""
    <div class="algo-card" data-algo="{algo.key}">
      <p>{escape(algo.description)}</p>
      <div class="muted">Time: {escape(algo.complexity_time)}</div>
      <div class="muted">Space: {escape(algo.complexity_space)}</div>
      <div class="muted">{stability}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    ordering: Ordering = Ordering.ASCENDING,
    is_sorting: bool = False,
    is_paused: bool = False,
) -> str:
    pause_label = "Resume" if is_paused else "Pause"
    order_label = "Ascending" if ordering is Ordering.ASCENDING else "Descending"

    return f"""
    <div class="panel playback-controls">
      <h3>Playback</h3>
      <div class="button-row">
        <button id="btn-start" class="btn-primary">Start Sorting</button>
        <button id="btn-pause" {'' if is_sorting else 'disabled'}>{pause_label}</button>
        <button id="btn-stop">Stop</button>
        <button id="btn-shuffle">Shuffle</button>
      </div>
      <button id="btn-order" class="btn-secondary">Sort: {order_label}</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
def settings_panel(speed_ms: float = 50, size: int = 20, max_size: int = MAX_SIZE) -> str:
    stops = ''.join(
        f'<option value="{ms}" label="{name}"></option>'
        for name, ms in SPEED_PRESETS.items()
    )
    return f"""
    <div class="panel settings">
      <h3>Settings</h3>
      <label>Speed:
        <input type="range" id="speed-slider" min="1" max="500" value="{int(speed_ms)}" list="speed-stops">
        <span id="speed-value">{int(speed_ms)}ms</span>
      </label>
      <datalist id="speed-stops">{stops}</datalist>
      <label>Size:
        <input type="range" id="size-slider" min="2" max="{max_size}" value="{size}">
        <span id="size-value">{size}</span>
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], algo_label: str = "") -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="muted">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = [
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(pseudocode_lines)
    ]
    return f"""
    <div class="code-block" data-algo="{escape(algo_label)}">
      {''.join(lines_html)}
    </div>
    """
