"""
canvas.py - SVG Bar Chart Renderer
===================================
Two pieces:

  • render_bars(values, highlights)  – pure function: array → SVG string
  • BarRenderer                      – the Renderer that playback talks to.
                                       It turns each Step into a highlight
                                       map and keeps the latest SVG frame.

Design decisions:
  - render_bars has NO side effects; BarRenderer is the only stateful bit.
  - Bar height is proportional to |value| / max|value|, like the page
    always did, so the tallest bar fills the plot.
  - Highlight state is a plain {index: state} dict looked up in
    CanvasConfig.bar_colors.
"""

import threading
from typing import Dict, Optional, Sequence

from algorithms.step import Step, Compare, Swap, Set


# ---------------------------------------------------------------------------
# Visual Config
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:   int = 900
    height:  int = 420
    padding: int = 12
    gap:     int = 2           # horizontal space between bars
    bg:      str = "#0d1117"

    # bar colors (state → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#0ea5e9",   # cyan
        "comparing": "#f59e0b",   # amber
        "swapping":  "#f43f5e",   # rose
        "sorted":    "#10b981",   # emerald
    }

    label_color:     str = "#e6edf3"
    label_size:      int = 11
    max_label_bars:  int = 40     # hide value labels when bars get too thin

    def __init__(self):
        # each config owns its palette
        self.bar_colors = dict(CanvasConfig.bar_colors)


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: Sequence,
    highlights: Optional[Dict[int, str]] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        values     : Bar values, left to right.
        highlights : {index: "comparing" | "swapping" | "sorted"}.
        config     : Visual config.
    """
    highlights = highlights or {}
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    n = len(values)
    if n:
        peak   = max(abs(v) for v in values)
        plot_w = config.width - 2 * config.padding
        plot_h = config.height - 2 * config.padding
        slot   = plot_w / n
        show_labels = n <= config.max_label_bars

        for idx, value in enumerate(values):
            state = highlights.get(idx, "default")
            fill  = config.bar_colors.get(state, config.bar_colors["default"])
            h     = (abs(value) / peak) * plot_h if peak else 0.0
            x     = config.padding + idx * slot
            y     = config.padding + plot_h - h
            w     = max(slot - config.gap, 1.0)

            svg_parts.append(
                f'<rect class="bar {state}" data-index="{idx}" data-value="{value}" '
                f'x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" '
                f'rx="2" fill="{fill}"/>'
            )
            if show_labels:
                svg_parts.append(
                    f'<text x="{x + w / 2:.2f}" y="{y - 3:.2f}" text-anchor="middle" '
                    f'font-size="{config.label_size}" fill="{config.label_color}">{value}</text>'
                )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------
def highlights_for(step: Step) -> Dict[int, str]:
    """Which bars a step lights up, and how."""
    if isinstance(step, Compare):
        return {step.i: "comparing", step.j: "comparing"}
    if isinstance(step, (Swap, Set)):
        return {idx: "swapping" for idx in step.indices}
    raise TypeError(f"Not a trace step: {step!r}")


class BarRenderer:
    """
    Keeps the most recent frame for pollers.

    Playback runs on the event-loop thread while Flask reads frames from
    its worker threads, so the frame is swapped under a lock.
    """

    def __init__(self, config: CanvasConfig = CONFIG):
        self.config = config
        self._lock  = threading.Lock()
        self._svg   = render_bars([], config=config)
        self._frame = 0

    # -- Renderer interface --
    def render_initial(self, sequence: Sequence) -> None:
        self._draw(sequence, {})

    def apply_step(self, step: Step, sequence: Sequence) -> None:
        self._draw(sequence, highlights_for(step))

    def mark_finalized(self, sequence: Sequence) -> None:
        self._draw(sequence, {idx: "sorted" for idx in range(len(sequence))})

    # -- readers --
    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {"svg": self._svg, "frame": self._frame}

    def _draw(self, sequence: Sequence, highlights: Dict[int, str]) -> None:
        svg = render_bars(list(sequence), highlights, self.config)
        with self._lock:
            self._svg    = svg
            self._frame += 1
