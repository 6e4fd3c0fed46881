"""SVG bar rendering and the BarRenderer frame buffer."""

import pytest

from algorithms.step import Compare, Swap, Set
from ui import BarRenderer, CanvasConfig, highlights_for, render_bars
from ui.controls import algorithm_card, algorithm_selector, playback_controls, pseudocode_viewer, settings_panel
from engine.playback import SPEED_PRESETS
from algorithms import list_algorithms
from algorithms.step import Ordering


def test_render_bars_draws_one_rect_per_value():
    svg = render_bars([10, 20, 40])
    assert svg.startswith("<svg")
    assert svg.count('class="bar ') == 3
    assert 'data-value="40"' in svg


def test_tallest_bar_fills_the_plot():
    config = CanvasConfig()
    svg = render_bars([5, 10], config=config)
    plot_h = config.height - 2 * config.padding
    assert f'height="{plot_h:.2f}"' in svg


def test_render_bars_applies_highlight_colors():
    config = CanvasConfig()
    svg = render_bars([1, 2, 3], {1: "comparing"}, config)
    assert config.bar_colors["comparing"] in svg
    assert 'class="bar comparing"' in svg


def test_render_empty_sequence():
    svg = render_bars([])
    assert "<rect class" not in svg
    assert svg.endswith("</svg>")


def test_render_all_zero_values():
    svg = render_bars([0, 0])
    assert 'height="0.00"' in svg


@pytest.mark.parametrize("step, expected", [
    (Compare(0, 2), {0: "comparing", 2: "comparing"}),
    (Swap(1, 3), {1: "swapping", 3: "swapping"}),
    (Set(4, 99), {4: "swapping"}),
])
def test_highlights_for(step, expected):
    assert highlights_for(step) == expected


def test_bar_renderer_frames_advance():
    renderer = BarRenderer()
    start = renderer.snapshot()["frame"]

    renderer.render_initial([3, 1, 2])
    renderer.apply_step(Compare(0, 1), [3, 1, 2])
    renderer.mark_finalized([1, 2, 3])

    frame = renderer.snapshot()
    assert frame["frame"] == start + 3
    assert frame["svg"].count('class="bar sorted"') == 3


def test_controls_render_current_state():
    html = algorithm_selector(list_algorithms(), "merge")
    assert '<option value="merge" title="Sorts each half, then merges them back slot by slot." selected>' in html
    html = playback_controls(Ordering.DESCENDING, is_sorting=True, is_paused=True)
    assert "Sort: Descending" in html
    assert "Resume" in html
    assert "&lt;" in pseudocode_viewer(["if a < b:"], "x")


def test_selector_shows_card_for_selected_algorithm():
    html = algorithm_selector(list_algorithms(), "quick")
    assert 'id="algo-info"' in html
    assert 'data-algo="quick"' in html
    assert "Space: O(log n)" in html
    assert "Not stable" in html
    assert "Lomuto partition" in html


def test_algorithm_card_reports_stability():
    merge = next(a for a in list_algorithms() if a.key == "merge")
    html = algorithm_card(merge)
    assert "Stable" in html and "Not stable" not in html
    assert "Space: O(n)" in html


def test_settings_panel_offers_speed_presets():
    html = settings_panel(50, 20)
    assert 'list="speed-stops"' in html
    for name, ms in SPEED_PRESETS.items():
        assert f'<option value="{ms}" label="{name}"></option>' in html


def test_canvas_configs_do_not_share_palette():
    first, second = CanvasConfig(), CanvasConfig()
    first.bar_colors["default"] = "#000000"
    assert second.bar_colors["default"] != "#000000"
    assert CanvasConfig.bar_colors["default"] != "#000000"
