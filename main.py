"""
main.py - Sorting Visualizer Flask App
=======================================
The web server that hosts one visualizer session.

Routes:
  GET  /                 – main UI
  GET  /api/frame        – latest SVG frame + session status (polled by the page)
  POST /api/start        – sort the bars (optional {"algorithm": key})
  POST /api/pause        – toggle pause while sorting
  POST /api/stop         – cancel whatever is running
  POST /api/shuffle      – animated Fisher–Yates shuffle
  POST /api/order        – flip ascending / descending (reshuffles)
  POST /api/algorithm    – select the algorithm (reshuffles)
  POST /api/speed        – set the step delay in ms
  POST /api/size         – regenerate the array with a new size

State management:
  The session and its asyncio loop live for the whole process; one
  LoopRunner thread runs every playback.  Routes never touch the session
  directly, they hand work to the runner and return immediately.  The
  page polls /api/frame to animate.

Configuration:
  ARRAY_SIZE and SPEED_MS can be overridden with SORTVIZ_ARRAY_SIZE and
  SORTVIZ_SPEED_MS environment variables.
"""

import logging

from flask import Flask, jsonify, render_template_string, request

from algorithms import Ordering, get_algorithm, list_algorithms
from engine import DEFAULT_SPEED_MS, LoopRunner, SessionState, SortingSession
from sequence import DEFAULT_SIZE, MAX_SIZE, validate_size
from ui import (
    BarRenderer,
    algorithm_card,
    algorithm_selector,
    playback_controls,
    pseudocode_viewer,
    settings_panel,
)

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_mapping(ARRAY_SIZE=DEFAULT_SIZE, SPEED_MS=DEFAULT_SPEED_MS)
app.config.from_prefixed_env("SORTVIZ")

renderer   = BarRenderer()
runner     = LoopRunner()
visualizer = SortingSession(
    renderer,
    size=app.config["ARRAY_SIZE"],
    speed_ms=app.config["SPEED_MS"],
)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _body() -> dict:
    return request.get_json(silent=True) or {}


def _int_field(data: dict, name: str) -> int:
    if name not in data:
        raise ValueError(f"Missing field: {name}")
    value = data[name]
    # JSON true/false arrive as bool, a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field {name} must be an integer, got {value!r}")
    return value


def _bad_request(exc: Exception):
    logger.warning("Rejected request to %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


def _algorithm_key(data: dict, default: str) -> str:
    key = data.get("algorithm") or default
    if get_algorithm(key) is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return key


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    status = runner.call(visualizer.status)
    algo_info = get_algorithm(status["algorithm"])

    html = render_template_string(INDEX_TEMPLATE,
        svg=renderer.snapshot()["svg"],
        algo_selector=algorithm_selector(list_algorithms(), status["algorithm"]),
        playback=playback_controls(
            ordering=Ordering(status["ordering"]),
            is_sorting=status["state"] == SessionState.SORTING.value,
            is_paused=status["paused"],
        ),
        settings=settings_panel(status["speed_ms"], status["size"], MAX_SIZE),
        pseudocode=pseudocode_viewer(
            algo_info.pseudocode if algo_info else [],
            algo_info.label if algo_info else "",
        ),
    )
    return html


# ---------------------------------------------------------------------------
# API: Frames
# ---------------------------------------------------------------------------
@app.route("/api/frame")
def api_frame():
    frame = renderer.snapshot()
    frame["status"] = runner.call(visualizer.status)
    return jsonify(frame)


# ---------------------------------------------------------------------------
# API: Operations
# ---------------------------------------------------------------------------
@app.route("/api/start", methods=["POST"])
def api_start():
    try:
        key = _algorithm_key(_body(), visualizer.algorithm)
    except ValueError as e:
        return _bad_request(e)

    runner.submit(visualizer.start(key))
    return jsonify({"started": key})


@app.route("/api/pause", methods=["POST"])
def api_pause():
    paused = runner.call(visualizer.toggle_pause)
    return jsonify({"paused": paused})


@app.route("/api/stop", methods=["POST"])
def api_stop():
    runner.submit(visualizer.stop())
    return jsonify({"stopped": True})


@app.route("/api/shuffle", methods=["POST"])
def api_shuffle():
    runner.submit(visualizer.shuffle())
    return jsonify({"shuffling": True})


@app.route("/api/order", methods=["POST"])
def api_order():
    runner.submit(visualizer.toggle_order())
    return jsonify({"toggling": True})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/algorithm", methods=["POST"])
def api_algorithm():
    try:
        key = _algorithm_key(_body(), "")
    except ValueError as e:
        return _bad_request(e)

    algo_info = get_algorithm(key)
    runner.submit(visualizer.set_algorithm(key))
    return jsonify({
        "algorithm": key,
        "pseudocode": pseudocode_viewer(algo_info.pseudocode, algo_info.label),
        "info": algorithm_card(algo_info),
    })


@app.route("/api/speed", methods=["POST"])
def api_speed():
    try:
        speed = _int_field(_body(), "speed")
        runner.call(visualizer.set_speed, speed)
    except ValueError as e:
        return _bad_request(e)
    return jsonify({"speed_ms": speed})


@app.route("/api/size", methods=["POST"])
def api_size():
    try:
        size = validate_size(_int_field(_body(), "size"))
    except ValueError as e:
        return _bad_request(e)

    runner.submit(visualizer.set_size(size))
    return jsonify({"size": size})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: #010409; color: #e6edf3;
      display: flex; height: 100vh; overflow: hidden;
    }
    #sidebar { width: 320px; padding: 24px 16px; border-right: 1px solid #30363d; overflow-y: auto; }
    #main { flex: 1; display: flex; flex-direction: column; align-items: center; justify-content: center; gap: 20px; }
    .panel { background: #161b22; border: 1px solid #30363d; border-radius: 12px; padding: 16px; margin-bottom: 16px; }
    .panel h3 { font-size: 13px; text-transform: uppercase; color: #0ea5e9; margin-bottom: 12px; }
    .button-row { display: flex; gap: 8px; flex-wrap: wrap; margin-bottom: 8px; }
    button, select { background: #1c2128; color: #e6edf3; border: 1px solid #30363d; border-radius: 6px; padding: 6px 10px; cursor: pointer; }
    button:disabled { opacity: 0.4; cursor: default; }
    .btn-primary { background: #0ea5e9; color: #010409; }
    label { display: block; margin: 8px 0; font-size: 13px; }
    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; white-space: pre; }
    .muted { color: #7d8590; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-selector-panel">{{ algo_selector|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="settings">{{ settings|safe }}</div>
  </div>
  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div class="panel" id="pseudocode">{{ pseudocode|safe }}</div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    // Frame polling
    let lastFrame = -1;
    async function poll() {
      try {
        const res = await fetch('/api/frame');
        const data = await res.json();
        if (data.frame !== lastFrame) {
          document.getElementById('canvas-svg').innerHTML = data.svg;
          lastFrame = data.frame;
        }
        const pauseBtn = document.getElementById('btn-pause');
        pauseBtn.disabled = data.status.state !== 'sorting';
        pauseBtn.textContent = data.status.paused ? 'Resume' : 'Pause';
        document.getElementById('btn-start').disabled = data.status.state === 'sorting';
        document.getElementById('btn-order').textContent =
          'Sort: ' + (data.status.ordering === 'ascending' ? 'Ascending' : 'Descending');
      } finally {
        setTimeout(poll, 40);
      }
    }
    poll();

    document.getElementById('btn-start').addEventListener('click', () =>
      post('/api/start', {algorithm: document.getElementById('algo-selector').value}));
    document.getElementById('btn-pause').addEventListener('click', () => post('/api/pause'));
    document.getElementById('btn-stop').addEventListener('click', () => post('/api/stop'));
    document.getElementById('btn-shuffle').addEventListener('click', () => post('/api/shuffle'));
    document.getElementById('btn-order').addEventListener('click', () => post('/api/order'));

    document.getElementById('algo-selector').addEventListener('change', async (e) => {
      const data = await post('/api/algorithm', {algorithm: e.target.value});
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.info) document.getElementById('algo-info').innerHTML = data.info;
    });

    document.getElementById('speed-slider').addEventListener('input', (e) => {
      document.getElementById('speed-value').textContent = e.target.value + 'ms';
      post('/api/speed', {speed: +e.target.value});
    });

    document.getElementById('size-slider').addEventListener('input', (e) => {
      document.getElementById('size-value').textContent = e.target.value;
      post('/api/size', {size: +e.target.value});
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Sorting Visualizer on http://localhost:5000")
    app.run(debug=False, host="0.0.0.0", port=5000, threaded=True)
