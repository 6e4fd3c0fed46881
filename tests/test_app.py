"""Flask routes: page, frame polling and request validation."""

import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    with main.app.test_client() as client:
        yield client


def test_index_renders_page(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "<title>Sorting Visualizer</title>" in body
    assert "<svg" in body
    assert 'id="algo-selector"' in body


def test_frame_reports_svg_and_status(client):
    data = client.get("/api/frame").get_json()
    assert data["svg"].startswith("<svg")
    assert isinstance(data["frame"], int)
    assert data["status"]["state"] in {"idle", "shuffling", "sorting"}
    assert data["status"]["ordering"] in {"ascending", "descending"}


@pytest.mark.parametrize("payload", [
    {"size": -3}, {"size": "abc"}, {}, {"size": 10_000},
    {"size": 2.9}, {"size": "12"}, {"size": True},
])
def test_size_rejects_bad_input(client, payload):
    res = client.post("/api/size", json=payload)
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_start_rejects_unknown_algorithm(client):
    res = client.post("/api/start", json={"algorithm": "bogo"})
    assert res.status_code == 400


def test_algorithm_rejects_missing_key(client):
    assert client.post("/api/algorithm", json={}).status_code == 400


def test_algorithm_returns_pseudocode(client):
    res = client.post("/api/algorithm", json={"algorithm": "quick"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["algorithm"] == "quick"
    assert "partition" in data["pseudocode"]


def test_speed_updates_session(client):
    res = client.post("/api/speed", json={"speed": 75})
    assert res.status_code == 200
    assert client.get("/api/frame").get_json()["status"]["speed_ms"] == 75


def test_speed_rejects_negative(client):
    assert client.post("/api/speed", json={"speed": -1}).status_code == 400


def test_pause_answers_with_flag(client):
    res = client.post("/api/pause")
    assert res.status_code == 200
    assert isinstance(res.get_json()["paused"], bool)


@pytest.mark.parametrize("speed", ["75", 2.9, False])
def test_speed_rejects_non_integers(client, speed):
    res = client.post("/api/speed", json={"speed": speed})
    assert res.status_code == 400
    assert "must be an integer" in res.get_json()["error"]


def test_algorithm_returns_info_card(client):
    data = client.post("/api/algorithm", json={"algorithm": "merge"}).get_json()
    assert "Space: O(n)" in data["info"]


def test_app_sets_no_secret_key():
    assert main.app.secret_key is None
