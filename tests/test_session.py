"""SortingSession: one operation at a time, settings and state transitions."""

import asyncio
import random
from collections import Counter

import pytest

from algorithms.step import Ordering
from engine.playback import PlaybackOutcome
from engine.session import SessionState, SortingSession
from sequence import MAX_SIZE, MIN_VALUE, MAX_VALUE

from tests.conftest import RecordingRenderer, is_sorted


def _session(**kwargs) -> SortingSession:
    kwargs.setdefault("size", 12)
    kwargs.setdefault("speed_ms", 0)
    kwargs.setdefault("shuffle_speed_ms", 0)
    kwargs.setdefault("rng", random.Random(99))
    return SortingSession(RecordingRenderer(), **kwargs)


def test_new_session_renders_random_array():
    session = _session()
    assert len(session.values) == 12
    assert all(MIN_VALUE <= v <= MAX_VALUE for v in session.values)
    assert session.renderer.kinds() == ["initial"]
    assert session.state is SessionState.IDLE


@pytest.mark.parametrize("key", ["bubble", "selection", "insertion", "merge", "quick"])
def test_start_sorts_live_values(key):
    session = _session()
    before = Counter(session.values)

    outcome = asyncio.run(session.start(key))

    assert outcome is PlaybackOutcome.COMPLETED
    assert is_sorted(session.values, Ordering.ASCENDING)
    assert Counter(session.values) == before
    assert session.renderer.kinds()[-1] == "final"
    assert session.state is SessionState.IDLE
    assert session.algorithm == key


def test_start_rejects_unknown_algorithm():
    session = _session()
    with pytest.raises(ValueError):
        asyncio.run(session.start("bogo"))


def test_start_cancels_running_shuffle():
    session = _session(shuffle_speed_ms=20)

    async def scenario():
        shuffling = asyncio.ensure_future(session.shuffle())
        await asyncio.sleep(0.001)
        assert session.state is SessionState.SHUFFLING
        sorted_outcome = await session.start("merge")
        return await shuffling, sorted_outcome

    shuffle_outcome, sort_outcome = asyncio.run(scenario())
    assert shuffle_outcome is PlaybackOutcome.CANCELLED
    assert sort_outcome is PlaybackOutcome.COMPLETED
    assert is_sorted(session.values, Ordering.ASCENDING)


def test_shuffle_cancels_running_sort():
    session = _session(speed_ms=20)

    async def scenario():
        sorting = asyncio.ensure_future(session.start("bubble"))
        await asyncio.sleep(0.001)
        assert session.state is SessionState.SORTING
        shuffle_outcome = await session.shuffle()
        return await sorting, shuffle_outcome

    sort_outcome, shuffle_outcome = asyncio.run(scenario())
    assert sort_outcome is PlaybackOutcome.CANCELLED
    assert shuffle_outcome is PlaybackOutcome.COMPLETED
    assert session.state is SessionState.IDLE


def test_stop_acknowledges_cancellation():
    session = _session(speed_ms=20)

    async def scenario():
        sorting = asyncio.ensure_future(session.start("insertion"))
        await asyncio.sleep(0.001)
        await session.stop()
        return await sorting

    assert asyncio.run(scenario()) is PlaybackOutcome.CANCELLED
    assert session.state is SessionState.IDLE
    assert session.renderer.kinds()[-1] != "final"


def test_pause_and_resume_while_sorting():
    session = _session(speed_ms=10)

    async def scenario():
        sorting = asyncio.ensure_future(session.start("selection"))
        await asyncio.sleep(0.001)
        assert session.toggle_pause() is True
        assert session.status()["paused"] is True
        frozen = list(session.values)
        await asyncio.sleep(0.03)
        assert session.values == frozen
        session.resume()
        return await sorting

    assert asyncio.run(scenario()) is PlaybackOutcome.COMPLETED
    assert is_sorted(session.values, Ordering.ASCENDING)


def test_pause_is_ignored_when_idle():
    session = _session()
    assert session.toggle_pause() is False
    session.pause()
    assert session.is_paused is False


def test_toggle_order_flips_and_reshuffles():
    session = _session()

    async def scenario():
        await session.toggle_order()
        return await session.start()

    assert asyncio.run(scenario()) is PlaybackOutcome.COMPLETED
    assert session.ordering is Ordering.DESCENDING
    assert is_sorted(session.values, Ordering.DESCENDING)


def test_set_algorithm_reshuffles():
    session = _session()
    asyncio.run(session.set_algorithm("quick"))
    assert session.algorithm == "quick"
    assert session.renderer.kinds()[-1] != "final"


def test_set_algorithm_rejects_unknown_key():
    session = _session()
    with pytest.raises(ValueError):
        asyncio.run(session.set_algorithm("bogo"))
    assert session.algorithm == "bubble"


def test_set_size_regenerates():
    session = _session()
    asyncio.run(session.set_size(30))
    assert len(session.values) == 30
    assert session.renderer.calls[-1][0] == "initial"
    assert session.status()["size"] == 30


@pytest.mark.parametrize("size", [-1, MAX_SIZE + 1, 2.5, "10", True])
def test_set_size_rejects_bad_sizes(size):
    session = _session()
    with pytest.raises(ValueError):
        asyncio.run(session.set_size(size))
    assert len(session.values) == 12


def test_set_speed():
    session = _session()
    session.set_speed(120)
    assert session.status()["speed_ms"] == 120
    with pytest.raises(ValueError):
        session.set_speed(-5)


def test_status_fields():
    status = _session().status()
    assert status == {
        "state": "idle",
        "paused": False,
        "algorithm": "bubble",
        "ordering": "ascending",
        "speed_ms": 0,
        "size": 12,
    }
