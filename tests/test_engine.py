"""Tests for stepsort.engine.SortSession and stepsort.emitter."""
import asyncio

import pytest

from stepsort.emitter import CancelToken, StepEmitter
from stepsort.engine import SortSession
from stepsort.errors import BusyError, InvalidInputError, SortCancelled, UnknownAlgorithmError
from stepsort.model import RunState
from stepsort.scaler import scale


def test_pace_zero_returns() -> None:
    asyncio.run(StepEmitter().pace(0))


def test_pace_wakes_up_on_cancel() -> None:
    async def scenario():
        token = CancelToken()
        emitter = StepEmitter(token)
        loop = asyncio.get_running_loop()
        loop.call_later(0.01, token.cancel)
        started = loop.time()
        with pytest.raises(SortCancelled):
            await emitter.pace(10_000)
        return loop.time() - started

    assert asyncio.run(scenario()) < 5


def test_end_to_end_insertion() -> None:
    session = SortSession()
    session.set_text_input("5, 2, 8, 1, 9")
    result = asyncio.run(session.run_sort("insertion", 0))

    assert result.sequence.labels == [1, 2, 5, 8, 9]
    assert result.sequence.display == pytest.approx(scale([1, 2, 5, 8, 9]))
    assert session.sequence.labels == [1, 2, 5, 8, 9]
    assert result.cancelled is False
    assert result.metrics.comparisons > 0 and result.metrics.swaps == 4
    assert result.metrics.elapsed_ms >= 0
    assert session.recommend().startswith("Insertion Sort")
    assert session.describe("merge").stable is True
    assert session.state is RunState.IDLE
    assert session.marker.is_clear


@pytest.mark.parametrize("key", ["bubble", "selection", "insertion", "quick", "merge"])
def test_every_algorithm_through_the_session(key) -> None:
    values = [30, 7, 7, 99, 0, 15, 64, 7, 2, 41]
    session = SortSession(values)
    result = asyncio.run(session.run_sort(key, 0))
    assert result.sequence.labels == sorted(values)
    assert sorted(result.sequence.labels) == sorted(values)


def test_events_are_published_and_last_one_is_terminal() -> None:
    session = SortSession([3, 1, 2])
    events = []
    session.subscribe(events.append)
    result = asyncio.run(session.run_sort("selection", 0))

    assert [e.step for e in events] == list(range(1, result.steps + 1)) + [result.steps]
    assert all(not e.done for e in events[:-1])
    final = events[-1]
    assert final.done and not final.cancelled
    assert final.active is None and final.comparison is None
    assert final.labels == (1, 2, 3)
    assert final.comparisons == result.metrics.comparisons
    assert events[0].active == 0 and events[0].comparison == 1


def test_unsubscribe_stops_events() -> None:
    session = SortSession([2, 1])
    events = []
    unsubscribe = session.subscribe(events.append)
    unsubscribe()
    asyncio.run(session.run_sort("bubble", 0))
    assert events == []


def test_rejected_input_keeps_previous_sequence() -> None:
    session = SortSession([4, 2])
    before = session.sequence.copy()
    with pytest.raises(InvalidInputError):
        session.set_text_input("5, two, 8")
    with pytest.raises(InvalidInputError):
        session.set_text_input(",".join(["1"] * 31))
    assert session.sequence == before


def test_unknown_algorithm_leaves_session_idle() -> None:
    session = SortSession([4, 2])
    with pytest.raises(UnknownAlgorithmError):
        asyncio.run(session.run_sort("bogo", 0))
    assert session.state is RunState.IDLE


def test_run_without_input_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        asyncio.run(SortSession().run_sort("bubble", 0))


def test_second_run_and_new_input_rejected_while_running() -> None:
    async def scenario():
        session = SortSession([5, 4, 3, 2, 1])
        task = asyncio.ensure_future(session.run_sort("selection", 0))
        await asyncio.sleep(0)
        assert session.state is RunState.RUNNING
        with pytest.raises(BusyError):
            await session.run_sort("bubble", 0)
        with pytest.raises(BusyError):
            session.set_input([1, 2])
        with pytest.raises(BusyError):
            session.randomize()
        return await task

    result = asyncio.run(scenario())
    assert result.sequence.labels == [1, 2, 3, 4, 5]


def test_cancel_ends_run_and_releases_guard() -> None:
    session = SortSession([9, 8, 7, 6, 5, 4, 3, 2, 1])
    events = []

    def on_step(event):
        events.append(event)
        if event.step == 1:
            assert session.cancel() is True
            assert session.state is RunState.CANCELLING

    session.subscribe(on_step)
    result = asyncio.run(session.run_sort("merge", 10_000))

    assert result.cancelled is True
    assert result.steps == 1
    assert events[-1].done and events[-1].cancelled
    assert session.state is RunState.IDLE
    assert session.marker.is_clear
    assert sorted(result.sequence.labels) == list(range(1, 10))
    assert session.cancel() is False
    # guard released: a new run is accepted
    assert asyncio.run(session.run_sort("merge", 0)).sequence.labels == list(range(1, 10))


def test_stream_yields_until_done() -> None:
    async def scenario():
        session = SortSession([4, 3, 2, 1])
        return [e async for e in session.stream("bubble", 0)], session

    events, session = asyncio.run(scenario())
    assert events[-1].done
    assert events[-1].labels == (1, 2, 3, 4)
    assert sum(1 for e in events if e.kind == "swap") == 6
    assert session.state is RunState.IDLE


def test_stream_closed_early_cancels_run() -> None:
    async def scenario():
        session = SortSession([6, 5, 4, 3, 2, 1])
        agen = session.stream("quick", 10_000)
        first = await agen.__anext__()
        await agen.aclose()
        return first, session

    first, session = asyncio.run(scenario())
    assert first.step == 1
    assert session.state is RunState.IDLE
    assert sorted(session.sequence.labels) == [1, 2, 3, 4, 5, 6]
