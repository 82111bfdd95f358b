"""Tests for cancellable timers."""

import asyncio

from hn_preview.services.timers import AsyncioScheduler, CancellableTimer
from tests.conftest import ManualScheduler


def test_start_replaces_pending_run() -> None:
    scheduler = ManualScheduler()
    timer = CancellableTimer(scheduler, 300, "show")
    calls: list[str] = []

    timer.start(lambda: calls.append("first"))
    scheduler.advance(100)
    timer.start(lambda: calls.append("second"))
    scheduler.advance(250)

    assert calls == []
    assert timer.pending

    scheduler.advance(50)

    assert calls == ["second"]
    assert not timer.pending
    assert len(scheduler.pending) == 0


def test_cancel_prevents_callback() -> None:
    scheduler = ManualScheduler()
    timer = CancellableTimer(scheduler, 150, "hide")
    calls: list[str] = []

    timer.start(lambda: calls.append("hide"))
    timer.cancel()
    scheduler.advance(1000)

    assert calls == []
    assert not timer.pending


def test_timer_is_not_pending_inside_its_callback() -> None:
    scheduler = ManualScheduler()
    timer = CancellableTimer(scheduler, 10)
    seen: list[bool] = []

    timer.start(lambda: seen.append(timer.pending))
    scheduler.advance(10)

    assert seen == [False]


def test_asyncio_scheduler_runs_callback() -> None:
    async def scenario() -> list[str]:
        calls: list[str] = []
        timer = CancellableTimer(AsyncioScheduler(), 1, "show")
        timer.start(lambda: calls.append("fired"))
        await asyncio.sleep(0.05)
        return calls

    assert asyncio.run(scenario()) == ["fired"]
