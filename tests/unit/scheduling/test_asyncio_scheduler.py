"""Tests for the asyncio-backed scheduler."""

from __future__ import annotations

import asyncio

import pytest

from siliconsoul.core.scheduling import AsyncioScheduler, Scheduler
from siliconsoul.core.scroll import LayerName, TransitionController


@pytest.mark.asyncio
async def test_call_later_fires_on_running_loop() -> None:
    """Callbacks run on the event loop after the delay."""
    scheduler = AsyncioScheduler()
    fired = asyncio.Event()
    scheduler.call_later(0.01, fired.set)
    await asyncio.wait_for(fired.wait(), timeout=1.0)
    assert fired.is_set()


@pytest.mark.asyncio
async def test_cancel_prevents_callback() -> None:
    """Cancelled handles never fire."""
    scheduler = AsyncioScheduler()
    fired: list[int] = []
    handle = scheduler.call_later(0.01, lambda: fired.append(1))
    handle.cancel()
    await asyncio.sleep(0.05)
    assert fired == []


@pytest.mark.asyncio
async def test_explicit_loop_and_time() -> None:
    """An explicit loop is used for scheduling and time."""
    loop = asyncio.get_running_loop()
    scheduler = AsyncioScheduler(loop)
    assert isinstance(scheduler, Scheduler)
    assert scheduler.loop is loop
    assert scheduler.time() == pytest.approx(loop.time(), abs=0.1)


@pytest.mark.asyncio
async def test_glitch_pulse_on_event_loop() -> None:
    """The controller's glitch pulse ends on a real event loop."""
    flags: list[bool] = []
    ended = asyncio.Event()

    def on_glitch(active: bool) -> None:
        flags.append(active)
        if not active:
            ended.set()

    controller = TransitionController(
        lambda layer: None,
        on_glitch,
        scheduler=AsyncioScheduler(),
        glitch_duration_s=0.02,
    )
    controller.start(0.0)
    controller.on_progress_update(0.5)
    assert controller.current_layer is LayerName.QUANTUM
    await asyncio.wait_for(ended.wait(), timeout=1.0)
    assert flags == [True, False]
    controller.dispose()


def test_negative_delay_rejected() -> None:
    """Negative delays are rejected before touching the loop."""
    loop = asyncio.new_event_loop()
    try:
        with pytest.raises(ValueError, match="delay_s"):
            AsyncioScheduler(loop).call_later(-1, lambda: None)
    finally:
        loop.close()
