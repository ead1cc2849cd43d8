"""Scheduler backed by an asyncio event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class AsyncioScheduler:
    """Scheduler that delegates to loop.call_later.

    Args:
        loop: Event loop to schedule on. Defaults to the running loop at
            the time of each call.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        if delay_s < 0:
            raise ValueError(f"delay_s must be >= 0, got {delay_s}")
        return self.loop.call_later(delay_s, callback)

    def time(self) -> float:
        return self.loop.time()
