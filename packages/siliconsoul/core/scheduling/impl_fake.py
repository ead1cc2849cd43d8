"""Virtual-clock scheduler for tests and headless replay.

Time only moves when advance() is called, so timing behaviour can be
asserted exactly without sleeping.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import heapq
import itertools


@dataclass
class FakeTimerHandle:
    """Handle returned by FakeScheduler.call_later."""

    when: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Deterministic scheduler driven by a manually advanced clock.

    Callbacks due at the same instant run in scheduling order. Callbacks
    scheduled while advancing run in the same advance() call if they fall
    due before its target time.
    """

    now: float = 0.0
    _queue: list[tuple[float, int, FakeTimerHandle]] = field(default_factory=list)
    _counter: itertools.count = field(default_factory=itertools.count)

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> FakeTimerHandle:
        if delay_s < 0:
            raise ValueError(f"delay_s must be >= 0, got {delay_s}")
        handle = FakeTimerHandle(when=self.now + delay_s, callback=callback)
        heapq.heappush(self._queue, (handle.when, next(self._counter), handle))
        return handle

    def time(self) -> float:
        return self.now

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that are neither fired nor cancelled."""
        return sum(1 for _, _, h in self._queue if not h.cancelled and not h.fired)

    def advance(self, delta_s: float) -> int:
        """Move the clock forward, firing every callback that falls due.

        Args:
            delta_s: Seconds to advance (>= 0)

        Returns:
            Number of callbacks fired
        """
        if delta_s < 0:
            raise ValueError(f"delta_s must be >= 0, got {delta_s}")
        target = self.now + delta_s
        fired = 0
        while self._queue and self._queue[0][0] <= target + 1e-12:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = max(self.now, when)
            handle.fired = True
            handle.callback()
            fired += 1
        self.now = target
        return fired

    def run_until_idle(self) -> int:
        """Advance to the last pending callback and fire everything."""
        fired = 0
        while self.pending:
            next_when = min(h.when for _, _, h in self._queue if not h.cancelled and not h.fired)
            fired += self.advance(max(0.0, next_when - self.now))
        return fired
