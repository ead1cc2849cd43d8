"""Protocol definitions for timer scheduling."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback. Safe to call after it fired or twice."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Schedules one-shot callbacks on a single-threaded loop.

    Callbacks never run re-entrantly from call_later itself; they run later
    on the same thread that owns the scheduler.
    """

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule callback to run once after delay_s seconds.

        Args:
            delay_s: Delay in seconds (>= 0)
            callback: Zero-argument callable

        Returns:
            Handle that cancels the pending callback
        """
        ...

    def time(self) -> float:
        """Current scheduler time in seconds."""
        ...
