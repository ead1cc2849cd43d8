"""Scroll progress sources.

A progress source turns whatever drives scrolling into a normalized float
in [0, 1] and pushes it to subscribers. Subscribing delivers the current
position immediately, so a view mounted mid-page starts in the right layer.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Protocol, runtime_checkable

from siliconsoul.core.utils.math import clamp

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
Unsubscribe = Callable[[], None]


@runtime_checkable
class ProgressSource(Protocol):
    """Pushes normalized scroll progress to subscribers."""

    def subscribe(self, callback: ProgressCallback) -> Unsubscribe:
        """Register callback for progress samples.

        Implementations deliver one sample for the current position before
        returning, then one per subsequent update. Duplicate values may be
        delivered.

        Args:
            callback: Called with each progress sample

        Returns:
            Idempotent function that stops further deliveries
        """
        ...


def compute_progress(scroll_y: float, max_scroll: float) -> float:
    """Normalize a scroll offset against the scrollable extent.

    Args:
        scroll_y: Current scroll offset
        max_scroll: Maximum scroll offset (document height - viewport height)

    Returns:
        Progress in [0, 1]; 0.0 when the page cannot scroll

    Example:
        >>> compute_progress(250, 1000)
        0.25
        >>> compute_progress(10, 0)
        0.0
    """
    if max_scroll <= 0:
        return 0.0
    return float(clamp(scroll_y / max_scroll, 0.0, 1.0))


class ScrollProgressSource:
    """In-process progress source fed with scroll offsets.

    Args:
        scroll_y: Initial scroll offset
        max_scroll: Initial maximum scroll offset
    """

    def __init__(self, scroll_y: float = 0.0, max_scroll: float = 0.0) -> None:
        self._scroll_y = scroll_y
        self._max_scroll = max_scroll
        self._subscribers: list[ProgressCallback] = []

    @property
    def progress(self) -> float:
        return compute_progress(self._scroll_y, self._max_scroll)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: ProgressCallback) -> Unsubscribe:
        self._subscribers.append(callback)
        callback(self.progress)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                logger.debug("Progress subscriber already removed")

        return unsubscribe

    def scroll_to(self, scroll_y: float) -> None:
        """Set the scroll offset and publish the new progress."""
        self._scroll_y = scroll_y
        self._publish()

    def resize(self, max_scroll: float) -> None:
        """Set the scrollable extent and publish the new progress."""
        self._max_scroll = max_scroll
        self._publish()

    def emit(self, progress: float) -> None:
        """Publish a raw progress sample, bypassing offset normalization."""
        for callback in list(self._subscribers):
            callback(progress)

    def _publish(self) -> None:
        self.emit(self.progress)
