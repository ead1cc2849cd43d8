"""Hero bootloader sequence.

Plays a fixed list of terminal lines on a schedule, reporting how many
lines are visible and the overall percentage, then signals completion so
the renderer can dismiss the terminal.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
import math

from siliconsoul.core.boot.models import BootLine, BootProgress
from siliconsoul.core.errors import BootSequenceError
from siliconsoul.core.scheduling import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

BOOT_DONE_MS = 2800

_OK = "#b0ffcc"

BOOT_LINES: tuple[BootLine, ...] = (
    BootLine(text="SILICON SOUL v2.0 - INITIALIZING...", delay_ms=0, color="#4BD8A0"),
    BootLine(text="POST CHECK: RAM .................. OK", delay_ms=300, color=_OK),
    BootLine(text="POST CHECK: GPU .................. OK", delay_ms=600, color=_OK),
    BootLine(text="POST CHECK: PORTFOLIO.EXE ........ LOADED", delay_ms=900, color=_OK),
    BootLine(text="POST CHECK: ESP32_CORE ........... ONLINE", delay_ms=1200, color=_OK),
    BootLine(text="POST CHECK: RF_MODULE ............ CALIBRATED", delay_ms=1500, color=_OK),
    BootLine(
        text="POST CHECK: EGO_MODULE ........... WARN (within limits)",
        delay_ms=1800,
        color="#D4A843",
    ),
    BootLine(text="MOUNTING INTERFACE ...............", delay_ms=2100, color="#4DFFFF"),
    BootLine(text="SIGNAL ACQUIRED. WELCOME, OPERATOR.", delay_ms=2400, color="#4BD8A0"),
)


def boot_percent(visible: int, total: int) -> int:
    """Percentage of boot lines shown, rounded half up.

    Example:
        >>> boot_percent(5, 9)
        56
        >>> boot_percent(0, 0)
        0
    """
    if total <= 0:
        return 0
    return math.floor(visible / total * 100 + 0.5)


class BootSequence:
    """Schedules boot lines and the completion signal.

    Args:
        on_line: Called with a BootProgress as each line appears.
        on_done: Called once when the boot completes.
        scheduler: Timer source.
        lines: Lines to play, in display order.
        done_ms: Time after start at which the boot completes.
    """

    def __init__(
        self,
        on_line: Callable[[BootProgress], None],
        on_done: Callable[[], None] | None = None,
        *,
        scheduler: Scheduler,
        lines: Sequence[BootLine] = BOOT_LINES,
        done_ms: int = BOOT_DONE_MS,
    ) -> None:
        if done_ms < 0:
            raise ValueError(f"done_ms must be >= 0, got {done_ms}")
        self._on_line = on_line
        self._on_done = on_done
        self._scheduler = scheduler
        self._lines = tuple(lines)
        self._done_ms = done_ms
        self._timers: list[TimerHandle] = []
        self._started = False
        self._disposed = False
        self.visible_lines = 0
        self.percent = 0
        self.done = False

    @property
    def lines(self) -> tuple[BootLine, ...]:
        return self._lines

    def start(self) -> None:
        """Schedule every line and the completion signal.

        Raises:
            BootSequenceError: If already started or disposed
        """
        if self._disposed:
            raise BootSequenceError("boot sequence is disposed")
        if self._started:
            raise BootSequenceError("boot sequence already started")
        self._started = True

        logger.debug(
            "Boot sequence started (%d lines, done at %d ms)", len(self._lines), self._done_ms
        )
        for index, line in enumerate(self._lines):
            self._timers.append(
                self._scheduler.call_later(line.delay_ms / 1000, self._make_line_callback(index))
            )
        self._timers.append(self._scheduler.call_later(self._done_ms / 1000, self._finish))

    def dispose(self) -> None:
        """Cancel any lines or completion not yet delivered. Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()

    def _make_line_callback(self, index: int) -> Callable[[], None]:
        def show_line() -> None:
            if self._disposed:
                return
            self.visible_lines = index + 1
            self.percent = boot_percent(self.visible_lines, len(self._lines))
            self._on_line(
                BootProgress(
                    visible_lines=self.visible_lines,
                    percent=self.percent,
                    line=self._lines[index],
                )
            )

        return show_line

    def _finish(self) -> None:
        if self._disposed:
            return
        self.done = True
        logger.debug("Boot sequence complete")
        if self._on_done is not None:
            self._on_done()
