"""One-shot timer scheduling for presentation timing.

Example (asyncio):
    >>> from siliconsoul.core.scheduling import AsyncioScheduler
    >>> scheduler = AsyncioScheduler()
    >>> handle = scheduler.call_later(0.3, lambda: print("glitch over"))

Example (virtual clock):
    >>> from siliconsoul.core.scheduling import FakeScheduler
    >>> scheduler = FakeScheduler()
    >>> handle = scheduler.call_later(0.3, lambda: print("glitch over"))
    >>> scheduler.advance(0.3)
    glitch over
"""

from .impl_asyncio import AsyncioScheduler
from .impl_fake import FakeScheduler, FakeTimerHandle
from .protocols import Scheduler, TimerHandle

__all__ = [
    # Protocols
    "Scheduler",
    "TimerHandle",
    # Implementations
    "AsyncioScheduler",
    "FakeScheduler",
    "FakeTimerHandle",
]
