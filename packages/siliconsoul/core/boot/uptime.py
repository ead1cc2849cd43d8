"""Uptime counter formatting."""

from __future__ import annotations

import math


def format_uptime(elapsed_s: float) -> str:
    """Format elapsed seconds as HH:MM:SS.

    Fractional seconds are floored and hours do not wrap at 24.

    Example:
        >>> format_uptime(3661)
        '01:01:01'
        >>> format_uptime(100 * 3600)
        '100:00:00'
    """
    total = max(0, math.floor(elapsed_s))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
