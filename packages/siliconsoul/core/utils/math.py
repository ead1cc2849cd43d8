"""Math utilities for common operations."""

from __future__ import annotations

import math
import sys
from typing import Any, TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def coerce_float(value: Any) -> float | None:
    """Best-effort conversion of an untrusted sample to a finite float.

    Args:
        value: Anything a progress source might hand over

    Returns:
        The float value, or None for non-numeric, NaN or infinite input.
        Numbers too large for a float saturate to +/- sys.float_info.max.

    Example:
        >>> coerce_float("0.25")
        0.25
        >>> coerce_float(None) is None
        True
        >>> coerce_float(-(10**400)) == -sys.float_info.max
        True
    """
    if isinstance(value, bool):
        return float(value)
    try:
        result = float(value)
    except OverflowError:
        # Finite but beyond float range, e.g. a huge int.
        return sys.float_info.max if value > 0 else -sys.float_info.max
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def linear_grid(steps: int) -> list[float]:
    """Generate steps + 1 evenly-spaced samples covering [0, 1] inclusive.

    Args:
        steps: Number of intervals. Must be >= 1.

    Returns:
        List of floats from 0.0 to 1.0.

    Raises:
        ValueError: If steps < 1.

    Example:
        >>> linear_grid(4)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if steps < 1:
        raise ValueError("steps must be >= 1")
    return [float(v) for v in np.linspace(0.0, 1.0, steps + 1)]
