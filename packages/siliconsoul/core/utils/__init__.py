"""Shared utilities for Silicon Soul."""

from siliconsoul.core.utils.math import clamp, coerce_float, linear_grid

__all__ = [
    "clamp",
    "coerce_float",
    "linear_grid",
]
