"""Scroll-driven layer state machine.

Maps normalized scroll progress onto the board's visual layers and
signals a short glitch pulse on every layer change.
"""

from siliconsoul.core.scroll.controller import (
    DEFAULT_GLITCH_DURATION_S,
    TransitionController,
    TransitionState,
)
from siliconsoul.core.scroll.layers import (
    DEFAULT_LAYER_TABLE,
    LayerName,
    LayerRange,
    LayerTable,
    resolve_layer,
)
from siliconsoul.core.scroll.progress import (
    ProgressSource,
    ScrollProgressSource,
    compute_progress,
)

__all__ = [
    "DEFAULT_GLITCH_DURATION_S",
    "DEFAULT_LAYER_TABLE",
    "LayerName",
    "LayerRange",
    "LayerTable",
    "ProgressSource",
    "ScrollProgressSource",
    "TransitionController",
    "TransitionState",
    "compute_progress",
    "resolve_layer",
]
