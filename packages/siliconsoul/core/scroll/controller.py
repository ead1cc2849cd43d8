"""Transition controller: progress samples in, layer changes and glitch pulses out.

One controller belongs to one mounted view. It remembers the last resolved
layer, reports each change exactly once, and raises a short glitch flag on
every change. Rapid changes collapse into a single pulse timed from the
latest change rather than queuing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from siliconsoul.core.errors import ControllerStateError
from siliconsoul.core.scheduling import Scheduler, TimerHandle
from siliconsoul.core.scroll.layers import DEFAULT_LAYER_TABLE, LayerName, LayerTable
from siliconsoul.core.scroll.progress import ProgressSource, Unsubscribe
from siliconsoul.core.utils.logging import get_logger

DEFAULT_GLITCH_DURATION_S = 0.3

LayerCallback = Callable[[LayerName], None]
GlitchCallback = Callable[[bool], None]


@dataclass
class TransitionState:
    """Mutable state owned by exactly one TransitionController.

    Attributes:
        current_layer: Last resolved layer.
        glitch_active: Whether a glitch pulse is currently asserted.
        pending_glitch: Timer that will end the active pulse, if any.
        disposed: Set once the owning view is torn down.
    """

    current_layer: LayerName
    glitch_active: bool = False
    pending_glitch: TimerHandle | None = None
    disposed: bool = False


class TransitionController:
    """Turns progress samples into layer notifications and glitch pulses.

    Args:
        on_layer: Called with the new layer on start and on every change.
        on_glitch: Called with True when a pulse starts and False when it ends.
        scheduler: Schedules the end of each glitch pulse.
        table: Layer table to resolve against.
        glitch_duration_s: Length of one glitch pulse in seconds.
        view: Optional view name attached to log records.

    Example:
        >>> scheduler = FakeScheduler()
        >>> source = ScrollProgressSource(scroll_y=0, max_scroll=1000)
        >>> controller = TransitionController.create(
        ...     source, print, lambda active: None, scheduler=scheduler
        ... )
        LayerName.CASING
        >>> source.scroll_to(500)
        LayerName.QUANTUM
        >>> controller.dispose()
    """

    def __init__(
        self,
        on_layer: LayerCallback,
        on_glitch: GlitchCallback,
        *,
        scheduler: Scheduler,
        table: LayerTable = DEFAULT_LAYER_TABLE,
        glitch_duration_s: float = DEFAULT_GLITCH_DURATION_S,
        view: str | None = None,
    ) -> None:
        if glitch_duration_s <= 0:
            raise ValueError(f"glitch_duration_s must be > 0, got {glitch_duration_s}")

        self._on_layer = on_layer
        self._on_glitch = on_glitch
        self._scheduler = scheduler
        self._table = table
        self._glitch_duration_s = glitch_duration_s
        self._state: TransitionState | None = None
        self._unsubscribe: Unsubscribe | None = None
        self._disposed = False
        self._logger = get_logger(__name__, view=view)

    @classmethod
    def create(
        cls,
        source: ProgressSource,
        on_layer: LayerCallback,
        on_glitch: GlitchCallback,
        **kwargs: Any,
    ) -> TransitionController:
        """Build a controller and attach it to a progress source.

        Keyword arguments are forwarded to the constructor.
        """
        controller = cls(on_layer, on_glitch, **kwargs)
        controller.attach(source)
        return controller

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def table(self) -> LayerTable:
        return self._table

    @property
    def state(self) -> TransitionState | None:
        return self._state

    @property
    def current_layer(self) -> LayerName | None:
        return self._state.current_layer if self._state else None

    @property
    def glitch_active(self) -> bool:
        return bool(self._state and self._state.glitch_active)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, initial_progress: Any) -> LayerName:
        """Initialize state from the first observed progress sample.

        Notifies the layer subscriber once with the initial layer. No glitch
        pulse is raised for the initial layer.

        Raises:
            ControllerStateError: If already started or disposed
        """
        if self._disposed:
            raise ControllerStateError("controller is disposed")
        if self._state is not None:
            raise ControllerStateError("controller already started")

        layer = self._table.resolve(initial_progress)
        self._state = TransitionState(current_layer=layer)
        self._logger.debug("Initial layer %s (progress=%r)", layer.value, initial_progress)
        self._on_layer(layer)
        return layer

    def attach(self, source: ProgressSource) -> None:
        """Subscribe to a progress source.

        The first sample delivered starts the controller unless start() was
        already called; later samples go through on_progress_update().

        Raises:
            ControllerStateError: If disposed or already attached
        """
        if self._disposed:
            raise ControllerStateError("controller is disposed")
        if self._unsubscribe is not None:
            raise ControllerStateError("controller already attached to a progress source")
        self._unsubscribe = source.subscribe(self.on_progress_update)

    def dispose(self) -> None:
        """Unsubscribe and cancel any pending glitch timer. Idempotent."""
        if self._disposed:
            return
        self._disposed = True

        if self._unsubscribe is not None:
            unsubscribe, self._unsubscribe = self._unsubscribe, None
            unsubscribe()

        if self._state is not None:
            self._state.disposed = True
            if self._state.pending_glitch is not None:
                self._state.pending_glitch.cancel()
                self._state.pending_glitch = None

        self._logger.debug("Transition controller disposed")

    def __enter__(self) -> TransitionController:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def on_progress_update(self, progress: Any) -> None:
        """Handle one progress sample.

        A sample that resolves to the current layer is a no-op. A sample
        received after dispose() is ignored.
        """
        if self._disposed:
            return
        if self._state is None:
            self.start(progress)
            return

        next_layer = self._table.resolve(progress)
        if next_layer == self._state.current_layer:
            return

        previous = self._state.current_layer
        self._state.current_layer = next_layer
        self._logger.debug(
            "Layer transition %s -> %s (progress=%r)", previous.value, next_layer.value, progress
        )
        self._on_layer(next_layer)
        self._trigger_glitch()

    def _trigger_glitch(self) -> None:
        state = self._state
        if state is None or state.disposed:
            return

        if state.pending_glitch is not None:
            state.pending_glitch.cancel()
            state.pending_glitch = None

        state.glitch_active = True
        self._on_glitch(True)

        # The notification above may have disposed us.
        if state.disposed:
            return

        handle: TimerHandle | None = None

        def end_pulse() -> None:
            self._end_glitch(handle)

        handle = self._scheduler.call_later(self._glitch_duration_s, end_pulse)
        state.pending_glitch = handle
        self._logger.debug("Glitch pulse started (%.0f ms)", self._glitch_duration_s * 1000)

    def _end_glitch(self, handle: TimerHandle | None) -> None:
        state = self._state
        # Stale timer: superseded by a newer pulse or fired during teardown.
        if state is None or state.disposed or state.pending_glitch is not handle:
            return

        state.pending_glitch = None
        state.glitch_active = False
        self._logger.debug("Glitch pulse ended")
        self._on_glitch(False)
