"""Shared pytest fixtures for siliconsoul tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from siliconsoul.core.scheduling import FakeScheduler
from siliconsoul.core.scroll import (
    LayerName,
    LayerTable,
    ScrollProgressSource,
    TransitionController,
)

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Scheduling Fixtures
# ============================================================================


@pytest.fixture
def scheduler() -> FakeScheduler:
    """Virtual-clock scheduler starting at t=0."""
    return FakeScheduler()


# ============================================================================
# Scroll Fixtures
# ============================================================================


@dataclass
class Recorder:
    """Collects controller notifications with their virtual timestamps."""

    scheduler: FakeScheduler
    layers: list[LayerName] = field(default_factory=list)
    glitches: list[tuple[float, bool]] = field(default_factory=list)

    def on_layer(self, layer: LayerName) -> None:
        self.layers.append(layer)

    def on_glitch(self, active: bool) -> None:
        self.glitches.append((self.scheduler.time(), active))

    @property
    def glitch_flags(self) -> list[bool]:
        return [active for _, active in self.glitches]


@pytest.fixture
def recorder(scheduler: FakeScheduler) -> Recorder:
    """Notification recorder bound to the fake scheduler."""
    return Recorder(scheduler)


@pytest.fixture
def uniform_table() -> LayerTable:
    """Seven equal-width layers (1/7 each) covering [0, 1]."""
    names = list(LayerName)
    width = 1 / len(names)
    bounds = [round(i * width, 10) for i in range(len(names))] + [1.0]
    return LayerTable.from_ranges(
        {"name": name, "from": bounds[i], "to": bounds[i + 1]} for i, name in enumerate(names)
    )


@pytest.fixture
def make_controller(
    scheduler: FakeScheduler, recorder: Recorder
) -> Callable[..., TransitionController]:
    """Factory for controllers wired to the recorder and fake scheduler."""

    def factory(**kwargs) -> TransitionController:
        return TransitionController(
            recorder.on_layer, recorder.on_glitch, scheduler=scheduler, **kwargs
        )

    return factory


@pytest.fixture
def scroll_source() -> ScrollProgressSource:
    """Progress source for a 1000px scrollable page, at the top."""
    return ScrollProgressSource(scroll_y=0.0, max_scroll=1000.0)
