"""Layer table and resolver for the scroll-driven board deconstruction.

Normalized scroll progress (0 -> 1) maps onto the conceptual hardware
layers of the board, from the outer casing down to the quantum view.
The table front-loads the reveal: six layers share the first 15% of the
page and the final layer holds for the remainder.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from siliconsoul.core.utils.math import coerce_float

# Adjacent bounds closer than this are treated as shared.
_BOUNDARY_EPS = 1e-9


class LayerName(str, Enum):
    """Discrete visual states of the board, in reveal order."""

    CASING = "casing"
    THERMAL = "thermal"
    PCB = "pcb"
    TRACES = "traces"
    COMPONENTS = "components"
    DIE = "die"
    QUANTUM = "quantum"


class LayerRange(BaseModel):
    """One partition of the progress domain: [from, to).

    Attributes:
        name: Layer shown while progress is inside the range.
        from_: Inclusive lower bound (serialized as "from").
        to: Exclusive upper bound. The final range of a table may exceed
            1.0 so that progress exactly at 1.0 is covered.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: LayerName
    from_: float = Field(alias="from", ge=0.0, lt=1.0)
    to: float = Field(gt=0.0)

    @model_validator(mode="after")
    def _validate_bounds(self) -> LayerRange:
        if self.from_ >= self.to:
            raise ValueError(
                f"LayerRange({self.name.value}): from ({self.from_}) must be < to ({self.to})"
            )
        return self

    def contains(self, progress: float) -> bool:
        """Return True if from <= progress < to."""
        return self.from_ <= progress < self.to


class LayerTable(BaseModel):
    """Ordered, gap-free partition of [0, 1] into layer ranges.

    Immutable once built, so a single table can back any number of
    controllers.
    """

    model_config = ConfigDict(frozen=True)

    ranges: tuple[LayerRange, ...]

    @field_validator("ranges")
    @classmethod
    def _validate_partition(cls, ranges: tuple[LayerRange, ...]) -> tuple[LayerRange, ...]:
        if not ranges:
            raise ValueError("LayerTable requires at least one range")

        if abs(ranges[0].from_) > _BOUNDARY_EPS:
            raise ValueError(f"first range must start at 0, got {ranges[0].from_}")

        for prev, nxt in zip(ranges, ranges[1:]):
            if abs(prev.to - nxt.from_) > _BOUNDARY_EPS:
                kind = "gap" if prev.to < nxt.from_ else "overlap"
                raise ValueError(
                    f"{kind} between {prev.name.value} (to={prev.to}) "
                    f"and {nxt.name.value} (from={nxt.from_})"
                )

        if ranges[-1].to < 1.0:
            raise ValueError(f"final range must reach 1.0, got to={ranges[-1].to}")

        names = [r.name for r in ranges]
        if len(set(names)) != len(names):
            raise ValueError("layer names must be unique within a table")

        return ranges

    @classmethod
    def from_ranges(cls, ranges: Iterable[LayerRange | Mapping[str, Any]]) -> LayerTable:
        """Build a table from LayerRange instances or {"name", "from", "to"} dicts.

        Raises:
            ValidationError: If any range or the partition is invalid
        """
        return cls.model_validate({"ranges": tuple(ranges)})

    def __len__(self) -> int:
        return len(self.ranges)

    @property
    def first(self) -> LayerRange:
        return self.ranges[0]

    @property
    def last(self) -> LayerRange:
        return self.ranges[-1]

    @property
    def names(self) -> list[LayerName]:
        return [r.name for r in self.ranges]

    def range_for(self, name: LayerName | str) -> LayerRange:
        """Return the range for a layer name.

        Raises:
            KeyError: If the table has no such layer
        """
        key = LayerName(name)
        for layer_range in self.ranges:
            if layer_range.name == key:
                return layer_range
        raise KeyError(f"layer not in table: {key.value}")

    def resolve(self, progress: Any) -> LayerName:
        """Map a progress sample to the layer whose range contains it.

        Out-of-range values clamp to the nearest boundary range; values
        that are not finite numbers resolve to the first layer. Never
        raises.
        """
        value = coerce_float(progress)
        if value is None:
            return self.first.name

        value = max(value, self.first.from_)
        if value >= self.last.to:
            return self.last.name

        for layer_range in self.ranges:
            if layer_range.contains(value):
                return layer_range.name

        return self.first.name


DEFAULT_LAYER_TABLE = LayerTable.from_ranges(
    [
        {"name": LayerName.CASING, "from": 0.0, "to": 0.02},
        {"name": LayerName.THERMAL, "from": 0.02, "to": 0.03},
        {"name": LayerName.PCB, "from": 0.03, "to": 0.04},
        {"name": LayerName.TRACES, "from": 0.04, "to": 0.07},
        {"name": LayerName.COMPONENTS, "from": 0.07, "to": 0.12},
        {"name": LayerName.DIE, "from": 0.12, "to": 0.15},
        {"name": LayerName.QUANTUM, "from": 0.15, "to": 1.01},
    ]
)


def resolve_layer(progress: Any, table: LayerTable = DEFAULT_LAYER_TABLE) -> LayerName:
    """Resolve the layer for a progress value.

    Args:
        progress: Normalized scroll progress, nominally in [0, 1]
        table: Layer table to resolve against

    Returns:
        The matching layer name (first layer as fallback)

    Example:
        >>> resolve_layer(0.05).value
        'traces'
        >>> resolve_layer(1.0).value
        'quantum'
    """
    return table.resolve(progress)
