"""Tests for the layer table and resolver."""

from __future__ import annotations

import math

from pydantic import ValidationError
import pytest

from siliconsoul.core.scroll.layers import (
    DEFAULT_LAYER_TABLE,
    LayerName,
    LayerRange,
    LayerTable,
    resolve_layer,
)


def _table(*bounds: tuple[str, float, float]) -> LayerTable:
    return LayerTable.from_ranges({"name": n, "from": f, "to": t} for n, f, t in bounds)


class TestLayerRange:
    """Tests for LayerRange validation and containment."""

    def test_accepts_from_alias(self) -> None:
        """'from' is accepted as the serialized name of from_."""
        r = LayerRange.model_validate({"name": "pcb", "from": 0.03, "to": 0.04})
        assert r.from_ == pytest.approx(0.03)
        assert r.name is LayerName.PCB

    def test_accepts_field_name(self) -> None:
        """from_ can be passed by field name."""
        r = LayerRange(name=LayerName.DIE, from_=0.12, to=0.15)
        assert r.to == pytest.approx(0.15)

    def test_from_must_be_less_than_to(self) -> None:
        """from >= to is rejected."""
        with pytest.raises(ValidationError, match="must be < to"):
            LayerRange.model_validate({"name": "pcb", "from": 0.4, "to": 0.4})

    def test_unknown_name_rejected(self) -> None:
        """Names outside the layer enumeration are rejected."""
        with pytest.raises(ValidationError):
            LayerRange.model_validate({"name": "heatsink", "from": 0.0, "to": 1.0})

    def test_contains_is_half_open(self) -> None:
        """Lower bound inclusive, upper bound exclusive."""
        r = LayerRange.model_validate({"name": "traces", "from": 0.04, "to": 0.07})
        assert r.contains(0.04)
        assert r.contains(0.0699)
        assert not r.contains(0.07)
        assert not r.contains(0.0399)

    def test_is_frozen(self) -> None:
        """Ranges are immutable."""
        r = LayerRange.model_validate({"name": "pcb", "from": 0.03, "to": 0.04})
        with pytest.raises(ValidationError):
            r.to = 0.5


class TestLayerTableValidation:
    """Tests for partition checks on LayerTable."""

    def test_default_table_order(self) -> None:
        """Built-in table lists every layer in reveal order."""
        assert DEFAULT_LAYER_TABLE.names == list(LayerName)
        assert len(DEFAULT_LAYER_TABLE) == 7

    def test_default_table_adjacent_ranges_share_boundaries(self) -> None:
        """range[i].to == range[i+1].from for the built-in table."""
        ranges = DEFAULT_LAYER_TABLE.ranges
        assert ranges[0].from_ == 0.0
        for prev, nxt in zip(ranges, ranges[1:]):
            assert prev.to == nxt.from_
        assert ranges[-1].to >= 1.0

    def test_empty_table_rejected(self) -> None:
        """A table needs at least one range."""
        with pytest.raises(ValidationError, match="at least one range"):
            LayerTable.from_ranges([])

    def test_gap_rejected(self) -> None:
        """Gaps between ranges are rejected."""
        with pytest.raises(ValidationError, match="gap between casing"):
            _table(("casing", 0.0, 0.4), ("thermal", 0.5, 1.0))

    def test_overlap_rejected(self) -> None:
        """Overlapping ranges are rejected."""
        with pytest.raises(ValidationError, match="overlap between casing"):
            _table(("casing", 0.0, 0.6), ("thermal", 0.5, 1.0))

    def test_must_start_at_zero(self) -> None:
        """The first range must start at 0."""
        with pytest.raises(ValidationError, match="must start at 0"):
            _table(("casing", 0.1, 1.0))

    def test_must_reach_one(self) -> None:
        """The final range must reach 1.0."""
        with pytest.raises(ValidationError, match="must reach 1.0"):
            _table(("casing", 0.0, 0.5), ("thermal", 0.5, 0.9))

    def test_duplicate_names_rejected(self) -> None:
        """Each layer may appear only once."""
        with pytest.raises(ValidationError, match="unique"):
            _table(("casing", 0.0, 0.5), ("casing", 0.5, 1.0))

    def test_single_range_table(self) -> None:
        """A single range covering [0, 1] is valid."""
        table = _table(("quantum", 0.0, 1.0))
        assert table.first is table.last

    def test_range_for(self) -> None:
        """Ranges can be looked up by name."""
        assert DEFAULT_LAYER_TABLE.range_for("die").from_ == pytest.approx(0.12)
        with pytest.raises(KeyError):
            _table(("quantum", 0.0, 1.0)).range_for(LayerName.CASING)


class TestResolveLayer:
    """Tests for resolve_layer."""

    @pytest.mark.parametrize(
        ("progress", "expected"),
        [
            (0.0, LayerName.CASING),
            (0.019, LayerName.CASING),
            (0.02, LayerName.THERMAL),
            (0.03, LayerName.PCB),
            (0.05, LayerName.TRACES),
            (0.07, LayerName.COMPONENTS),
            (0.12, LayerName.DIE),
            (0.15, LayerName.QUANTUM),
            (0.5, LayerName.QUANTUM),
            (1.0, LayerName.QUANTUM),
        ],
    )
    def test_default_table(self, progress: float, expected: LayerName) -> None:
        """Progress maps to the range containing it."""
        assert resolve_layer(progress) is expected

    def test_every_sample_lands_in_its_range(self) -> None:
        """For p in [0, 1] the returned range contains p (or p == 1 maps to the last)."""
        for i in range(1001):
            p = i / 1000
            name = resolve_layer(p)
            r = DEFAULT_LAYER_TABLE.range_for(name)
            assert r.contains(p) or (p == 1.0 and r is DEFAULT_LAYER_TABLE.last)

    def test_progress_exactly_one_with_table_ending_at_one(self, uniform_table: LayerTable) -> None:
        """p == 1 resolves to the final range even when its upper bound is exactly 1."""
        assert resolve_layer(1.0, uniform_table) is LayerName.QUANTUM

    def test_negative_clamps_to_first(self) -> None:
        """Values below 0 belong to the first range."""
        assert resolve_layer(-0.25) is LayerName.CASING

    def test_above_one_clamps_to_last(self) -> None:
        """Values past the final bound belong to the last range."""
        assert resolve_layer(1.7) is LayerName.QUANTUM

    @pytest.mark.parametrize("bad", [None, "not-a-number", math.nan, object(), [0.5]])
    def test_non_numeric_falls_back_to_first(self, bad: object) -> None:
        """Non-numeric samples resolve to the first layer without raising."""
        assert resolve_layer(bad) is LayerName.CASING

    def test_infinity_falls_back_to_first(self) -> None:
        """Infinite samples are not finite numbers and use the fallback."""
        assert resolve_layer(math.inf) is LayerName.CASING

    def test_huge_ints_clamp_to_boundary_layers(self) -> None:
        """Ints too large for a float clamp like any out-of-range value."""
        assert resolve_layer(10**400) is LayerName.QUANTUM
        assert resolve_layer(-(10**400)) is LayerName.CASING

    def test_numeric_string_is_accepted(self) -> None:
        """Strings that parse as floats are resolved normally."""
        assert resolve_layer("0.05") is LayerName.TRACES

    def test_deterministic(self) -> None:
        """Same input, same output."""
        assert {resolve_layer(0.1) for _ in range(10)} == {LayerName.COMPONENTS}
