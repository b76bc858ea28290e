"""Tests for the ``StyleOptions`` record and size presets."""

from __future__ import annotations

import pytest

from imgrow.features.directive import PRESET_VALUES, SizePreset, StyleOptions


def test_defaults_come_from_settings() -> None:
    options = StyleOptions()
    assert (options.size, options.gap, options.radius) == (150, 8, 10)
    assert not (options.shadow or options.border or options.hidden or options.limit_rows)


def test_set_numeric_rejects_out_of_range_and_keeps_value() -> None:
    options = StyleOptions(size=120)

    assert options.set_numeric("size", 49) is False
    assert options.set_numeric("size", 501) is False
    assert options.set_numeric("gap", True) is False  # pyright: ignore[reportArgumentType]
    assert options.size == 120

    assert options.set_numeric("size", 500) is True
    assert options.size == 500


def test_set_numeric_unknown_field_raises() -> None:
    with pytest.raises(KeyError):
        _ = StyleOptions().set_numeric("shadow", 1)


@pytest.mark.parametrize("preset", list(SizePreset))
def test_apply_preset_sets_size_gap_radius(preset: SizePreset) -> None:
    options = StyleOptions(shadow=True)

    options.apply_preset(preset)

    assert (options.size, options.gap, options.radius) == PRESET_VALUES[preset]
    assert options.shadow is True
    assert options.matching_preset() is preset


def test_apply_preset_accepts_plain_strings() -> None:
    options = StyleOptions()
    options.apply_preset("small")
    assert (options.size, options.gap, options.radius) == (90, 5, 8)


def test_matching_preset_none_for_custom_values() -> None:
    assert StyleOptions(size=151).matching_preset() is None


def test_copy_is_independent_and_changed_fields_lists_differences() -> None:
    options = StyleOptions()
    snapshot = options.copy()

    options.size = 200
    options.limit_rows = True

    assert snapshot.size == 150
    assert options.changed_fields(snapshot) == {"size", "limit_rows"}
    assert snapshot.changed_fields(snapshot.copy()) == set()
