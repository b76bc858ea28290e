"""
Summary: Verify row grouping by offset and the row-limit plan.
Why: Row boundaries come from measured geometry, not from item counts.
"""

from __future__ import annotations

import pytest

from imgrow.features.layout import group_rows, plan_row_limit, show_all

OFFSETS = [0, 0, 0, 40, 40, 40, 80, 80, 80, 120]


def test_group_rows_splits_on_offset_changes() -> None:
    assert group_rows(OFFSETS, 2.0) == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]


def test_group_rows_absorbs_sub_pixel_jitter() -> None:
    assert group_rows([0, 0.6, 1.9, 40.2, 39.5], 2.0) == [[0, 1, 2], [3, 4]]


def test_group_rows_uneven_row_lengths() -> None:
    assert group_rows([0, 0, 0, 0, 50, 100, 100], 2.0) == [[0, 1, 2, 3], [4], [5, 6]]


def test_plan_row_limit_ten_items_three_rows() -> None:
    items = list(range(10))

    result = plan_row_limit(items, OFFSETS, 3, tolerance=2.0)

    assert result.visible == tuple(range(9))
    assert result.hidden == (9,)
    assert result.overflow_item == 8
    assert result.hidden_count == 1
    assert result.overflow_count == 2
    assert result.row_count == 4
    assert result.is_limited


def test_plan_row_limit_within_max_rows_shows_everything() -> None:
    items = list("abcdefghi")

    result = plan_row_limit(items, OFFSETS[:9], 3, tolerance=2.0)

    assert result.visible == tuple(items)
    assert result.overflow_item is None
    assert result.hidden_count == 0
    assert result.row_count == 3
    assert not result.is_limited


def test_plan_row_limit_treats_zero_rows_as_one() -> None:
    result = plan_row_limit(list(range(10)), OFFSETS, 0, tolerance=2.0)

    assert result.visible == (0, 1, 2)
    assert result.overflow_item == 2
    assert result.hidden_count == 7
    assert result.overflow_count == 8


def test_plan_row_limit_rejects_mismatched_offsets() -> None:
    with pytest.raises(ValueError):
        _ = plan_row_limit([1, 2], [0.0], 3, tolerance=2.0)


def test_show_all_empty() -> None:
    result = show_all([])
    assert result.visible == ()
    assert result.visible_count == 0
    assert not result.is_limited
