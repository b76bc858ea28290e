"""
Summary: Group rendered items into rows by vertical offset and plan the row limit.
Why: Row membership comes from measured geometry, so it must be testable without a UI.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RowLimitResult(Generic[T]):
    """Visibility decision for one pass of the row limit.

    ``hidden_count`` is the number of items beyond the kept rows.
    ``overflow_count`` is the label drawn on the overflow slot; the slot's own
    image is covered by the label, so it is ``hidden_count + 1``.
    """

    visible: tuple[T, ...]
    hidden: tuple[T, ...]
    overflow_item: T | None
    hidden_count: int
    overflow_count: int
    row_count: int

    @property
    def visible_count(self) -> int:
        return len(self.visible)

    @property
    def is_limited(self) -> bool:
        return self.overflow_item is not None


def group_rows(offsets: Sequence[float], tolerance: float) -> list[list[int]]:
    """Return item indices grouped into rows, in their existing order.

    A new row starts whenever an offset differs from the current row's first
    offset by more than ``tolerance``.
    """

    rows: list[list[int]] = []
    row_top: float | None = None
    for index, top in enumerate(offsets):
        if row_top is None or abs(top - row_top) > tolerance:
            rows.append([index])
            row_top = top
        else:
            rows[-1].append(index)
    return rows


def show_all(items: Sequence[T], row_count: int = 0) -> RowLimitResult[T]:
    return RowLimitResult(
        visible=tuple(items),
        hidden=(),
        overflow_item=None,
        hidden_count=0,
        overflow_count=0,
        row_count=row_count,
    )


def plan_row_limit(
    items: Sequence[T],
    offsets: Sequence[float],
    max_rows: int,
    *,
    tolerance: float,
) -> RowLimitResult[T]:
    """Keep the first ``max_rows`` rows and turn their last item into the overflow slot."""

    if len(items) != len(offsets):
        raise ValueError(f"Expected {len(items)} offsets, got {len(offsets)}")

    rows = group_rows(offsets, tolerance)
    limit = max(1, max_rows)
    if len(rows) <= limit:
        return show_all(items, row_count=len(rows))

    visible_count = sum(len(row) for row in rows[:limit])
    hidden_count = len(items) - visible_count
    return RowLimitResult(
        visible=tuple(items[:visible_count]),
        hidden=tuple(items[visible_count:]),
        overflow_item=items[visible_count - 1],
        hidden_count=hidden_count,
        overflow_count=len(items) - (visible_count - 1),
        row_count=len(rows),
    )


__all__ = ["RowLimitResult", "group_rows", "plan_row_limit", "show_all"]
