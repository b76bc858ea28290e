"""Adaptive row-limit layout engine.

Where: features/layout/usecases.
What: Measure rendered items, keep the first N rows visible and turn the last
visible item into an overflow slot.
Why: How many items fit in a row depends on the container width and the
current size/gap, so only measured offsets give exact row boundaries.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Any, Final, Generic, TypeVar

from imgrow.config import settings
from imgrow.features.directive import StyleOptions
from imgrow.platform.logging import logger

from ..adapters.scheduler import AsyncioScheduler
from ..domain.rows import RowLimitResult, plan_row_limit, show_all
from .measurement import ProbeState, wait_for_layout
from .ports import LayoutScheduler, LayoutSurface

T = TypeVar("T")

PersistOptions = Callable[[StyleOptions], Awaitable[None]]

# Option fields whose change can move items between rows.
LAYOUT_FIELDS: Final[frozenset[str]] = frozenset({"size", "gap", "radius", "limit_rows"})


def needs_recompute(before: StyleOptions, after: StyleOptions) -> bool:
    return bool(before.changed_fields(after) & LAYOUT_FIELDS)


class RowLimitEngine(Generic[T]):
    """Apply the row limit to items drawn on a ``LayoutSurface``."""

    def __init__(
        self,
        surface: LayoutSurface[Any],
        scheduler: LayoutScheduler | None = None,
        *,
        tolerance: float = settings.ROW_TOLERANCE_PX,
        max_attempts: int = settings.LAYOUT_MAX_ATTEMPTS,
        retry_delay_ms: int = settings.LAYOUT_RETRY_DELAY_MS,
    ) -> None:
        self._surface: LayoutSurface[Any] = surface
        self._scheduler: LayoutScheduler = scheduler or AsyncioScheduler()
        self._tolerance: float = tolerance
        self._max_attempts: int = max_attempts
        self._retry_delay_ms: int = retry_delay_ms
        self.last_probe_state: ProbeState | None = None

    async def apply_limit(self, items: Iterable[T], max_rows: int, enabled: bool) -> RowLimitResult[T]:
        """Compute and paint visibility for ``items``.

        With ``enabled`` false every item is shown and any overflow decoration
        removed, whatever the previous state was.
        """

        ordered = list(items)
        if not enabled or not ordered:
            result: RowLimitResult[T] = show_all(ordered)
            self._paint(ordered, result)
            return result

        self.last_probe_state = await wait_for_layout(
            self._surface,
            self._scheduler,
            max_attempts=self._max_attempts,
            delay_ms=self._retry_delay_ms,
        )
        offsets = [self._surface.measure(item) for item in ordered]
        result = plan_row_limit(ordered, offsets, max_rows, tolerance=self._tolerance)
        self._paint(ordered, result)
        if result.is_limited:
            logger.debug(
                "Row limit applied [rows=%d, max_rows=%d, visible=%d, hidden=%d]",
                result.row_count,
                max_rows,
                result.visible_count,
                result.hidden_count,
            )
        return result

    def _paint(self, items: Sequence[T], result: RowLimitResult[T]) -> None:
        overflow_index = result.visible_count - 1 if result.is_limited else -1
        for index, item in enumerate(items):
            self._surface.set_visible(item, index < result.visible_count)
            if index == overflow_index:
                self._surface.mark_overflow(item, result.overflow_count)
            else:
                self._surface.clear_overflow(item)


class RowLimitController(Generic[T]):
    """Bind the engine to one gallery's ``StyleOptions`` and its persistence."""

    def __init__(
        self,
        engine: RowLimitEngine[T],
        options: StyleOptions,
        *,
        persist: PersistOptions,
        max_rows: int = settings.MAX_VISIBLE_ROWS,
    ) -> None:
        self._engine: RowLimitEngine[T] = engine
        self._options: StyleOptions = options
        self._persist: PersistOptions = persist
        self._max_rows: int = max_rows
        self._items: list[T] = []
        self.last_result: RowLimitResult[T] | None = None

    @property
    def options(self) -> StyleOptions:
        return self._options

    async def refresh(self, items: Iterable[T] | None = None) -> RowLimitResult[T]:
        """Re-run the limit, optionally replacing the mounted items."""

        if items is not None:
            self._items = list(items)
        self.last_result = await self._engine.apply_limit(
            self._items, self._max_rows, self._options.limit_rows
        )
        return self.last_result

    async def activate_overflow(self) -> RowLimitResult[T]:
        """Handle a click on the overflow slot: turn the limit off, persist, show everything."""

        self._options.limit_rows = False
        try:
            await self._persist(self._options)
        except Exception as exc:
            logger.error("Failed to persist gallery options after expanding rows: %s", exc)
        return await self.refresh()

    async def options_changed(self, before: StyleOptions) -> RowLimitResult[T] | None:
        """Recompute when a change to the options can alter row membership."""

        if not needs_recompute(before, self._options):
            return None
        return await self.refresh()


__all__ = [
    "LAYOUT_FIELDS",
    "PersistOptions",
    "RowLimitController",
    "RowLimitEngine",
    "needs_recompute",
]
