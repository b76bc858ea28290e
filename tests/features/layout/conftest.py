"""Shared doubles for layout engine tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest


class FakeSurface:
    """``LayoutSurface`` over synthetic offsets, recording what was painted."""

    def __init__(self, offsets: Sequence[float], widths: Sequence[float] = (800.0,)) -> None:
        self.offsets: list[float] = list(offsets)
        self._widths: list[float] = list(widths)
        self.width_reads: int = 0
        self.visible: dict[int, bool] = {}
        self.overflow: dict[int, int] = {}

    def container_width(self) -> float:
        index = min(self.width_reads, len(self._widths) - 1)
        self.width_reads += 1
        return self._widths[index]

    def measure(self, item: int) -> float:
        return self.offsets[item]

    def set_visible(self, item: int, visible: bool) -> None:
        self.visible[item] = visible

    def mark_overflow(self, item: int, count: int) -> None:
        self.overflow[item] = count

    def clear_overflow(self, item: int) -> None:
        _ = self.overflow.pop(item, None)


class RecordingScheduler:
    def __init__(self) -> None:
        self.after_layout_calls: int = 0
        self.delays: list[int] = []

    async def after_layout(self) -> None:
        self.after_layout_calls += 1

    async def delay(self, milliseconds: int) -> None:
        self.delays.append(milliseconds)


TEN_ITEM_OFFSETS: tuple[float, ...] = (0, 0, 0, 40, 40, 40, 80, 80, 80, 120)


@pytest.fixture
def scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface(TEN_ITEM_OFFSETS)


@pytest.fixture
def make_surface() -> type[FakeSurface]:
    return FakeSurface
