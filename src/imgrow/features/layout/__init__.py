# Path: `src/imgrow/features/layout/__init__.py`
# Summary: Export row grouping, ports and the row-limit engine.
# Why: Provide a stable import surface for services and tests.

from .adapters import AsyncioScheduler
from .domain.rows import RowLimitResult, group_rows, plan_row_limit, show_all
from .usecases.engine import (
    LAYOUT_FIELDS,
    PersistOptions,
    RowLimitController,
    RowLimitEngine,
    needs_recompute,
)
from .usecases.measurement import LayoutProbe, ProbeState, wait_for_layout
from .usecases.ports import LayoutScheduler, LayoutSurface

__all__ = [
    "AsyncioScheduler",
    "RowLimitResult",
    "group_rows",
    "plan_row_limit",
    "show_all",
    "LAYOUT_FIELDS",
    "PersistOptions",
    "RowLimitController",
    "RowLimitEngine",
    "needs_recompute",
    "LayoutProbe",
    "ProbeState",
    "wait_for_layout",
    "LayoutScheduler",
    "LayoutSurface",
]
