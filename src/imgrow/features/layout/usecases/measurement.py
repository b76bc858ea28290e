"""Where: features/layout/usecases/measurement.py
What: Bounded retry state machine that waits for the container to report a width.
Why: The gallery may be measured while its view is still mounting; retries must end.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from imgrow.platform.logging import logger

from .ports import LayoutScheduler, LayoutSurface


class ProbeState(StrEnum):
    MEASURING = "measuring"
    RETRYING = "retrying"
    SETTLED = "settled"
    GAVE_UP = "gave_up"


class LayoutProbe:
    """Count width observations until the layout settles or the attempts run out."""

    def __init__(self, max_attempts: int) -> None:
        self.max_attempts: int = max(1, max_attempts)
        self.attempts: int = 0
        self.state: ProbeState = ProbeState.MEASURING

    @property
    def finished(self) -> bool:
        return self.state in {ProbeState.SETTLED, ProbeState.GAVE_UP}

    def observe(self, width: float) -> ProbeState:
        """Record one measurement of the container width."""

        if self.finished:
            return self.state
        self.attempts += 1
        if width > 0:
            self.state = ProbeState.SETTLED
        elif self.attempts >= self.max_attempts:
            self.state = ProbeState.GAVE_UP
        else:
            self.state = ProbeState.RETRYING
        return self.state


async def wait_for_layout(
    surface: LayoutSurface[Any],
    scheduler: LayoutScheduler,
    *,
    max_attempts: int,
    delay_ms: int,
) -> ProbeState:
    """Wait until ``surface`` has a non-zero width; returns ``SETTLED`` or ``GAVE_UP``."""

    probe = LayoutProbe(max_attempts)
    await scheduler.after_layout()
    while probe.observe(surface.container_width()) is ProbeState.RETRYING:
        await scheduler.delay(delay_ms)

    if probe.state is ProbeState.GAVE_UP:
        logger.debug(
            "Gallery container still has no width after %d attempts; measuring anyway",
            probe.attempts,
        )
    return probe.state


__all__ = ["LayoutProbe", "ProbeState", "wait_for_layout"]
