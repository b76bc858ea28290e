"""Default ``LayoutScheduler`` backed by the running asyncio loop."""

from __future__ import annotations

import asyncio


class AsyncioScheduler:
    """Yield to the loop for "after layout" and sleep for delays."""

    async def after_layout(self) -> None:
        await asyncio.sleep(0)

    async def delay(self, milliseconds: int) -> None:
        await asyncio.sleep(max(0, milliseconds) / 1000)


__all__ = ["AsyncioScheduler"]
