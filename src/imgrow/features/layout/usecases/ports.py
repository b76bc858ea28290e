"""Ports for layout use cases.

Where: features/layout/usecases.
What: Protocols for the rendering surface that measures and paints items, and for the host's scheduling primitives.
Why: Keep row detection independent of any concrete UI toolkit.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class LayoutSurface(Protocol[T_contra]):
    """Geometry reads and visual updates on rendered gallery items."""

    def container_width(self) -> float:
        """Return the container's rendered width; ``0`` until laid out."""
        ...

    def measure(self, item: T_contra) -> float:
        """Return the item's rendered top offset."""
        ...

    def set_visible(self, item: T_contra, visible: bool) -> None:
        ...

    def mark_overflow(self, item: T_contra, count: int) -> None:
        """Decorate ``item`` as the overflow slot showing ``+count``."""
        ...

    def clear_overflow(self, item: T_contra) -> None:
        ...


@runtime_checkable
class LayoutScheduler(Protocol):
    """Deferred and delayed callbacks supplied by the host UI runtime."""

    async def after_layout(self) -> None:
        """Resume after the next layout pass."""
        ...

    async def delay(self, milliseconds: int) -> None:
        ...
