"""Ports for application services.

Where: application/services.
What: Protocol for reading and writing the host document that holds gallery blocks.
Why: Directive changes are persisted by the host; services only need text in and out.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentStorePort(Protocol):
    """Async text access to host documents by store-relative path."""

    async def read_text(self, path: str) -> str:
        ...

    async def write_text(self, path: str, content: str) -> None:
        ...
