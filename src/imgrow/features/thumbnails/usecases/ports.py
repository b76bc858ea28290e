"""Ports for thumbnail use cases.

Where: features/thumbnails/usecases.
What: Protocol describing the content store the cache manager reads from and writes to.
Why: Allow a local directory, a note vault or a test double to back the cache.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.models import Resource


@runtime_checkable
class ContentStorePort(Protocol):
    """Async access to stored files by store-relative path."""

    async def exists(self, path: str) -> bool:
        """Return whether a file is present at ``path``."""
        ...

    async def read_bytes(self, path: str) -> bytes:
        """Return the bytes stored at ``path``."""
        ...

    async def create_bytes(self, path: str, data: bytes) -> None:
        """Create ``path``; raise ``FileExistsError`` if it already exists."""
        ...

    async def modify_bytes(self, path: str, data: bytes) -> None:
        """Replace the contents of an existing file."""
        ...

    async def ensure_directory(self, path: str) -> None:
        """Create ``path`` and its parents when missing."""
        ...

    async def resolve(self, link: str, source_dir: str = "") -> Resource | None:
        """Resolve an image link to a stored resource, or ``None`` if not found."""
        ...
