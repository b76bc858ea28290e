"""Where: features/thumbnails/adapters/local_store.py
What: ``ContentStorePort`` implementation over a directory on the local disk.
Why: Let the CLI and tests run the cache manager against a plain folder of notes.
"""

from __future__ import annotations

import asyncio
import glob
from pathlib import Path
from urllib.parse import unquote

from imgrow.platform.filesystem import create_bytes, ensure_directory, replace_bytes

from ..domain.models import Resource


class LocalContentStore:
    """Store rooted at ``root``; every path is POSIX and relative to it."""

    def __init__(self, root: Path) -> None:
        self._root: Path = Path(root).expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def absolute(self, path: str) -> Path:
        """Map a store path to disk, refusing paths that escape the root."""

        candidate = (self._root / path.lstrip("/")).resolve()
        if not candidate.is_relative_to(self._root):
            raise ValueError(f"Path escapes store root: {path}")
        return candidate

    def relative(self, path: Path) -> str:
        return path.resolve().relative_to(self._root).as_posix()

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self.absolute(path).is_file)

    async def read_bytes(self, path: str) -> bytes:
        return await asyncio.to_thread(self.absolute(path).read_bytes)

    async def create_bytes(self, path: str, data: bytes) -> None:
        await asyncio.to_thread(create_bytes, self.absolute(path), data)

    async def modify_bytes(self, path: str, data: bytes) -> None:
        await asyncio.to_thread(replace_bytes, self.absolute(path), data)

    async def ensure_directory(self, path: str) -> None:
        _ = await asyncio.to_thread(ensure_directory, self.absolute(path))

    async def read_text(self, path: str) -> str:
        data = await asyncio.to_thread(self.absolute(path).read_bytes)
        return data.decode("utf-8")

    async def write_text(self, path: str, content: str) -> None:
        await asyncio.to_thread(replace_bytes, self.absolute(path), content.encode("utf-8"))

    async def resolve(self, link: str, source_dir: str = "") -> Resource | None:
        return await asyncio.to_thread(self._resolve_sync, link, source_dir)

    def _resolve_sync(self, link: str, source_dir: str) -> Resource | None:
        """Try the link relative to the root, then the document, then by file name."""

        cleaned = unquote(link.strip())
        if not cleaned or "://" in cleaned:
            return None

        candidates = [cleaned.lstrip("/")]
        if source_dir and not cleaned.startswith("/"):
            candidates.append(f"{source_dir.strip('/')}/{cleaned}")

        for candidate in candidates:
            try:
                absolute = self.absolute(candidate)
            except ValueError:
                continue
            if absolute.is_file():
                return Resource(self.relative(absolute))

        name = Path(cleaned).name
        if not name:
            return None
        matches = sorted(p for p in self._root.rglob(glob.escape(name)) if p.is_file())
        if not matches:
            return None
        return Resource(self.relative(matches[0]))


__all__ = ["LocalContentStore"]
