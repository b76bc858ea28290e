"""Shared fixtures for thumbnail cache tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from io import BytesIO

import pytest
from PIL import Image

from imgrow.features.thumbnails import Resource


class InMemoryContentStore:
    """``ContentStorePort`` double that records every write."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})
        self.directories: set[str] = set()
        self.writes: list[tuple[str, str]] = []
        self.fail_exists: bool = False

    async def exists(self, path: str) -> bool:
        await asyncio.sleep(0)
        if self.fail_exists:
            raise OSError("store unavailable")
        return path in self.files

    async def read_bytes(self, path: str) -> bytes:
        await asyncio.sleep(0)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    async def create_bytes(self, path: str, data: bytes) -> None:
        await asyncio.sleep(0)
        if path in self.files:
            raise FileExistsError(path)
        self.files[path] = data
        self.writes.append(("create", path))

    async def modify_bytes(self, path: str, data: bytes) -> None:
        await asyncio.sleep(0)
        self.files[path] = data
        self.writes.append(("modify", path))

    async def ensure_directory(self, path: str) -> None:
        self.directories.add(path)

    async def resolve(self, link: str, source_dir: str = "") -> Resource | None:
        return Resource(link) if link in self.files else None


def _image_bytes(width: int, height: int, *, mode: str = "RGB", fmt: str = "PNG") -> bytes:
    colour: tuple[int, ...] | int
    if mode == "RGBA":
        colour = (200, 30, 30, 128)
    elif mode == "L":
        colour = 128
    else:
        colour = (200, 30, 30)
    buffer = BytesIO()
    Image.new(mode, (width, height), colour).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Return a factory for encoded single-colour images."""

    return _image_bytes


@pytest.fixture
def png_bytes() -> bytes:
    return _image_bytes(400, 300)


@pytest.fixture
def store(png_bytes: bytes) -> InMemoryContentStore:
    return InMemoryContentStore({"photos/a.png": png_bytes})
