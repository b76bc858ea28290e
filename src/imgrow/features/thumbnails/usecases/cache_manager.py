"""Thumbnail cache manager.

Where: features/thumbnails/usecases.
What: Ensure a square, downscaled derivative exists for an original image.
Why: Galleries show many large originals at small sizes; decoding them once
and reusing the derivative keeps rendering cheap.

Derivatives live at ``<thumbnail_root>/<cache_key>``. There is no manifest:
presence of that file is the cache entry. Generation failures are logged and
reported as ``None`` so the caller keeps showing the original.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from typing import Final

from imgrow.config import settings
from imgrow.platform.logging import logger
from imgrow.shared.hashing import thumbnail_key

from ..domain.models import CacheEvent, GenerationStage, Resource, ThumbnailGenerationError
from .coordinator import GenerationCoordinator
from .ports import ContentStorePort
from .rendering import render_thumbnail

ThumbnailRenderer = Callable[..., bytes]

# Served as-is: vector images cannot be decoded and GIFs would lose animation.
PASSTHROUGH_SUFFIXES: Final[frozenset[str]] = frozenset({".svg", ".gif"})


class ThumbnailCacheManager:
    """Create and look up thumbnail derivatives in a content store."""

    def __init__(
        self,
        store: ContentStorePort,
        *,
        coordinator: GenerationCoordinator | None = None,
        thumbnail_root: str = settings.THUMBNAIL_PATH,
        size: int = settings.THUMBNAIL_SIZE,
        quality: int = settings.THUMBNAIL_QUALITY,
        renderer: ThumbnailRenderer = render_thumbnail,
    ) -> None:
        self._store: ContentStorePort = store
        self._coordinator: GenerationCoordinator = coordinator or GenerationCoordinator()
        self._root: str = thumbnail_root.strip("/")
        self._size: int = max(settings.THUMBNAIL_MIN_SIZE, size)
        self._quality: int = quality
        self._renderer: ThumbnailRenderer = renderer
        self._background: set[asyncio.Task[Resource | None]] = set()

    @property
    def coordinator(self) -> GenerationCoordinator:
        return self._coordinator

    @property
    def size(self) -> int:
        return self._size

    def derived_path(self, key: str) -> str:
        return f"{self._root}/{key}" if self._root else key

    async def lookup(self, key: str) -> Resource | None:
        """Return the derivative for ``key`` when it is already stored."""

        path = self.derived_path(key)
        if await self._exists(path):
            return Resource(path)
        return None

    async def ensure(self, original: Resource, key: str) -> Resource | None:
        """Make sure a derivative exists for ``original``.

        Returns the derivative, or ``None`` when generation is already running
        elsewhere or failed; in both cases the caller keeps using ``original``.
        """

        path = self.derived_path(key)
        if await self._exists(path):
            logger.debug(
                "Thumbnail cache hit [key=%s]",
                key,
                extra={"cache_event": CacheEvent.HIT, "source_path": original.path, "target_path": path},
            )
            return Resource(path)

        with self._coordinator.claim(key) as claimed:
            if not claimed:
                logger.debug(
                    "Thumbnail generation already in flight [key=%s]",
                    key,
                    extra={"cache_event": CacheEvent.IN_FLIGHT, "source_path": original.path},
                )
                return None
            # Another caller may have finished between the first check and the claim.
            if await self._exists(path):
                return Resource(path)
            return await self._generate(original, path)

    async def source_for(self, original: Resource) -> Resource:
        """Return the resource a renderer should display for ``original``.

        On a miss, generation is started in the background and the original is
        returned; a later render picks up the derivative.
        """

        if original.suffix in PASSTHROUGH_SUFFIXES:
            return original

        key = thumbnail_key(original.path)
        cached = await self.lookup(key)
        if cached is not None:
            return cached

        if not self._coordinator.is_active(key):
            task = asyncio.create_task(self.ensure(original, key))
            self._background.add(task)
            task.add_done_callback(self._background.discard)
        return original

    async def drain(self) -> None:
        """Wait for background generations started by ``source_for``."""

        while self._background:
            _ = await asyncio.gather(*list(self._background), return_exceptions=True)

    async def _generate(self, original: Resource, path: str) -> Resource | None:
        started = time.perf_counter()
        logger.debug(
            "Generating thumbnail [src=%s, dest=%s]",
            original.path,
            path,
            extra={"cache_event": CacheEvent.GENERATE_START, "source_path": original.path},
        )
        try:
            data = await self._read(original)
            rendered = await self._render(data)
            result = await self._write(path, rendered)
        except ThumbnailGenerationError as exc:
            logger.warning(
                "Thumbnail generation failed [src=%s, stage=%s, error=%s]",
                original.path,
                exc.stage.value,
                exc.reason,
                extra={
                    "cache_event": CacheEvent.GENERATE_ERROR,
                    "source_path": original.path,
                    "stage": exc.stage.value,
                    "error_message": exc.reason,
                },
            )
            return None

        logger.info(
            "Thumbnail generated [src=%s, dest=%s]",
            original.path,
            path,
            extra={
                "cache_event": CacheEvent.GENERATE_SUCCESS,
                "source_path": original.path,
                "target_path": path,
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )
        return result

    async def _exists(self, path: str) -> bool:
        try:
            return await self._store.exists(path)
        except Exception as exc:
            logger.warning("Thumbnail existence check failed [path=%s, error=%s]", path, exc)
            return False

    async def _read(self, original: Resource) -> bytes:
        try:
            return await self._store.read_bytes(original.path)
        except Exception as exc:
            raise ThumbnailGenerationError(GenerationStage.READ, exc) from exc

    async def _render(self, data: bytes) -> bytes:
        try:
            return await asyncio.to_thread(
                self._renderer, data, size=self._size, quality=self._quality
            )
        except ThumbnailGenerationError:
            raise
        except Exception as exc:
            raise ThumbnailGenerationError(GenerationStage.ENCODE, exc) from exc

    async def _write(self, path: str, data: bytes) -> Resource:
        try:
            if self._root:
                await self._store.ensure_directory(self._root)
            if await self._store.exists(path):
                await self._store.modify_bytes(path, data)
            else:
                await self._store.create_bytes(path, data)
        except FileExistsError as exc:
            if await self._exists(path):
                logger.debug(
                    "Thumbnail written concurrently [dest=%s]",
                    path,
                    extra={"cache_event": CacheEvent.DESTINATION_RACE, "target_path": path},
                )
                return Resource(path)
            raise ThumbnailGenerationError(GenerationStage.WRITE, exc) from exc
        except Exception as exc:
            raise ThumbnailGenerationError(GenerationStage.WRITE, exc) from exc
        return Resource(path)


__all__ = ["PASSTHROUGH_SUFFIXES", "ThumbnailCacheManager", "ThumbnailRenderer"]
