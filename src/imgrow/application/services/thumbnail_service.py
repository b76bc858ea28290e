"""Application service to pre-generate thumbnails for a document's galleries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path, PurePosixPath
from typing import final

from imgrow.config import settings
from imgrow.features.directive import find_gallery_blocks, parse_references, split_directive
from imgrow.features.thumbnails import (
    PASSTHROUGH_SUFFIXES,
    LocalContentStore,
    ThumbnailCacheManager,
)
from imgrow.platform.logging import logger
from imgrow.shared.hashing import thumbnail_key


class ThumbnailOutcome(StrEnum):
    CACHED = "cached"
    GENERATED = "generated"
    FAILED = "failed"
    MISSING = "missing"
    SKIPPED = "skipped"


@dataclass(slots=True)
class ThumbnailServiceRequest:
    """Parameters describing a thumbnail run."""

    document: Path
    vault_root: Path
    size: int = settings.THUMBNAIL_SIZE
    quality: int = settings.THUMBNAIL_QUALITY
    thumbnail_root: str = settings.THUMBNAIL_PATH


@dataclass(slots=True)
class ThumbnailResult:
    block_index: int
    target: str
    outcome: ThumbnailOutcome
    original: str | None = None
    derivative: str | None = None


@dataclass(slots=True)
class ThumbnailReport:
    document: str
    results: list[ThumbnailResult] = field(default_factory=list)

    def count(self, outcome: ThumbnailOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def has_failures(self) -> bool:
        return any(
            result.outcome in {ThumbnailOutcome.FAILED, ThumbnailOutcome.MISSING}
            for result in self.results
        )


@final
class ThumbnailService:
    """Walk every ``imgs`` block of a document and ensure each image has a derivative."""

    def __init__(
        self,
        *,
        store: LocalContentStore | None = None,
        cache: ThumbnailCacheManager | None = None,
    ) -> None:
        self._store: LocalContentStore | None = store
        self._cache: ThumbnailCacheManager | None = cache

    async def run(self, request: ThumbnailServiceRequest) -> ThumbnailReport:
        store = self._store or LocalContentStore(request.vault_root)
        cache = self._cache or ThumbnailCacheManager(
            store,
            thumbnail_root=request.thumbnail_root,
            size=request.size,
            quality=request.quality,
        )

        document_path = store.relative(request.document)
        source_dir = str(PurePosixPath(document_path).parent)
        if source_dir == ".":
            source_dir = ""

        report = ThumbnailReport(document=document_path)
        document = await store.read_text(document_path)
        blocks = find_gallery_blocks(document)
        if not blocks:
            logger.info("No gallery blocks found in %s", document_path)
            return report

        for block in blocks:
            for reference in parse_references(split_directive(block.source).body):
                report.results.append(
                    await self._process(store, cache, block.index, reference.target, source_dir)
                )

        logger.info(
            "Thumbnails processed [document=%s, generated=%d, cached=%d, failed=%d]",
            document_path,
            report.count(ThumbnailOutcome.GENERATED),
            report.count(ThumbnailOutcome.CACHED),
            report.count(ThumbnailOutcome.FAILED),
        )
        return report

    async def _process(
        self,
        store: LocalContentStore,
        cache: ThumbnailCacheManager,
        block_index: int,
        target: str,
        source_dir: str,
    ) -> ThumbnailResult:
        original = await store.resolve(target, source_dir)
        if original is None:
            logger.warning("Image not found: %s", target)
            return ThumbnailResult(block_index, target, ThumbnailOutcome.MISSING)

        if original.suffix in PASSTHROUGH_SUFFIXES:
            return ThumbnailResult(block_index, target, ThumbnailOutcome.SKIPPED, original.path)

        key = thumbnail_key(original.path)
        cached = await cache.lookup(key)
        if cached is not None:
            return ThumbnailResult(
                block_index, target, ThumbnailOutcome.CACHED, original.path, cached.path
            )

        derivative = await cache.ensure(original, key)
        if derivative is None:
            return ThumbnailResult(block_index, target, ThumbnailOutcome.FAILED, original.path)
        return ThumbnailResult(
            block_index, target, ThumbnailOutcome.GENERATED, original.path, derivative.path
        )


__all__ = [
    "ThumbnailOutcome",
    "ThumbnailReport",
    "ThumbnailResult",
    "ThumbnailService",
    "ThumbnailServiceRequest",
]
