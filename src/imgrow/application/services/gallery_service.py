"""Application service owning one rendered gallery block.

Where: application/services.
What: Decode the block's directive, resolve its images to display sources,
apply option edits in place, and write the rebuilt directive back.
Why: A rendered block, its options record and its row limit share one lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, final

from imgrow.features.directive import (
    ImageReference,
    SizePreset,
    StyleOptions,
    decode,
    get_gallery_block,
    parse_references,
    rebuild_directive_body,
    replace_block_source,
    split_directive,
)
from imgrow.features.layout import RowLimitController, RowLimitEngine, RowLimitResult
from imgrow.features.thumbnails import ContentStorePort, Resource, ThumbnailCacheManager
from imgrow.platform.logging import logger

from .ports import DocumentStorePort


@dataclass(slots=True)
class GalleryItem:
    """One rendered slot: an image source or an error placeholder."""

    reference: ImageReference
    original: Resource | None = None
    source: Resource | None = None
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


@dataclass(slots=True)
class OptionChanges:
    """Requested edits; ``None`` leaves a field unchanged."""

    preset: SizePreset | None = None
    size: int | None = None
    gap: int | None = None
    radius: int | None = None
    shadow: bool | None = None
    border: bool | None = None
    hidden: bool | None = None
    limit_rows: bool | None = None

    def apply_to(self, options: StyleOptions) -> list[str]:
        """Apply the edits in place; returns the names of rejected numeric values."""

        rejected: list[str] = []
        if self.preset is not None:
            options.apply_preset(self.preset)
        for name in ("size", "gap", "radius"):
            value = getattr(self, name)
            if value is not None and not options.set_numeric(name, value):
                rejected.append(name)
        for name in ("shadow", "border", "hidden", "limit_rows"):
            value = getattr(self, name)
            if value is not None:
                setattr(options, name, bool(value))
        return rejected


@final
class GallerySession:
    """Settings-sync collaborator for one ``imgs`` block of one document."""

    def __init__(
        self,
        *,
        document_path: str,
        block_index: int,
        source: str,
        documents: DocumentStorePort,
        content: ContentStorePort,
        cache: ThumbnailCacheManager,
        layout: RowLimitEngine[Any] | None = None,
    ) -> None:
        self.document_path: str = document_path
        self.block_index: int = block_index
        self.source: str = source
        self.options: StyleOptions = decode(source)
        self.references: list[ImageReference] = parse_references(split_directive(source).body)
        self.items: list[GalleryItem] = []
        self._documents: DocumentStorePort = documents
        self._content: ContentStorePort = content
        self._cache: ThumbnailCacheManager = cache
        self._controller: RowLimitController[Any] | None = (
            RowLimitController(layout, self.options, persist=self.persist) if layout is not None else None
        )

    @classmethod
    async def open(
        cls,
        *,
        document_path: str,
        block_index: int,
        documents: DocumentStorePort,
        content: ContentStorePort,
        cache: ThumbnailCacheManager,
        layout: RowLimitEngine[Any] | None = None,
    ) -> GallerySession:
        """Create a session from the block currently stored in the document."""

        document = await documents.read_text(document_path)
        block = get_gallery_block(document, block_index)
        return cls(
            document_path=document_path,
            block_index=block_index,
            source=block.source,
            documents=documents,
            content=content,
            cache=cache,
            layout=layout,
        )

    @property
    def controller(self) -> RowLimitController[Any] | None:
        return self._controller

    async def resolve_items(self) -> list[GalleryItem]:
        """Resolve every reference; missing images become error placeholders."""

        source_dir = str(PurePosixPath(self.document_path).parent)
        if source_dir == ".":
            source_dir = ""

        items: list[GalleryItem] = []
        for reference in self.references:
            original = await self._content.resolve(reference.target, source_dir)
            if original is None:
                logger.warning(
                    "Image not found [document=%s, target=%s]", self.document_path, reference.target
                )
                items.append(GalleryItem(reference=reference, error=f"Image not found: {reference.target}"))
                continue
            display = await self._cache.source_for(original)
            items.append(GalleryItem(reference=reference, original=original, source=display))
        self.items = items
        return items

    async def mount(self, rendered: list[Any]) -> RowLimitResult[Any] | None:
        """Run the row limit once the host has mounted one rendered item per slot."""

        if self._controller is None:
            return None
        return await self._controller.refresh(rendered)

    async def update_options(self, changes: OptionChanges) -> bool:
        """Apply ``changes``, persist when anything changed, and re-run layout if needed.

        Returns whether the options changed.
        """

        before = self.options.copy()
        rejected = changes.apply_to(self.options)
        if rejected:
            logger.warning("Ignoring out-of-range values for: %s", ", ".join(rejected))

        if not before.changed_fields(self.options):
            return False

        await self.persist(self.options)
        if self._controller is not None:
            _ = await self._controller.options_changed(before)
        return True

    async def persist(self, options: StyleOptions) -> None:
        """Rewrite the block's directive line in the stored document."""

        document = await self._documents.read_text(self.document_path)
        block = get_gallery_block(document, self.block_index)
        new_source = rebuild_directive_body(options, block.source)
        if new_source != block.source:
            await self._documents.write_text(
                self.document_path, replace_block_source(document, block, new_source)
            )
            logger.debug("Gallery options saved [document=%s, block=%d]", self.document_path, self.block_index)
        self.source = new_source


__all__ = ["GalleryItem", "GallerySession", "OptionChanges"]
