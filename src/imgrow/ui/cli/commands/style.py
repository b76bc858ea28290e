"""Style command implementation for the CLI."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import final

from imgrow.application.services import GallerySession, OptionChanges
from imgrow.features.directive import GalleryBlockNotFoundError, encode, find_gallery_blocks
from imgrow.features.thumbnails import LocalContentStore, ThumbnailCacheManager
from imgrow.platform.logging import logger
from imgrow.ui.cli.args.options import StyleArgs
from imgrow.ui.cli.display.style import StyleResultDisplay


@dataclass(slots=True)
class StyleResult:
    block_index: int
    changed: bool = False
    directive: str | None = None
    error: str | None = None


@final
class StyleCommand:
    """Command that edits the directive line of gallery blocks."""

    def __init__(self, args: StyleArgs) -> None:
        self.args = args
        self.store = LocalContentStore(args.vault_root)
        self.cache = ThumbnailCacheManager(self.store)
        self.display = StyleResultDisplay()

    def execute(self) -> list[StyleResult]:
        """Execute the style command."""

        results = asyncio.run(self._run())
        self.display.show_results(results, quiet=self.args.quiet)
        return results

    def _changes(self) -> OptionChanges:
        return OptionChanges(
            preset=self.args.preset,
            size=self.args.size,
            gap=self.args.gap,
            radius=self.args.radius,
            shadow=self.args.shadow,
            border=self.args.border,
            hidden=self.args.hidden,
            limit_rows=self.args.limit_rows,
        )

    async def _run(self) -> list[StyleResult]:
        document_path = self.store.relative(self.args.document)

        if self.args.block is not None:
            indices = [self.args.block]
        else:
            document = await self.store.read_text(document_path)
            indices = [block.index for block in find_gallery_blocks(document)]
            if not indices:
                logger.warning("No gallery blocks found in %s", document_path)

        results: list[StyleResult] = []
        for index in indices:
            try:
                session = await GallerySession.open(
                    document_path=document_path,
                    block_index=index,
                    documents=self.store,
                    content=self.store,
                    cache=self.cache,
                )
            except GalleryBlockNotFoundError as exc:
                logger.error("%s", exc)
                results.append(StyleResult(block_index=index, error=str(exc)))
                continue

            changed = await session.update_options(self._changes())
            results.append(
                StyleResult(block_index=index, changed=changed, directive=encode(session.options))
            )
        return results
