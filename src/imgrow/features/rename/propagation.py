"""
Summary: Rewrite gallery blocks that reference an image after it is renamed.
Why: Gallery bodies hold literal paths, so a rename would otherwise break them.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from imgrow.features.directive import find_gallery_blocks, replace_block_source
from imgrow.platform.logging import logger

IMAGE_PATH_RE: Final[re.Pattern[str]] = re.compile(r"\.(png|jpe?g|gif|bmp|svg|webp)$", re.IGNORECASE)


def is_image_path(path: str) -> bool:
    return IMAGE_PATH_RE.search(path) is not None


def replace_reference_paths(document: str, old_path: str, new_path: str) -> str:
    """Replace ``old_path`` with ``new_path`` inside gallery blocks only."""

    if not old_path or old_path == new_path:
        return document

    updated = document
    # Back to front so earlier spans stay valid.
    for block in reversed(find_gallery_blocks(document)):
        if old_path in block.source:
            updated = replace_block_source(updated, block, block.source.replace(old_path, new_path))
    return updated


def propagate_rename(root: Path, old_path: str, new_path: str) -> list[Path]:
    """Update every Markdown document under ``root``; returns the files that changed."""

    if not is_image_path(new_path):
        return []

    changed: list[Path] = []
    for document_path in sorted(root.rglob("*.md")):
        if not document_path.is_file():
            continue
        content = document_path.read_bytes().decode("utf-8")
        updated = replace_reference_paths(content, old_path, new_path)
        if updated == content:
            continue
        _ = document_path.write_text(updated, encoding="utf-8", newline="")
        logger.info("Updated image path in %s", document_path)
        changed.append(document_path)
    return changed


__all__ = ["IMAGE_PATH_RE", "is_image_path", "propagate_rename", "replace_reference_paths"]
