"""Locate fenced gallery blocks inside a Markdown document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .references import GALLERY_LANGUAGE

_BLOCK_RE: Final[re.Pattern[str]] = re.compile(
    rf"^```{GALLERY_LANGUAGE}[ \t]*(?P<newline>\r?\n)(?P<inner>(?:.*?\n)?)^```[ \t]*\r?$",
    re.MULTILINE | re.DOTALL,
)

_BARE_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"(?<!\r)\n")


class GalleryBlockNotFoundError(LookupError):
    """Raised when a block index does not exist in a document."""

    def __init__(self, index: int, available: int) -> None:
        super().__init__(f"Gallery block {index} not found ({available} block(s) in document)")
        self.index: int = index
        self.available: int = available


@dataclass(frozen=True, slots=True)
class GalleryBlock:
    """A fenced ``imgs`` block and the span of its inner text."""

    index: int
    inner_start: int
    inner_end: int
    source: str
    newline: str = "\n"


def _strip_line_end(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def find_gallery_blocks(document: str) -> list[GalleryBlock]:
    """Return the gallery blocks of ``document`` in order."""

    blocks: list[GalleryBlock] = []
    for index, match in enumerate(_BLOCK_RE.finditer(document)):
        inner = match.group("inner")
        blocks.append(
            GalleryBlock(
                index=index,
                inner_start=match.start("inner"),
                inner_end=match.end("inner"),
                source=_strip_line_end(inner),
                newline=match.group("newline"),
            )
        )
    return blocks


def get_gallery_block(document: str, index: int) -> GalleryBlock:
    blocks = find_gallery_blocks(document)
    if not 0 <= index < len(blocks):
        raise GalleryBlockNotFoundError(index, len(blocks))
    return blocks[index]


def replace_block_source(document: str, block: GalleryBlock, new_source: str) -> str:
    """Swap the inner text of ``block``; everything outside it is kept byte-for-byte."""

    stripped = new_source.rstrip("\r\n")
    if block.newline != "\n":
        # Match the line endings already used by the block.
        stripped = _BARE_NEWLINE_RE.sub(block.newline, stripped)
    inner = f"{stripped}{block.newline}" if stripped else ""
    return document[: block.inner_start] + inner + document[block.inner_end :]


__all__ = [
    "GalleryBlock",
    "GalleryBlockNotFoundError",
    "find_gallery_blocks",
    "get_gallery_block",
    "replace_block_source",
]
