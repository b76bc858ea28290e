"""Tests for locating and rewriting fenced gallery blocks."""

from __future__ import annotations

import pytest

from imgrow.features.directive import (
    GalleryBlockNotFoundError,
    find_gallery_blocks,
    get_gallery_block,
    replace_block_source,
)

DOCUMENT = (
    "# Trip\n"
    "\n"
    "```imgs\n"
    "size=120;;\n"
    "![a](a.png)\n"
    "```\n"
    "\n"
    "```python\n"
    "print('not a gallery')\n"
    "```\n"
    "\n"
    "```imgs\n"
    "![[b.png]]\n"
    "```\n"
    "trailing text\n"
)


def test_find_gallery_blocks_skips_other_languages() -> None:
    blocks = find_gallery_blocks(DOCUMENT)

    assert [block.index for block in blocks] == [0, 1]
    assert blocks[0].source == "size=120;;\n![a](a.png)"
    assert blocks[1].source == "![[b.png]]"


def test_empty_block_has_empty_source() -> None:
    blocks = find_gallery_blocks("```imgs\n```\n")
    assert len(blocks) == 1
    assert blocks[0].source == ""


def test_get_gallery_block_out_of_range() -> None:
    with pytest.raises(GalleryBlockNotFoundError) as excinfo:
        _ = get_gallery_block(DOCUMENT, 2)

    assert excinfo.value.index == 2
    assert excinfo.value.available == 2


def test_replace_block_source_leaves_rest_of_document_untouched() -> None:
    block = get_gallery_block(DOCUMENT, 1)

    updated = replace_block_source(DOCUMENT, block, "gap=3;;\n![[b.png]]\n\n")

    assert updated == DOCUMENT.replace("```imgs\n![[b.png]]\n```", "```imgs\ngap=3;;\n![[b.png]]\n```")
    assert find_gallery_blocks(updated)[0].source == "size=120;;\n![a](a.png)"


def test_replace_into_empty_block() -> None:
    document = "```imgs\n```\n"
    block = get_gallery_block(document, 0)

    assert replace_block_source(document, block, "size=90;;") == "```imgs\nsize=90;;\n```\n"


def test_crlf_blocks_are_found_and_rewritten_in_place() -> None:
    document = DOCUMENT.replace("\n", "\r\n")

    blocks = find_gallery_blocks(document)

    assert [block.source for block in blocks] == ["size=120;;\r\n![a](a.png)", "![[b.png]]"]
    assert blocks[0].newline == "\r\n"

    updated = replace_block_source(document, blocks[0], "gap=3;;\n![a](a.png)")

    assert updated == document.replace("size=120;;\r\n", "gap=3;;\r\n")
    assert "\n" not in updated.replace("\r\n", "")
