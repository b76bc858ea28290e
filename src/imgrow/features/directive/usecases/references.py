"""Where: features/directive/usecases/references.py
What: Recognise Markdown ``![alt](path)`` and embed ``![[file|hint]]`` image syntax.
Why: The directive body is a list of references the renderer resolves one by one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

GALLERY_LANGUAGE: Final[str] = "imgs"

# Embeds first, so "![[a.png]] ![b](c.png)" on one line is two matches.
IMAGE_SYNTAX_RE: Final[re.Pattern[str]] = re.compile(r"!\[\[(.*?)\]\]|!\[([^\]]*)\]\(([^)]*)\)")


class ReferenceKind(StrEnum):
    MARKDOWN = "markdown"
    EMBED = "embed"


@dataclass(frozen=True, slots=True)
class ImageReference:
    """A single image reference found in a directive body."""

    raw: str
    target: str
    alt: str
    kind: ReferenceKind
    line: int


def _markdown_target(inner: str) -> str:
    inner = inner.strip()
    if inner.startswith("<") and ">" in inner:
        return inner[1 : inner.index(">")]
    # Drop an optional "title" after the path.
    return inner.split(maxsplit=1)[0] if inner else ""


def _embed_target(inner: str) -> tuple[str, str]:
    target, _, hint = inner.partition("|")
    target = target.split("#", 1)[0]
    return target.strip(), hint.strip()


def parse_references(body: str) -> list[ImageReference]:
    """Return every image reference in ``body`` in document order."""

    references: list[ImageReference] = []
    for index, line in enumerate(body.splitlines()):
        for match in IMAGE_SYNTAX_RE.finditer(line):
            embed_inner, alt, markdown_inner = match.groups()
            if embed_inner is not None:
                target, hint = _embed_target(embed_inner)
                kind = ReferenceKind.EMBED
                alt = hint
            else:
                target = _markdown_target(markdown_inner)
                kind = ReferenceKind.MARKDOWN
            if not target:
                continue
            references.append(
                ImageReference(raw=match.group(0), target=target, alt=alt, kind=kind, line=index)
            )
    return references


def has_image_syntax(line: str) -> bool:
    """Return whether ``line`` contains Markdown or embed image syntax."""

    return IMAGE_SYNTAX_RE.search(line) is not None


def extract_image_syntaxes(line: str) -> str:
    """Return the image syntaxes of ``line`` joined by newlines, or ``line`` if there are none."""

    syntaxes = [match.group(0) for match in IMAGE_SYNTAX_RE.finditer(line)]
    return "\n".join(syntaxes) if syntaxes else line


def wrap_gallery_block(image_syntax: str) -> str:
    """Wrap image syntax into a fenced gallery block.

    >>> wrap_gallery_block("  ![|406x259](/assets/a.png) ")
    '```imgs\\n![|406x259](/assets/a.png)\\n```'
    """

    return f"```{GALLERY_LANGUAGE}\n{image_syntax.strip()}\n```"


__all__ = [
    "GALLERY_LANGUAGE",
    "IMAGE_SYNTAX_RE",
    "ImageReference",
    "ReferenceKind",
    "extract_image_syntaxes",
    "has_image_syntax",
    "parse_references",
    "wrap_gallery_block",
]
