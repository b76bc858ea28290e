"""
Summary: Split directive text into its configured or legacy body-only form.
Why: Keep the marker-less legacy variant explicit instead of a hidden branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

END_MARKER: Final[str] = ";;"


@dataclass(frozen=True, slots=True)
class ConfiguredDirective:
    """Directive text carrying a ``key=value&...`` segment before the end marker."""

    config_segment: str
    body: str


@dataclass(frozen=True, slots=True)
class LegacyDirective:
    """Directive text without an end marker; everything is body."""

    body: str


DirectiveForm = ConfiguredDirective | LegacyDirective


def split_directive(source: str) -> DirectiveForm:
    """Split ``source`` at the first end marker.

    The body of a configured directive is everything after the marker,
    returned verbatim (leading newline included).
    """

    config_segment, marker, body = source.partition(END_MARKER)
    if not marker:
        return LegacyDirective(body=source)
    return ConfiguredDirective(config_segment=config_segment, body=body)


__all__ = [
    "END_MARKER",
    "ConfiguredDirective",
    "DirectiveForm",
    "LegacyDirective",
    "split_directive",
]
