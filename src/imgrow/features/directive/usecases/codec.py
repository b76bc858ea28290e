"""Directive codec.

Where: features/directive/usecases.
What: Decode the ``key=value&...;;`` line into ``StyleOptions`` and write it back.
Why: The directive line is rewritten on every durable settings change, so the
codec has to be tolerant on input and canonical on output.

Format::

    size=220&gap=10&radius=10&shadow=false&border=false&hidden=false;;
    ![img](path/to/a.png)
    ![[b.png]]
"""

from __future__ import annotations

import re
from typing import Final

from ..domain.directive import END_MARKER, ConfiguredDirective, split_directive
from ..domain.options import NUMERIC_BOUNDS, StyleOptions

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

# directive key -> StyleOptions attribute
_FLAG_KEYS: Final[dict[str, str]] = {
    "shadow": "shadow",
    "border": "border",
    "hidden": "hidden",
    "limit": "limit_rows",
}


def _parse_int(value: str) -> int | None:
    if not _INTEGER_RE.fullmatch(value):
        return None
    return int(value)


def _parse_flag(value: str) -> bool | None:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _format_flag(value: bool) -> str:
    return "true" if value else "false"


def apply_token(options: StyleOptions, key: str, value: str) -> bool:
    """Apply one ``key=value`` pair to ``options``.

    Returns ``True`` when the value was accepted. Unknown keys and invalid
    values leave ``options`` untouched.
    """

    if key in NUMERIC_BOUNDS:
        number = _parse_int(value)
        return number is not None and options.set_numeric(key, number)

    attribute = _FLAG_KEYS.get(key)
    if attribute is None:
        return False
    flag = _parse_flag(value)
    if flag is None:
        return False
    setattr(options, attribute, flag)
    return True


def decode(source: str, base: StyleOptions | None = None) -> StyleOptions:
    """Parse the configuration segment of ``source``.

    Never raises on malformed input; text without the end marker yields the
    defaults (or a copy of ``base``).
    """

    options = base.copy() if base is not None else StyleOptions()
    form = split_directive(source)
    if not isinstance(form, ConfiguredDirective):
        return options

    for token in form.config_segment.strip().split("&"):
        key, separator, value = token.partition("=")
        if not separator:
            continue
        _ = apply_token(options, key.strip(), value.strip())
    return options


def encode(options: StyleOptions) -> str:
    """Return the canonical configuration segment for ``options``."""

    segment = (
        f"size={options.size}"
        f"&gap={options.gap}"
        f"&radius={options.radius}"
        f"&shadow={_format_flag(options.shadow)}"
        f"&border={_format_flag(options.border)}"
        f"&hidden={_format_flag(options.hidden)}"
    )
    if options.limit_rows:
        segment += "&limit=true"
    return segment


def rebuild_directive_body(options: StyleOptions, current_text: str) -> str:
    """Replace the configuration segment of ``current_text`` with ``encode(options)``.

    The body after the marker is kept verbatim apart from leading whitespace,
    so applying this twice with the same options is the same as applying it once.
    """

    body = split_directive(current_text).body.lstrip()
    return f"{encode(options)}{END_MARKER}\n{body}"


__all__ = ["apply_token", "decode", "encode", "rebuild_directive_body"]
