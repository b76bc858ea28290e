"""Rich console handler for thumbnail cache events.

Where: platform/logging/handlers.py
What: Render structured ``cache_event`` log records with icons and compact paths.
Why: Keep cache diagnostics readable without coupling features to Rich.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class GalleryRichHandler(RichHandler):
    """Rich handler that renders cache events and keeps paths short."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "thumbnail.hit": ("♻️", "green"),
        "thumbnail.inflight": ("⏳", "yellow"),
        "thumbnail.generate.start": ("🖼️", "blue"),
        "thumbnail.generate.success": ("✅", "green"),
        "thumbnail.generate.error": ("⛔", "red"),
        "thumbnail.race": ("↪️", "yellow"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "thumbnail.hit": "Cache hit ",
        "thumbnail.inflight": "Generation already running ",
        "thumbnail.generate.start": "Generating ",
        "thumbnail.generate.success": "Generated ",
        "thumbnail.generate.error": "Generation failed ",
        "thumbnail.race": "Derivative already written ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, truncating long prefixes."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display = "…" + separator + separator.join(body_parts)
        else:
            display = (separator if anchor else "") + separator.join(body_parts)

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_cache_event(self, record: logging.LogRecord) -> Text | None:
        """Render a structured cache event, or ``None`` for plain records."""

        event = getattr(record, "cache_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))
        if target_path and event in {"thumbnail.hit", "thumbnail.generate.success"}:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))
        elif target_path and not source_path:
            _ = body.append_text(self._format_path(str(target_path)))

        details: list[str] = []
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        stage = getattr(record, "stage", None)
        if stage:
            details.append(f"stage={stage}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_cache_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["GalleryRichHandler"]
