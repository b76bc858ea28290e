"""Command execution package for CLI."""

from imgrow.ui.cli.commands.rename import RenameCommand
from imgrow.ui.cli.commands.style import StyleCommand, StyleResult
from imgrow.ui.cli.commands.thumbnails import ThumbnailsCommand

__all__ = [
    "RenameCommand",
    "StyleCommand",
    "StyleResult",
    "ThumbnailsCommand",
]
