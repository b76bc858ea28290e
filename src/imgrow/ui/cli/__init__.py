"""Command line interface package."""

from imgrow.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
