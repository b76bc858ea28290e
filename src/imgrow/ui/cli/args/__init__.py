"""Command line argument handling package."""

from imgrow.ui.cli.args.parser import ArgumentParser
from imgrow.ui.cli.args.options import CLIArgs, RenameArgs, StyleArgs, ThumbnailsArgs

__all__ = ["ArgumentParser", "CLIArgs", "RenameArgs", "StyleArgs", "ThumbnailsArgs"]
