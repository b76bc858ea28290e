"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from imgrow.features.directive import SizePreset


@final
@dataclass(slots=True)
class ThumbnailsArgs:
    """Command line arguments for the ``thumbnails`` subcommand."""

    command: Literal["thumbnails"]
    document: Path
    vault_root: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class StyleArgs:
    """Command line arguments for the ``style`` subcommand.

    ``None`` on any style field means "leave unchanged"; ``block`` of
    ``None`` targets every gallery block in the document.
    """

    command: Literal["style"]
    document: Path
    vault_root: Path
    block: int | None
    preset: SizePreset | None
    size: int | None
    gap: int | None
    radius: int | None
    shadow: bool | None
    border: bool | None
    hidden: bool | None
    limit_rows: bool | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RenameArgs:
    """Command line arguments for the ``rename`` subcommand."""

    command: Literal["rename"]
    old_path: str
    new_path: str
    vault_root: Path
    verbose: bool
    quiet: bool


CLIArgs = ThumbnailsArgs | StyleArgs | RenameArgs
