"""Rename command implementation for the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import final

from imgrow.features.rename import is_image_path, propagate_rename
from imgrow.platform.logging import logger
from imgrow.ui.cli.args.options import RenameArgs
from imgrow.ui.cli.display.rename import RenameResultDisplay


@final
class RenameCommand:
    """Command that propagates an image rename into gallery blocks."""

    def __init__(self, args: RenameArgs) -> None:
        self.args = args
        self.display = RenameResultDisplay()

    def execute(self) -> list[Path]:
        """Execute the rename command."""

        if not is_image_path(self.args.new_path):
            logger.warning("Not an image path, nothing to update: %s", self.args.new_path)
        changed = propagate_rename(self.args.vault_root, self.args.old_path, self.args.new_path)
        self.display.show_results(changed, root=self.args.vault_root, quiet=self.args.quiet)
        return changed
