"""Display utilities for style command results."""

from __future__ import annotations

from typing import TYPE_CHECKING, final

from rich.console import Console

if TYPE_CHECKING:
    from imgrow.ui.cli.commands.style import StyleResult


@final
class StyleResultDisplay:
    """Render directive edits in the CLI."""

    def __init__(self) -> None:
        self.console = Console()

    def show_results(self, results: list[StyleResult], *, quiet: bool = False) -> None:
        if quiet:
            return

        for result in results:
            if result.error is not None:
                self.console.print(f"[red]Block {result.block_index}: {result.error}[/red]")
            elif result.changed:
                self.console.print(f"[green]Block {result.block_index}: {result.directive}[/green]")
            else:
                self.console.print(f"[dim]Block {result.block_index}: unchanged[/dim]")
