"""Display utilities for rename propagation results."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console


@final
class RenameResultDisplay:
    """Render the documents touched by a rename."""

    def __init__(self) -> None:
        self.console = Console()

    def show_results(self, changed: list[Path], *, root: Path, quiet: bool = False) -> None:
        if quiet:
            return

        if not changed:
            self.console.print("[dim]No gallery blocks referenced the renamed image[/dim]")
            return

        self.console.print(f"\n[bold]Updated {len(changed)} document(s):[/bold]")
        for path in changed:
            try:
                shown = path.relative_to(root)
            except ValueError:
                shown = path
            self.console.print(f"[green]  • {shown}[/green]")
