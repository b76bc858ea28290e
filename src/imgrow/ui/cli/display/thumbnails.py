"""Display utilities for thumbnail run reports."""

from __future__ import annotations

from typing import Final, final

from rich.console import Console
from rich.table import Table

from imgrow.application.services import ThumbnailOutcome, ThumbnailReport

OUTCOME_STYLES: Final[dict[ThumbnailOutcome, str]] = {
    ThumbnailOutcome.CACHED: "cyan",
    ThumbnailOutcome.GENERATED: "green",
    ThumbnailOutcome.SKIPPED: "dim",
    ThumbnailOutcome.MISSING: "yellow",
    ThumbnailOutcome.FAILED: "red",
}


@final
class ThumbnailReportDisplay:
    """Render thumbnail outcomes in the CLI."""

    def __init__(self) -> None:
        self.console = Console()

    def show_report(self, report: ThumbnailReport, *, quiet: bool = False) -> None:
        """Print a per-image table followed by outcome totals."""

        if quiet:
            return

        if not report.results:
            self.console.print(f"[yellow]No gallery images found in {report.document}[/yellow]")
            return

        table = Table(title=f"Thumbnails: {report.document}", show_lines=False)
        table.add_column("Block", justify="right")
        table.add_column("Image")
        table.add_column("Outcome")
        table.add_column("Thumbnail", overflow="fold")

        for result in report.results:
            style = OUTCOME_STYLES[result.outcome]
            table.add_row(
                str(result.block_index),
                result.original or result.target,
                f"[{style}]{result.outcome.value}[/{style}]",
                result.derivative or "-",
            )

        self.console.print(table)
        self.console.print("\n[bold]Thumbnail Summary:[/bold]")
        self.console.print(f"Total images: {len(report.results)}")
        for outcome in ThumbnailOutcome:
            count = report.count(outcome)
            if count:
                style = OUTCOME_STYLES[outcome]
                self.console.print(f"[{style}]{outcome.value.capitalize()}: {count}[/{style}]")
