"""Thumbnails command implementation for the CLI."""

from __future__ import annotations

import asyncio
from typing import final

from imgrow.application.services import ThumbnailReport, ThumbnailService, ThumbnailServiceRequest
from imgrow.ui.cli.args.options import ThumbnailsArgs
from imgrow.ui.cli.display.thumbnails import ThumbnailReportDisplay


@final
class ThumbnailsCommand:
    """Command that pre-generates thumbnails for one document."""

    def __init__(self, args: ThumbnailsArgs) -> None:
        self.args = args
        self.service = ThumbnailService()
        self.display = ThumbnailReportDisplay()

    def execute(self) -> ThumbnailReport:
        """Execute the thumbnails command."""

        request = ThumbnailServiceRequest(
            document=self.args.document,
            vault_root=self.args.vault_root,
        )
        report = asyncio.run(self.service.run(request))
        self.display.show_report(report, quiet=self.args.quiet)
        return report
