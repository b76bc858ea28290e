"""Display management for CLI interface."""

from imgrow.ui.cli.display.rename import RenameResultDisplay
from imgrow.ui.cli.display.style import StyleResultDisplay
from imgrow.ui.cli.display.thumbnails import ThumbnailReportDisplay

__all__ = ["RenameResultDisplay", "StyleResultDisplay", "ThumbnailReportDisplay"]
