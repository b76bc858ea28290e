"""Command line interface for imgrow."""

import sys
from typing import final

from imgrow.ui.cli.args import ArgumentParser
from imgrow.ui.cli.args.options import CLIArgs, RenameArgs, StyleArgs, ThumbnailsArgs
from imgrow.ui.cli.commands import RenameCommand, StyleCommand, ThumbnailsCommand
from imgrow.platform.logging import logger


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ThumbnailsArgs):
                report = ThumbnailsCommand(args).execute()
                if report.has_failures:
                    sys.exit(1)
                return

            if isinstance(args, StyleArgs):
                results = StyleCommand(args).execute()
                if any(result.error is not None for result in results):
                    sys.exit(1)
                return

            assert isinstance(args, RenameArgs)
            _ = RenameCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
