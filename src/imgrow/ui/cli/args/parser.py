"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from imgrow.config.config import Config
from imgrow.features.directive import SizePreset
from imgrow.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from imgrow.ui.cli.args.options import CLIArgs, RenameArgs, StyleArgs, ThumbnailsArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="imgrow - Markdown image galleries with cached thumbnails and row limits.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        thumbnails_parser = subparsers.add_parser(
            "thumbnails",
            help="Generate cached thumbnails for every gallery in a document",
        )
        _ = thumbnails_parser.add_argument(
            "document",
            type=str,
            help="Markdown document containing imgs blocks",
            metavar="DOCUMENT",
        )
        ArgumentParser._add_common_options(thumbnails_parser)

        style_parser = subparsers.add_parser(
            "style",
            help="Rewrite the directive line of one or all gallery blocks",
        )
        _ = style_parser.add_argument(
            "document",
            type=str,
            help="Markdown document containing imgs blocks",
            metavar="DOCUMENT",
        )
        _ = style_parser.add_argument(
            "--block",
            type=int,
            help="Zero-based index of the block to edit (defaults to every block)",
            metavar="N",
        )
        _ = style_parser.add_argument(
            "--preset",
            type=str,
            choices=[preset.value for preset in SizePreset],
            help="Apply a size/gap/radius preset before individual values",
        )
        for name, label in (("size", "Thumbnail edge"), ("gap", "Gap"), ("radius", "Corner radius")):
            _ = style_parser.add_argument(
                f"--{name}",
                type=int,
                help=f"{label} in pixels",
                metavar="PX",
            )
        for name, label in (
            ("shadow", "drop shadows"),
            ("border", "borders"),
            ("hidden", "collapsing the gallery"),
        ):
            _ = style_parser.add_argument(
                f"--{name}",
                action=argparse.BooleanOptionalAction,
                default=None,
                help=f"Toggle {label}",
            )
        _ = style_parser.add_argument(
            "--limit",
            dest="limit_rows",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Toggle limiting the gallery to its first rows",
        )
        ArgumentParser._add_common_options(style_parser)

        rename_parser = subparsers.add_parser(
            "rename",
            help="Update gallery references after an image was renamed",
        )
        _ = rename_parser.add_argument(
            "old_path",
            type=str,
            help="Previous path of the image, relative to the vault root",
            metavar="OLD",
        )
        _ = rename_parser.add_argument(
            "new_path",
            type=str,
            help="New path of the image, relative to the vault root",
            metavar="NEW",
        )
        ArgumentParser._add_common_options(rename_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "thumbnails":
            return ArgumentParser._process_thumbnails(parsed_args, configuration)

        if command == "style":
            return ArgumentParser._process_style(parsed_args, configuration)

        if command == "rename":
            return ArgumentParser._process_rename(parsed_args, configuration)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_common_options(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--vault-root",
            type=str,
            help="Root directory image paths are resolved against (defaults to config, then the document folder)",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _resolve_vault_root(
        parsed_args: argparse.Namespace, configuration: Config, fallback: Path
    ) -> Path:
        if parsed_args.vault_root:
            vault_root = Path(parsed_args.vault_root)
        elif configuration.vault_root is not None:
            vault_root = configuration.vault_root
        else:
            vault_root = fallback

        vault_root = vault_root.expanduser().resolve()
        if not vault_root.is_dir():
            logger.error("Vault root does not exist or is not a directory: %s", vault_root)
            sys.exit(1)
        return vault_root

    @staticmethod
    def _resolve_document(parsed_args: argparse.Namespace, configuration: Config) -> tuple[Path, Path]:
        document = Path(parsed_args.document).expanduser().resolve()
        if not document.is_file():
            logger.error("Document does not exist: %s", document)
            sys.exit(1)

        vault_root = ArgumentParser._resolve_vault_root(parsed_args, configuration, document.parent)
        if not document.is_relative_to(vault_root):
            logger.error("Document %s is outside the vault root %s", document, vault_root)
            sys.exit(1)
        return document, vault_root

    @staticmethod
    def _process_thumbnails(parsed_args: argparse.Namespace, configuration: Config) -> ThumbnailsArgs:
        document, vault_root = ArgumentParser._resolve_document(parsed_args, configuration)
        return ThumbnailsArgs(
            command="thumbnails",
            document=document,
            vault_root=vault_root,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_style(parsed_args: argparse.Namespace, configuration: Config) -> StyleArgs:
        document, vault_root = ArgumentParser._resolve_document(parsed_args, configuration)

        block = parsed_args.block
        if block is not None and block < 0:
            logger.error("Block index must be zero or greater; received %s", block)
            sys.exit(1)

        return StyleArgs(
            command="style",
            document=document,
            vault_root=vault_root,
            block=block,
            preset=SizePreset(parsed_args.preset) if parsed_args.preset else None,
            size=parsed_args.size,
            gap=parsed_args.gap,
            radius=parsed_args.radius,
            shadow=parsed_args.shadow,
            border=parsed_args.border,
            hidden=parsed_args.hidden,
            limit_rows=parsed_args.limit_rows,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_rename(parsed_args: argparse.Namespace, configuration: Config) -> RenameArgs:
        vault_root = ArgumentParser._resolve_vault_root(parsed_args, configuration, Path.cwd())
        return RenameArgs(
            command="rename",
            old_path=parsed_args.old_path,
            new_path=parsed_args.new_path,
            vault_root=vault_root,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
