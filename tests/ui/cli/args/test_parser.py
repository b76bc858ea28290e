"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from imgrow.features.directive import SizePreset
from imgrow.platform.logging import DEFAULT_LOG_FILE
from imgrow.ui.cli.args import ArgumentParser, RenameArgs, StyleArgs, ThumbnailsArgs


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    _ = (tmp_path / "page.md").write_text("```imgs\n![a](a.png)\n```\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def mock_config(mocker: MockerFixture):
    mock = mocker.patch("imgrow.ui.cli.args.parser.Config")
    mock.load.return_value.log_file = None
    mock.load.return_value.vault_root = None
    return mock


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture):
    return mocker.patch("imgrow.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    thumbnails: Namespace = parser.parse_args(["thumbnails", "page.md"])
    assert thumbnails.command == "thumbnails"
    assert thumbnails.document == "page.md"

    style = parser.parse_args(
        ["style", "page.md", "--block", "1", "--size", "120", "--no-shadow", "--limit", "--preset", "small"]
    )
    assert style.block == 1
    assert style.size == 120
    assert style.shadow is False
    assert style.limit_rows is True
    assert style.border is None
    assert style.preset == "small"

    rename = parser.parse_args(["rename", "a.png", "b.png", "--vault-root", "vault"])
    assert (rename.old_path, rename.new_path, rename.vault_root) == ("a.png", "b.png", "vault")


def test_invalid_preset_is_rejected() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["style", "page.md", "--preset", "huge"])


def test_process_thumbnails_defaults_vault_to_document_folder(
    vault: Path, mock_config, mock_setup_logger
) -> None:
    args = ArgumentParser.process_args(["thumbnails", str(vault / "page.md")])

    assert isinstance(args, ThumbnailsArgs)
    assert args.document == (vault / "page.md").resolve()
    assert args.vault_root == vault.resolve()
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


def test_process_args_uses_configured_vault_and_log_file(
    vault: Path, mock_config, mock_setup_logger
) -> None:
    (vault / "sub").mkdir()
    _ = (vault / "sub" / "deep.md").write_text("", encoding="utf-8")
    mock_config.load.return_value.vault_root = vault
    mock_config.load.return_value.log_file = vault / "run.log"

    args = ArgumentParser.process_args(["thumbnails", str(vault / "sub" / "deep.md"), "--verbose"])

    assert isinstance(args, ThumbnailsArgs)
    assert args.vault_root == vault.resolve()
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG
    assert mock_setup_logger.call_args.kwargs["log_file"] == vault / "run.log"


def test_process_style(vault: Path, mock_config, mock_setup_logger) -> None:
    args = ArgumentParser.process_args(
        ["style", str(vault / "page.md"), "--preset", "large", "--border", "--quiet"]
    )

    assert isinstance(args, StyleArgs)
    assert args.block is None
    assert args.preset is SizePreset.LARGE
    assert args.border is True
    assert args.shadow is None
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_style_rejects_negative_block(vault: Path, mock_config, mock_setup_logger) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["style", str(vault / "page.md"), "--block", "-1"])
    assert excinfo.value.code == 1


def test_missing_document_exits(vault: Path, mock_config, mock_setup_logger) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["thumbnails", str(vault / "nope.md")])
    assert excinfo.value.code == 1


def test_document_outside_vault_exits(
    vault: Path, tmp_path_factory: pytest.TempPathFactory, mock_config, mock_setup_logger
) -> None:
    other = tmp_path_factory.mktemp("other")
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["thumbnails", str(vault / "page.md"), "--vault-root", str(other)])
    assert excinfo.value.code == 1


def test_process_rename(vault: Path, mock_config, mock_setup_logger) -> None:
    args = ArgumentParser.process_args(["rename", "a.png", "b.png", "--vault-root", str(vault)])

    assert isinstance(args, RenameArgs)
    assert args.vault_root == vault.resolve()
    assert (args.old_path, args.new_path) == ("a.png", "b.png")
