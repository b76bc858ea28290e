"""Tests for CLI functionality."""

from io import BytesIO
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image
from pytest_mock import MockerFixture

from imgrow.ui.cli import CommandProcessor

PAGE = "```imgs\nsize=120;;\n![a](img/a.png)\n```\n\n```imgs\n![[img/b.png]]\n```\n"


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    (tmp_path / "img").mkdir()
    for name in ("a.png", "b.png"):
        buffer = BytesIO()
        Image.new("RGB", (64, 48), (90, 90, 90)).save(buffer, format="PNG")
        _ = (tmp_path / "img" / name).write_bytes(buffer.getvalue())
    _ = (tmp_path / "page.md").write_text(PAGE, encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def quiet_logger_setup(mocker: MockerFixture) -> MagicMock:
    """Keep the shared logger configuration untouched by ``process_args``."""

    return mocker.patch("imgrow.ui.cli.args.parser.setup_logger")


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("imgrow.ui.cli.cli.logger")


def test_thumbnails_command_generates_cache(vault: Path) -> None:
    CommandProcessor.process_command(["thumbnails", str(vault / "page.md"), "--quiet"])

    cache_dir = vault / "assets" / "cache"
    assert cache_dir.is_dir()
    assert len(list(cache_dir.iterdir())) == 2


def test_thumbnails_command_exits_on_missing_images(vault: Path) -> None:
    _ = (vault / "img" / "b.png").unlink()

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["thumbnails", str(vault / "page.md"), "--quiet"])

    assert excinfo.value.code == 1


def test_style_command_rewrites_all_blocks(vault: Path) -> None:
    CommandProcessor.process_command(["style", str(vault / "page.md"), "--preset", "small", "--shadow", "--quiet"])

    text = (vault / "page.md").read_text(encoding="utf-8")
    assert text.count("size=90&gap=5&radius=8&shadow=true&border=false&hidden=false;;") == 2
    assert "![a](img/a.png)" in text
    assert "![[img/b.png]]" in text


def test_style_command_single_block(vault: Path) -> None:
    CommandProcessor.process_command(["style", str(vault / "page.md"), "--block", "1", "--limit", "--quiet"])

    text = (vault / "page.md").read_text(encoding="utf-8")
    assert text.startswith("```imgs\nsize=120;;\n")
    assert "&limit=true;;\n![[img/b.png]]" in text


def test_style_command_missing_block_exits(vault: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["style", str(vault / "page.md"), "--block", "5", "--size", "100"])

    assert excinfo.value.code == 1
    assert (vault / "page.md").read_text(encoding="utf-8") == PAGE


def test_rename_command_updates_documents(vault: Path) -> None:
    CommandProcessor.process_command(
        ["rename", "img/a.png", "img/renamed.png", "--vault-root", str(vault), "--quiet"]
    )

    assert "![a](img/renamed.png)" in (vault / "page.md").read_text(encoding="utf-8")


def test_keyboard_interrupt_exits_130(vault: Path, mocker: MockerFixture, mock_logger: MagicMock) -> None:
    _ = mocker.patch("imgrow.ui.cli.cli.ThumbnailsCommand", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["thumbnails", str(vault / "page.md")])

    assert excinfo.value.code == 130
    mock_logger.info.assert_called_once()


def test_unexpected_error_exits_1(vault: Path, mocker: MockerFixture, mock_logger: MagicMock) -> None:
    _ = mocker.patch("imgrow.ui.cli.cli.RenameCommand", side_effect=RuntimeError("disk on fire"))

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["rename", "a.png", "b.png", "--vault-root", str(vault)])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "disk on fire")
