"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from pathlib import Path


def test_defaults_match_config_defaults(config_runtime_env: Path) -> None:
    _ = config_runtime_env

    import imgrow.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.THUMBNAIL_PATH == "assets/cache"
    assert reloaded.THUMBNAIL_SIZE == 220
    assert reloaded.THUMBNAIL_QUALITY == 80
    assert reloaded.MAX_VISIBLE_ROWS == 3
    assert (reloaded.DEFAULT_SIZE, reloaded.DEFAULT_GAP, reloaded.DEFAULT_RADIUS) == (150, 8, 10)
    assert reloaded.DEFAULT_LIMIT_ROWS is False


def test_out_of_range_values_are_clamped_or_replaced(config_runtime_env: Path) -> None:
    """Thumbnail size is floored, quality clamped, rows kept positive, style values bounded."""

    _ = config_runtime_env

    from imgrow.config.config import config as app_config

    app_config.thumbnail_size = 10
    app_config.thumbnail_quality = 500
    app_config.max_visible_rows = 0
    app_config.default_size = 9999
    app_config.default_gap = 12
    app_config.thumbnail_path = "/cache/thumbs/"

    import imgrow.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.THUMBNAIL_SIZE == 50
    assert reloaded.THUMBNAIL_QUALITY == 95
    assert reloaded.MAX_VISIBLE_ROWS == 1
    assert reloaded.DEFAULT_SIZE == 150
    assert reloaded.DEFAULT_GAP == 12
    assert reloaded.THUMBNAIL_PATH == "cache/thumbs"


def test_non_integer_values_fall_back(config_runtime_env: Path) -> None:
    _ = config_runtime_env

    from imgrow.config.config import config as app_config

    app_config.thumbnail_quality = True  # pyright: ignore[reportAttributeAccessIssue]
    app_config.max_visible_rows = "4"  # pyright: ignore[reportAttributeAccessIssue]

    import imgrow.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.THUMBNAIL_QUALITY == 80
    assert reloaded.MAX_VISIBLE_ROWS == 3
