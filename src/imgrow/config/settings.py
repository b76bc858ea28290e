"""Where: src/imgrow/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from imgrow.config.config import (
    MAX_VISIBLE_ROWS_DEFAULT,
    STYLE_GAP_DEFAULT,
    STYLE_RADIUS_DEFAULT,
    STYLE_SIZE_DEFAULT,
    THUMBNAIL_PATH_DEFAULT,
    THUMBNAIL_QUALITY_DEFAULT,
    THUMBNAIL_SIZE_DEFAULT,
    config as app_config,
)

# Directive bounds ------------------------------------------------------------

SIZE_RANGE: tuple[int, int] = (50, 500)
GAP_RANGE: tuple[int, int] = (0, 50)
RADIUS_RANGE: tuple[int, int] = (0, 50)


def _int_setting(name: str, fallback: int) -> int:
    value = getattr(app_config, name, fallback)
    if isinstance(value, bool) or not isinstance(value, int):
        return fallback
    return value


def _bounded(value: int, bounds: tuple[int, int], fallback: int) -> int:
    low, high = bounds
    return value if low <= value <= high else fallback


# Thumbnail cache -------------------------------------------------------------

# Derivatives live under this vault-relative directory, one file per cache key.
THUMBNAIL_PATH: str = (str(app_config.thumbnail_path or "").strip().strip("/")) or THUMBNAIL_PATH_DEFAULT

# Target edge of the square derivative; never below 50 pixels.
THUMBNAIL_MIN_SIZE: int = 50
THUMBNAIL_SIZE: int = max(THUMBNAIL_MIN_SIZE, _int_setting("thumbnail_size", THUMBNAIL_SIZE_DEFAULT))

THUMBNAIL_QUALITY: int = min(95, max(1, _int_setting("thumbnail_quality", THUMBNAIL_QUALITY_DEFAULT)))


# Layout ----------------------------------------------------------------------

MAX_VISIBLE_ROWS: int = max(1, _int_setting("max_visible_rows", MAX_VISIBLE_ROWS_DEFAULT))

# Offsets closer than this belong to the same row (sub-pixel jitter).
ROW_TOLERANCE_PX: float = 2.0
LAYOUT_MAX_ATTEMPTS: int = 10
LAYOUT_RETRY_DELAY_MS: int = 50


# Style defaults --------------------------------------------------------------

DEFAULT_SIZE: int = _bounded(_int_setting("default_size", STYLE_SIZE_DEFAULT), SIZE_RANGE, STYLE_SIZE_DEFAULT)
DEFAULT_GAP: int = _bounded(_int_setting("default_gap", STYLE_GAP_DEFAULT), GAP_RANGE, STYLE_GAP_DEFAULT)
DEFAULT_RADIUS: int = _bounded(
    _int_setting("default_radius", STYLE_RADIUS_DEFAULT), RADIUS_RANGE, STYLE_RADIUS_DEFAULT
)
DEFAULT_SHADOW: bool = bool(app_config.default_shadow)
DEFAULT_BORDER: bool = bool(app_config.default_border)
DEFAULT_HIDDEN: bool = bool(app_config.default_hidden)
DEFAULT_LIMIT_ROWS: bool = bool(app_config.default_limit_rows)


__all__ = [
    "SIZE_RANGE",
    "GAP_RANGE",
    "RADIUS_RANGE",
    "THUMBNAIL_PATH",
    "THUMBNAIL_MIN_SIZE",
    "THUMBNAIL_SIZE",
    "THUMBNAIL_QUALITY",
    "MAX_VISIBLE_ROWS",
    "ROW_TOLERANCE_PX",
    "LAYOUT_MAX_ATTEMPTS",
    "LAYOUT_RETRY_DELAY_MS",
    "DEFAULT_SIZE",
    "DEFAULT_GAP",
    "DEFAULT_RADIUS",
    "DEFAULT_SHADOW",
    "DEFAULT_BORDER",
    "DEFAULT_HIDDEN",
    "DEFAULT_LIMIT_ROWS",
]
