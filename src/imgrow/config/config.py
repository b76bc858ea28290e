"""Configuration management for imgrow."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from imgrow.config.file_ops import write_text_file
from imgrow.config.paths import default_config_path
from imgrow.platform.logging import logger


THUMBNAIL_PATH_DEFAULT = "assets/cache"
THUMBNAIL_SIZE_DEFAULT = 220
THUMBNAIL_QUALITY_DEFAULT = 80
MAX_VISIBLE_ROWS_DEFAULT = 3
STYLE_SIZE_DEFAULT = 150
STYLE_GAP_DEFAULT = 8
STYLE_RADIUS_DEFAULT = 10


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Root directory image references are resolved against
    vault_root: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Thumbnail cache
    thumbnail_path: str = THUMBNAIL_PATH_DEFAULT
    thumbnail_size: int = THUMBNAIL_SIZE_DEFAULT
    thumbnail_quality: int = THUMBNAIL_QUALITY_DEFAULT

    # Layout
    max_visible_rows: int = MAX_VISIBLE_ROWS_DEFAULT

    # Style defaults applied before a directive line is decoded
    default_size: int = STYLE_SIZE_DEFAULT
    default_gap: int = STYLE_GAP_DEFAULT
    default_radius: int = STYLE_RADIUS_DEFAULT
    default_shadow: bool = False
    default_border: bool = False
    default_hidden: bool = False
    default_limit_rows: bool = False

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# imgrow configuration file", ""]

        lines.append("# Root directory image references are resolved against (optional)")
        lines.append('# Example: vault_root = "/path/to/notes"')
        if config["vault_root"] is not None:
            lines.append(f"vault_root = {self._format_toml_value(config['vault_root'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Thumbnail cache directory, relative to the vault root")
        lines.append("# Dot-prefixed directories are not indexed by most note apps")
        lines.append(f"thumbnail_path = {self._format_toml_value(config['thumbnail_path'])}")
        lines.append("# Square thumbnail edge in pixels (never below 50)")
        lines.append(f"thumbnail_size = {self._format_toml_value(config['thumbnail_size'])}")
        lines.append("# JPEG quality for thumbnails (1-95)")
        lines.append(f"thumbnail_quality = {self._format_toml_value(config['thumbnail_quality'])}")
        lines.append("")

        lines.append("# Rows shown when a gallery has row limiting enabled")
        lines.append(f"max_visible_rows = {self._format_toml_value(config['max_visible_rows'])}")
        lines.append("")

        lines.append("# Style defaults used when a gallery has no directive line")
        for key in (
            "default_size",
            "default_gap",
            "default_radius",
            "default_shadow",
            "default_border",
            "default_hidden",
            "default_limit_rows",
        ):
            lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default file when absent."""
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                for key in ("vault_root", "log_file"):
                    value = config_dict.get(key)
                    if isinstance(value, str) and not value.strip():
                        config_dict[key] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.debug("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
