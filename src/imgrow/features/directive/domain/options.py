"""Style options record for a rendered gallery block.

Where: features/directive/domain.
What: ``StyleOptions`` with bounds checking and the S/M/L size presets.
Why: One mutable record per rendered block is the single source of truth for styling.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import StrEnum

from imgrow.config import settings


class SizePreset(StrEnum):
    """Named size/gap/radius bundles offered by the settings panel."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# size, gap, radius
PRESET_VALUES: dict[SizePreset, tuple[int, int, int]] = {
    SizePreset.SMALL: (90, 5, 8),
    SizePreset.MEDIUM: (150, 8, 10),
    SizePreset.LARGE: (220, 10, 14),
}

NUMERIC_BOUNDS: dict[str, tuple[int, int]] = {
    "size": settings.SIZE_RANGE,
    "gap": settings.GAP_RANGE,
    "radius": settings.RADIUS_RANGE,
}


def within_bounds(name: str, value: int) -> bool:
    """Return whether ``value`` is acceptable for numeric field ``name``."""

    low, high = NUMERIC_BOUNDS[name]
    return low <= value <= high


@dataclass(slots=True)
class StyleOptions:
    """Display parameters for one gallery block."""

    size: int = field(default_factory=lambda: settings.DEFAULT_SIZE)
    gap: int = field(default_factory=lambda: settings.DEFAULT_GAP)
    radius: int = field(default_factory=lambda: settings.DEFAULT_RADIUS)
    shadow: bool = field(default_factory=lambda: settings.DEFAULT_SHADOW)
    border: bool = field(default_factory=lambda: settings.DEFAULT_BORDER)
    hidden: bool = field(default_factory=lambda: settings.DEFAULT_HIDDEN)
    limit_rows: bool = field(default_factory=lambda: settings.DEFAULT_LIMIT_ROWS)

    def set_numeric(self, name: str, value: int) -> bool:
        """Assign a numeric field when in range; returns ``False`` and keeps the old value otherwise."""

        if name not in NUMERIC_BOUNDS:
            raise KeyError(name)
        if isinstance(value, bool) or not isinstance(value, int) or not within_bounds(name, value):
            return False
        setattr(self, name, value)
        return True

    def apply_preset(self, preset: SizePreset | str) -> None:
        """Overwrite size, gap and radius with a named preset."""

        self.size, self.gap, self.radius = PRESET_VALUES[SizePreset(preset)]

    def matching_preset(self) -> SizePreset | None:
        """Return the preset whose values match exactly, if any."""

        current = (self.size, self.gap, self.radius)
        for preset, values in PRESET_VALUES.items():
            if values == current:
                return preset
        return None

    def copy(self) -> StyleOptions:
        return replace(self)

    def changed_fields(self, other: StyleOptions) -> set[str]:
        """Return names of fields whose values differ from ``other``."""

        return {f.name for f in fields(self) if getattr(self, f.name) != getattr(other, f.name)}


__all__ = [
    "NUMERIC_BOUNDS",
    "PRESET_VALUES",
    "SizePreset",
    "StyleOptions",
    "within_bounds",
]
