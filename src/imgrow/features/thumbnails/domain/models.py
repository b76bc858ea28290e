"""Where: features/thumbnails/domain/models.py
What: Resource handles, structured cache events and the generation error type.
Why: Share vocabulary between the cache manager, adapters and log rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class Resource:
    """Handle to a stored file, addressed by its store-relative POSIX path."""

    path: str

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def suffix(self) -> str:
        name = self.name
        return name[name.rfind(".") :].lower() if "." in name else ""


class CacheEvent(StrEnum):
    """Structured event identifiers for thumbnail cache logs."""

    HIT = "thumbnail.hit"
    IN_FLIGHT = "thumbnail.inflight"
    GENERATE_START = "thumbnail.generate.start"
    GENERATE_SUCCESS = "thumbnail.generate.success"
    GENERATE_ERROR = "thumbnail.generate.error"
    DESTINATION_RACE = "thumbnail.race"


class GenerationStage(StrEnum):
    READ = "read"
    DECODE = "decode"
    CROP = "crop"
    ENCODE = "encode"
    WRITE = "write"


class ThumbnailGenerationError(RuntimeError):
    """Raised inside the cache manager when a generation step fails."""

    def __init__(self, stage: GenerationStage, cause: BaseException | str) -> None:
        if isinstance(cause, BaseException):
            reason = str(cause) or type(cause).__name__
        else:
            reason = cause
        super().__init__(f"Thumbnail {stage.value} failed: {reason}")
        self.stage: GenerationStage = stage
        self.reason: str = reason


__all__ = [
    "CacheEvent",
    "GenerationStage",
    "Resource",
    "ThumbnailGenerationError",
]
