# Path: `src/imgrow/features/thumbnails/__init__.py`
# Summary: Export thumbnail cache domain, ports and use cases.
# Why: Provide a stable import surface for services, adapters and tests.

from .adapters import LocalContentStore
from .domain.models import CacheEvent, GenerationStage, Resource, ThumbnailGenerationError
from .usecases.cache_manager import PASSTHROUGH_SUFFIXES, ThumbnailCacheManager
from .usecases.coordinator import GenerationCoordinator
from .usecases.ports import ContentStorePort
from .usecases.rendering import center_square_box, render_thumbnail

__all__ = [
    "CacheEvent",
    "ContentStorePort",
    "GenerationCoordinator",
    "GenerationStage",
    "LocalContentStore",
    "PASSTHROUGH_SUFFIXES",
    "Resource",
    "ThumbnailCacheManager",
    "ThumbnailGenerationError",
    "center_square_box",
    "render_thumbnail",
]
