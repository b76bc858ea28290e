"""Application services for gallery sessions and thumbnail runs."""

from .gallery_service import GalleryItem, GallerySession, OptionChanges
from .ports import DocumentStorePort
from .thumbnail_service import (
    ThumbnailOutcome,
    ThumbnailReport,
    ThumbnailResult,
    ThumbnailService,
    ThumbnailServiceRequest,
)

__all__ = [
    "DocumentStorePort",
    "GalleryItem",
    "GallerySession",
    "OptionChanges",
    "ThumbnailOutcome",
    "ThumbnailReport",
    "ThumbnailResult",
    "ThumbnailService",
    "ThumbnailServiceRequest",
]
