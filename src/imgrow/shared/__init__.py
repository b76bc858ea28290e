"""Shared helpers without feature dependencies."""

from .hashing import content_hash, thumbnail_key

__all__ = ["content_hash", "thumbnail_key"]
