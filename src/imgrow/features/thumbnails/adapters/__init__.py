"""Thumbnail adapters."""

from .local_store import LocalContentStore

__all__ = ["LocalContentStore"]
