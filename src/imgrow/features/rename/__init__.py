"""Rename propagation for image references in gallery blocks."""

from .propagation import IMAGE_PATH_RE, is_image_path, propagate_rename, replace_reference_paths

__all__ = ["IMAGE_PATH_RE", "is_image_path", "propagate_rename", "replace_reference_paths"]
