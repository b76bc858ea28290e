"""
Summary: Derive fixed-length, filesystem-safe cache keys from resource identifiers.
Why: Let cache hits be detected by re-deriving the key instead of keeping a manifest.
"""

from __future__ import annotations

import hashlib


def content_hash(text: str) -> str:
    """Return the 32-character hex MD5 digest of ``text`` encoded as UTF-8."""

    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def thumbnail_key(original_path: str) -> str:
    """Return the cache key for an original image path.

    The key depends on the path only. Replacing the file at the same path
    keeps serving the old derivative until it is deleted.
    """

    return content_hash(original_path)


__all__ = ["content_hash", "thumbnail_key"]
