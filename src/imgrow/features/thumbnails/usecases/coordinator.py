"""
Summary: Track cache keys whose thumbnail generation is currently running.
Why: At most one load-crop-encode-write sequence may run per key at a time.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class GenerationCoordinator:
    """In-flight bookkeeping owned by whoever owns the cache manager.

    Callers are expected to run on one event loop; ``try_begin`` and ``end``
    never suspend, so check-and-insert cannot interleave.
    """

    def __init__(self) -> None:
        self._in_flight: set[str] = set()

    def try_begin(self, key: str) -> bool:
        """Mark ``key`` in flight; returns ``False`` if it already was."""

        if key in self._in_flight:
            return False
        self._in_flight.add(key)
        return True

    def end(self, key: str) -> None:
        self._in_flight.discard(key)

    def is_active(self, key: str) -> bool:
        return key in self._in_flight

    def __len__(self) -> int:
        return len(self._in_flight)

    @contextmanager
    def claim(self, key: str) -> Iterator[bool]:
        """Yield whether ``key`` was claimed; a successful claim is always released."""

        acquired = self.try_begin(key)
        try:
            yield acquired
        finally:
            if acquired:
                self.end(key)


__all__ = ["GenerationCoordinator"]
