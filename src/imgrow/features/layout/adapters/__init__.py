"""Layout adapters."""

from .scheduler import AsyncioScheduler

__all__ = ["AsyncioScheduler"]
