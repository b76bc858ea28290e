"""Thumbnail use cases: coordination, rendering and the cache manager."""
