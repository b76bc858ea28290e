"""Thumbnail domain records."""
