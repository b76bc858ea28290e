"""Directive domain records."""
