"""Directive use cases: codec, reference parsing and block discovery."""
