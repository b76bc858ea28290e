"""imgrow: image row galleries for Markdown documents."""

__version__ = "0.1.0"
