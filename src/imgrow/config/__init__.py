"""Configuration package: TOML-backed settings and path discovery."""
