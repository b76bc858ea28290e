"""Application layer wiring features into host-facing services."""
