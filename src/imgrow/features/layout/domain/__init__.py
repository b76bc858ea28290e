"""Layout domain: pure row grouping."""
