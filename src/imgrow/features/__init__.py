"""Feature packages: directive codec, thumbnail cache, row layout, rename propagation."""
