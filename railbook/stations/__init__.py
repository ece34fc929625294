"""Station lookups."""
