"""Train management endpoints and lookups."""
