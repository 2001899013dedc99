"""Internal packages - HTTP API layer."""
