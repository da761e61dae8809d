"""Customer account statement service."""
