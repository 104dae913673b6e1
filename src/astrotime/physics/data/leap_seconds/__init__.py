"""Bundled leap second table."""
