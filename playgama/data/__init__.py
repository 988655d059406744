"""Catalog documents bundled with the application."""
