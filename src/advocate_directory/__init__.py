"""Advocate directory: paginated, filtered advocate listings with a static fallback."""

__version__ = "0.3.0"
