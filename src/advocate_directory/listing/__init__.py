"""Listing engine: query parsing, conditions, adapters, fallback and assembly."""
