"""Static exercise and template catalogs.

Loaded once per process from bundled YAML data and exposed read-only.
"""
