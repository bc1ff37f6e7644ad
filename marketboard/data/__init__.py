"""Bundled card catalogs."""
