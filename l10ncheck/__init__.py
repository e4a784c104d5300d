"""Detect unused message identifiers in Fluent translation catalogs."""

__version__ = "0.1.0"
