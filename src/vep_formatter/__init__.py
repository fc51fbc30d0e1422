"""Render annotated variant records as VEP-format tab-delimited text."""

__version__ = "0.1.0"
