"""Synthetic sales input files: generator and consistency-checking loader."""

__version__ = "0.1.0"
