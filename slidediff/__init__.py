"""Slide-level diffing for markdown presentations."""

__version__ = "0.1.0"
