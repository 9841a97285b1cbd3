"""Shade sail measurement geometry and validation engine."""

__version__ = "0.1.0"
