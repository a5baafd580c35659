"""Complexity Analyzer web backend."""

__version__ = "3.0.0"
