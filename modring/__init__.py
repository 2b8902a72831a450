"""Animated ring diagrams for modular arithmetic."""

__version__ = "0.1.0"
