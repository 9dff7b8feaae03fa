"""Normalize SVG icon shapes into path data on a 24x24 viewBox."""

__version__ = "0.1.0"
