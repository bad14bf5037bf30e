"""Procedural texture drawing on a grid field, shown live in a pygame window."""

__version__ = "0.1.0"