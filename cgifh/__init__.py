"""Palette-indexed bitmaps with drawing primitives and a small bitmap font."""

__version__ = "0.0.1"
__all__ = ["font", "image"]