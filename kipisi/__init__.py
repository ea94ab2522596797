"""Sitelen pona glyphs from an 8x8 sprite sheet, drawn with pygame in a scaled window."""

__version__ = "0.1.0"