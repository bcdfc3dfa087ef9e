"""Colours, map extents, rubber-band selection, render styles, text serialization and overlays for GIS map viewers."""

__version__ = "1.0.0"
__all__ = ["colour", "realrect", "rubberband", "serialize", "render", "coltop", "c2p", "overlay"]