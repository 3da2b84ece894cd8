"""
Diagram layout and rendering backends.

Available Backends:
- SvgBackend: SVG document text
- RasterBackend: PNG composited from cached glyph tiles (Pillow)
"""

from .instructions import (
    Line, Glyph, FilledRect, Tile, TileRef, Diagram, DrawingInstruction,
)
from .layout import RenderOptions, layout
from .backend import RenderBackend
from .svg import SvgBackend
from .raster import RasterBackend, GlyphTileCache

__all__ = [
    "Line", "Glyph", "FilledRect", "Tile", "TileRef", "Diagram", "DrawingInstruction",
    "RenderOptions", "layout",
    "RenderBackend", "SvgBackend", "RasterBackend", "GlyphTileCache",
]
