"""
Raster backend: composites the diagram into a PNG with Pillow.

Board pieces arrive as ``Tile`` instructions when the layout is run
with ``use_tiles``. Each distinct tile (piece kind, orientation and
style) is rendered once by a ``GlyphTileCache`` and then composited
wherever it is needed, across every later render call.
"""

import io
import logging
import math
import threading
from typing import Dict, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .backend import RenderBackend
from .instructions import Diagram, FilledRect, Glyph, Line, Tile, TileRef

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


class FontSource:
    """
    Fonts by pixel size.

    Uses the TrueType font at ``font_path`` when given, otherwise
    Pillow's bundled default font. Piece glyphs need a font with CJK
    coverage to render legibly.
    """

    def __init__(self, font_path: Optional[str] = None):
        self.font_path = font_path
        self._fonts: Dict[int, ImageFont.ImageFont] = {}
        self._lock = threading.Lock()

    def get(self, size: float):
        pixels = max(1, int(round(size)))
        with self._lock:
            font = self._fonts.get(pixels)
            if font is None:
                if self.font_path:
                    font = ImageFont.truetype(self.font_path, pixels)
                else:
                    font = ImageFont.load_default(size=pixels)
                self._fonts[pixels] = font
        return font


def glyph_patch(text: str, font, color: str, rotated180: bool = False) -> Image.Image:
    """Render ``text`` tightly cropped to its ink bounding box."""
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(math.ceil(right - left)))
    height = max(1, int(math.ceil(bottom - top)))
    patch = Image.new("RGBA", (width, height), TRANSPARENT)
    ImageDraw.Draw(patch).text((-left, -top), text, font=font, fill=color)
    if rotated180:
        # 180 degrees about the patch centre is the visual centre of the glyph
        patch = patch.rotate(180)
    return patch


def composite(canvas: Image.Image, patch: Image.Image, left: int, top: int) -> None:
    """Alpha-composite ``patch`` onto ``canvas``, clipping at the top-left edges."""
    crop_left, crop_top = max(0, -left), max(0, -top)
    if crop_left >= patch.width or crop_top >= patch.height:
        return
    if crop_left or crop_top:
        patch = patch.crop((crop_left, crop_top, patch.width, patch.height))
    canvas.alpha_composite(patch, dest=(left + crop_left, top + crop_top))


class GlyphTileCache:
    """
    Pre-rendered piece tiles keyed by ``TileRef``.

    Each tile is built at most once; builds are serialised by a lock and
    finished tiles are only ever read afterwards.
    """

    def __init__(self, fonts: FontSource):
        self.fonts = fonts
        self._tiles: Dict[TileRef, Image.Image] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, ref: TileRef) -> bool:
        return ref in self._tiles

    def get(self, ref: TileRef) -> Image.Image:
        tile = self._tiles.get(ref)
        if tile is not None:
            return tile
        with self._lock:
            tile = self._tiles.get(ref)
            if tile is None:
                tile = self._build(ref)
                self._tiles[ref] = tile
                logger.debug("built tile %s rotated=%s size=%s",
                             ref.piece_type.name, ref.rotated180, tile.size)
        return tile

    def _build(self, ref: TileRef) -> Image.Image:
        side = max(1, int(math.ceil(ref.size)))
        tile = Image.new("RGBA", (side, side), TRANSPARENT)
        patch = glyph_patch(ref.piece_type.symbol, self.fonts.get(ref.font_size), ref.color)
        composite(tile, patch, int(round((side - patch.width) / 2)),
                  int(round((side - patch.height) / 2)))
        if ref.rotated180:
            tile = tile.rotate(180)
        return tile


class RasterBackend(RenderBackend):
    """Bitmap backend producing ``image/png``."""

    mime_type = "image/png"
    prefers_tiles = True

    def __init__(self, font_path: Optional[str] = None):
        self.fonts = FontSource(font_path)
        self.tiles = GlyphTileCache(self.fonts)

    @staticmethod
    def canvas_size(diagram: Diagram) -> Tuple[int, int]:
        return int(math.ceil(diagram.width)), int(math.ceil(diagram.height))

    def draw(self, diagram: Diagram) -> Image.Image:
        canvas = Image.new("RGBA", self.canvas_size(diagram), TRANSPARENT)
        for instruction in diagram.instructions:
            if isinstance(instruction, Line):
                ImageDraw.Draw(canvas).line(
                    [(instruction.x1, instruction.y1), (instruction.x2, instruction.y2)],
                    fill=instruction.color, width=1,
                )
            elif isinstance(instruction, FilledRect):
                # Drawn on an overlay so translucent fills blend with what is below
                overlay = Image.new("RGBA", canvas.size, TRANSPARENT)
                ImageDraw.Draw(overlay).rectangle(
                    [instruction.x, instruction.y,
                     instruction.x + instruction.width, instruction.y + instruction.height],
                    fill=instruction.color,
                )
                canvas = Image.alpha_composite(canvas, overlay)
            elif isinstance(instruction, Glyph):
                self._draw_glyph(canvas, instruction)
            elif isinstance(instruction, Tile):
                tile = self.tiles.get(instruction.image_ref)
                composite(canvas, tile, int(round(instruction.x)), int(round(instruction.y)))
            else:
                raise TypeError(f"unsupported instruction {instruction!r}")
        return canvas

    def _draw_glyph(self, canvas: Image.Image, glyph: Glyph) -> None:
        patch = glyph_patch(glyph.text, self.fonts.get(glyph.font_size),
                            glyph.color, glyph.rotated180)
        composite(canvas, patch, int(round(glyph.x - patch.width / 2)),
                  int(round(glyph.y - patch.height / 2)))

    def render_array(self, diagram: Diagram) -> np.ndarray:
        """The rendered canvas as a (height, width, 4) uint8 array."""
        return np.array(self.draw(diagram), dtype=np.uint8)

    def render(self, diagram: Diagram) -> bytes:
        buffer = io.BytesIO()
        self.draw(diagram).save(buffer, format="PNG")
        return buffer.getvalue()
