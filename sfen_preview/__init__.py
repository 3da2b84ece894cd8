"""
SFEN Preview - Shogi Diagrams from SFEN Text
============================================

Finds an SFEN record in arbitrary text, decodes the shogi position it
describes and renders it as an SVG or PNG diagram, e.g. for an
editor hover.

Pipeline:
---------
1. locate: pick the SFEN record out of free text
2. decode: SFEN -> Position (board, both hands, side to move)
3. layout: Position -> Diagram (canvas size + drawing instructions)
4. render: Diagram -> bytes through an SVG or raster backend

Usage:
------
    from sfen_preview import SfenPreviewer, PreviewConfig
    from sfen_preview.render import RasterBackend

    previewer = SfenPreviewer(PreviewConfig(font_size=24), RasterBackend())
    preview = previewer.render("position sfen lnsgkgsnl/1r5b1/ppppppppp/9/9/9/"
                               "PPPPPPPPP/1B5R1/LNSGKGSNL b - 1")
    if preview is not None:
        print(preview.markdown())

License: MIT
"""

__version__ = "1.0.0"

from sfen_preview.core.pieces import Piece, PieceType, Player
from sfen_preview.core.board import Board, Hand, Square
from sfen_preview.core.position import Position
from sfen_preview.core.errors import SfenError, SfenNotFoundError, MalformedSfenError
from sfen_preview.core.locator import locate
from sfen_preview.core.sfen import decode, parse_sfen
from sfen_preview.render.layout import RenderOptions, layout
from sfen_preview.config import PreviewConfig
from sfen_preview.preview import Preview, SfenPreviewer, render_sfen_preview

__all__ = [
    "Piece",
    "PieceType",
    "Player",
    "Board",
    "Hand",
    "Square",
    "Position",
    "SfenError",
    "SfenNotFoundError",
    "MalformedSfenError",
    "locate",
    "decode",
    "parse_sfen",
    "RenderOptions",
    "layout",
    "PreviewConfig",
    "Preview",
    "SfenPreviewer",
    "render_sfen_preview",
]
