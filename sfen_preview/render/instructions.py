"""
Drawing instructions produced by the layout and consumed by backends.

Coordinates are canvas pixels with the origin at the top-left corner.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..core.pieces import PieceType


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str


@dataclass(frozen=True)
class Glyph:
    """
    Text centred on ``(x, y)``.

    ``rotated180`` turns the glyph upside down about that same centre.
    ``piece_type`` is set when the glyph depicts a piece.
    """
    text: str
    x: float
    y: float
    font_size: float
    color: str
    rotated180: bool = False
    piece_type: Optional[PieceType] = None


@dataclass(frozen=True)
class FilledRect:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class TileRef:
    """Identity of a pre-rendered piece image."""
    piece_type: PieceType
    rotated180: bool
    size: float
    font_size: float
    color: str

    def as_glyph(self, x: float, y: float) -> Glyph:
        """The glyph this tile depicts when its top-left is at (x, y)."""
        half = self.size / 2
        return Glyph(
            text=self.piece_type.symbol,
            x=x + half,
            y=y + half,
            font_size=self.font_size,
            color=self.color,
            rotated180=self.rotated180,
            piece_type=self.piece_type,
        )


@dataclass(frozen=True)
class Tile:
    """Pre-rendered image placed with its top-left corner at ``(x, y)``."""
    image_ref: TileRef
    x: float
    y: float


DrawingInstruction = Union[Line, Glyph, FilledRect, Tile]


@dataclass(frozen=True)
class Diagram:
    """
    Laid-out position ready for a backend.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        instructions: Drawing instructions in back-to-front order
    """
    width: float
    height: float
    instructions: Tuple[DrawingInstruction, ...]

    def of_type(self, kind: type) -> Tuple[DrawingInstruction, ...]:
        return tuple(i for i in self.instructions if isinstance(i, kind))
