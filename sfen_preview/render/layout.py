"""
Diagram Layout
==============

Pure geometry: turns a ``Position`` into a ``Diagram``.

Canvas layout (C = cell size):

    +------+---------------------------+------+
    | ☖    |                           | ☗    |
    | GOTE |        9 x 9 board        | SENTE|
    | hand |                           | hand |
    +------+---------------------------+------+
      C              9 C                  C + 4

The board occupies columns 1..9; column 0 holds GOTE's hand and
column 10 SENTE's. Hand stacks grow downward in rows of 0.75 C and
make the canvas taller when they do not fit next to the board.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..core.pieces import Player
from ..core.board import BOARD_SIZE, Hand
from ..core.position import Position
from .instructions import (
    Diagram, DrawingInstruction, FilledRect, Glyph, Line, Tile, TileRef,
)


@dataclass(frozen=True)
class RenderOptions:
    """
    Rendering parameters.

    Every measurement is derived from ``cell_size``. ``font_size`` sets
    the board glyph size independently; it defaults to 0.75 of a cell.

    Attributes:
        cell_size: Side of one board square in pixels
        font_size: Board glyph size (None to derive from cell_size)
        text_color: Colour of lines and glyphs
        highlight_color: Fill of the side-to-move marker
        use_tiles: Emit board pieces as pre-rendered tiles
    """
    cell_size: float = 40.0
    font_size: Optional[float] = None
    text_color: str = "black"
    highlight_color: str = "#ffff0066"
    use_tiles: bool = False

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if self.font_size is not None and self.font_size <= 0:
            raise ValueError("font_size must be positive")

    @classmethod
    def from_font_size(cls, font_size: float, **kwargs) -> 'RenderOptions':
        """Options whose cell is sized to fit a board glyph of ``font_size``."""
        return cls(cell_size=font_size * 4 / 3, font_size=font_size, **kwargs)

    @property
    def board_font_size(self) -> float:
        if self.font_size is not None:
            return self.font_size
        return self.cell_size * 3 / 4

    @property
    def hand_height(self) -> float:
        return self.cell_size * 3 / 4

    @property
    def hand_font_size(self) -> float:
        return self.cell_size * 3 / 5

    @property
    def hand_x_adjust(self) -> float:
        return self.cell_size / 8

    @property
    def width(self) -> float:
        return self.cell_size * (BOARD_SIZE + 2) + 4

    @property
    def default_height(self) -> float:
        return self.cell_size * BOARD_SIZE + 1

    def hand_column_x(self, player: Player) -> float:
        """Horizontal centre of a player's hand column."""
        half = self.cell_size / 2
        if player == Player.SENTE:
            return (BOARD_SIZE + 1) * self.cell_size + half + self.hand_x_adjust
        return half - self.hand_x_adjust

    def highlight_x(self, player: Player) -> float:
        if player == Player.SENTE:
            return (BOARD_SIZE + 1) * self.cell_size + 2 * self.hand_x_adjust
        return 0.0


def _grid(options: RenderOptions) -> List[DrawingInstruction]:
    c = options.cell_size
    color = options.text_color
    lines: List[DrawingInstruction] = []
    for i in range(BOARD_SIZE + 1):
        lines.append(Line(c, i * c, (BOARD_SIZE + 1) * c, i * c, color))
        lines.append(Line((i + 1) * c, 0, (i + 1) * c, BOARD_SIZE * c, color))
    return lines


def _turn_highlight(turn: Player, options: RenderOptions) -> FilledRect:
    h = options.hand_height
    return FilledRect(options.highlight_x(turn), 0, h, h + 4, options.highlight_color)


def _board_pieces(position: Position, options: RenderOptions) -> List[DrawingInstruction]:
    c = options.cell_size
    items: List[DrawingInstruction] = []
    for square, piece in position.board.get_all_pieces():
        # GOTE pieces face the other way regardless of whose turn it is
        rotated = piece.owner == Player.GOTE
        left = (square.col + 1) * c
        top = square.row * c
        if options.use_tiles:
            ref = TileRef(
                piece_type=piece.piece_type,
                rotated180=rotated,
                size=c,
                font_size=options.board_font_size,
                color=options.text_color,
            )
            items.append(Tile(ref, left, top))
        else:
            items.append(Glyph(
                text=piece.piece_type.symbol,
                x=left + c / 2,
                y=top + c / 2,
                font_size=options.board_font_size,
                color=options.text_color,
                rotated180=rotated,
                piece_type=piece.piece_type,
            ))
    return items


def _hand_markers(options: RenderOptions) -> List[DrawingInstruction]:
    h = options.hand_height
    return [
        Glyph(player.mark, options.hand_column_x(player), h / 2 + 2, h, options.text_color)
        for player in (Player.GOTE, Player.SENTE)
    ]


def _hand_stack(hand: Hand, player: Player, options: RenderOptions) -> List[Glyph]:
    """One glyph per held kind, followed by its count when above one."""
    h = options.hand_height
    x = options.hand_column_x(player)
    size = options.hand_font_size
    glyphs: List[Glyph] = []
    for piece_type, count in hand.items():
        labels = [(piece_type.symbol, piece_type)]
        if count > 1:
            labels.append((str(count), None))
        for text, kind in labels:
            row = len(glyphs)
            glyphs.append(Glyph(text, x, (row + 1) * h + h / 2, size, options.text_color,
                                piece_type=kind))
    return glyphs


def stack_extent(rows: int, options: RenderOptions) -> float:
    """Canvas height needed for a hand stack of ``rows`` items."""
    return (rows + 2) * options.hand_height


def layout(position: Position, options: Optional[RenderOptions] = None) -> Diagram:
    """
    Lay out a position.

    Emission order is back to front: grid, turn highlight, board
    pieces, hand markers, hand stacks.
    """
    options = options or RenderOptions()

    instructions: List[DrawingInstruction] = []
    instructions.extend(_grid(options))
    instructions.append(_turn_highlight(position.turn, options))
    instructions.extend(_board_pieces(position, options))
    instructions.extend(_hand_markers(options))

    height = options.default_height
    for player in (Player.SENTE, Player.GOTE):
        stack = _hand_stack(position.hand(player), player, options)
        instructions.extend(stack)
        if stack:
            height = max(height, stack_extent(len(stack), options))

    return Diagram(options.width, height, tuple(instructions))
