"""
Core components: pieces, board, positions and SFEN handling.
"""

from .pieces import Piece, PieceType, Player, HAND_ORDER, PIECE_SYMBOLS
from .board import Board, Hand, Square, BOARD_SIZE
from .position import Position, create_initial_position
from .errors import SfenError, SfenNotFoundError, MalformedSfenError
from .locator import find_sfen, locate, hover_text
from .sfen import ParseResult, parse_sfen, decode, encode

__all__ = [
    "Piece", "PieceType", "Player", "HAND_ORDER", "PIECE_SYMBOLS",
    "Board", "Hand", "Square", "BOARD_SIZE",
    "Position", "create_initial_position",
    "SfenError", "SfenNotFoundError", "MalformedSfenError",
    "find_sfen", "locate", "hover_text",
    "ParseResult", "parse_sfen", "decode", "encode",
]
