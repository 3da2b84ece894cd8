"""
Position Module
===============

A decoded shogi position: board, both hands and the side to move.
Positions are immutable and carry no history.
"""

from dataclasses import dataclass, field
from typing import Optional

from .pieces import Piece, PieceType, Player
from .board import Board, Hand, BOARD_SIZE


@dataclass(frozen=True)
class Position:
    """
    Snapshot of a game as described by one SFEN record.

    Attributes:
        board: Piece placement
        sente_hand: Captured pieces available for SENTE to drop
        gote_hand: Captured pieces available for GOTE to drop
        turn: The player to move
    """
    board: Board = field(default_factory=Board)
    sente_hand: Hand = field(default_factory=Hand)
    gote_hand: Hand = field(default_factory=Hand)
    turn: Player = Player.SENTE

    def hand(self, player: Player) -> Hand:
        """Get the hand (captured pieces) for a player."""
        return self.sente_hand if player == Player.SENTE else self.gote_hand

    def to_sfen(self, move_number: Optional[int] = None) -> str:
        from .sfen import encode
        return encode(self, move_number)

    def __repr__(self) -> str:
        return "\n".join([
            repr(self.board),
            f"SENTE hand: {self.sente_hand!r}",
            f"GOTE hand: {self.gote_hand!r}",
            f"Turn: {self.turn.name}",
        ])


def create_initial_position() -> Position:
    """
    Create the standard shogi starting position.

    Layout (rank 1 at the top):
    Rank 1: GOTE's back rank (L N S G K G S N L)
    Rank 2: GOTE's rook (file 8) and bishop (file 2)
    Rank 3: GOTE's pawns
    Rank 7: SENTE's pawns
    Rank 8: SENTE's bishop (file 8) and rook (file 2)
    Rank 9: SENTE's back rank
    """
    back_rank = [
        PieceType.LANCE, PieceType.KNIGHT, PieceType.SILVER, PieceType.GOLD,
        PieceType.KING,
        PieceType.GOLD, PieceType.SILVER, PieceType.KNIGHT, PieceType.LANCE,
    ]
    rows = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    for col, ptype in enumerate(back_rank):
        rows[0][col] = Piece(ptype, Player.GOTE)
        rows[8][col] = Piece(ptype, Player.SENTE)

    for col in range(BOARD_SIZE):
        rows[2][col] = Piece(PieceType.PAWN, Player.GOTE)
        rows[6][col] = Piece(PieceType.PAWN, Player.SENTE)

    # Files are counted from the right: col 1 is file 8, col 7 is file 2
    rows[1][1] = Piece(PieceType.ROOK, Player.GOTE)
    rows[1][7] = Piece(PieceType.BISHOP, Player.GOTE)
    rows[7][1] = Piece(PieceType.BISHOP, Player.SENTE)
    rows[7][7] = Piece(PieceType.ROOK, Player.SENTE)

    return Position(board=Board.from_rows(rows), turn=Player.SENTE)
