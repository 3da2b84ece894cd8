"""
Board Module
============

Immutable 9x9 board and per-player hands.

Coordinates:
- ``row`` 0 is rank 1 (top of the diagram), ``row`` 8 is rank 9
- ``col`` 0 is file 9 (left of the diagram), ``col`` 8 is file 1

This matches SFEN, which lists each rank starting from file 9.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Tuple
import numpy as np

from .pieces import Piece, PieceType, Player, HAND_ORDER


# Board dimensions for standard shogi
BOARD_SIZE = 9


@dataclass(frozen=True)
class Square:
    """Represents a single square on the board."""
    row: int
    col: int

    def is_valid(self) -> bool:
        """Check if square is within board bounds."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def file(self) -> int:
        return BOARD_SIZE - self.col

    @property
    def rank(self) -> int:
        return self.row + 1

    @classmethod
    def from_file_rank(cls, file: int, rank: int) -> 'Square':
        return cls(rank - 1, BOARD_SIZE - file)


Grid = Tuple[Tuple[Optional[Piece], ...], ...]


def _empty_grid() -> Grid:
    return tuple(tuple(None for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


@dataclass(frozen=True)
class Board:
    """
    Piece placement of a position.

    Attributes:
        grid: 9x9 tuple of pieces (None for empty squares), ``grid[row][col]``
    """
    grid: Grid = field(default_factory=_empty_grid)

    def __post_init__(self):
        if len(self.grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.grid):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        # Normalise nested lists into tuples so the board stays hashable
        object.__setattr__(self, "grid", tuple(tuple(row) for row in self.grid))

    @classmethod
    def from_rows(cls, rows: List[List[Optional[Piece]]]) -> 'Board':
        return cls(grid=tuple(tuple(row) for row in rows))

    def get_piece(self, square: Square) -> Optional[Piece]:
        """Get piece at a square."""
        if square.is_valid():
            return self.grid[square.row][square.col]
        return None

    def get_all_pieces(self, player: Optional[Player] = None) -> List[Tuple[Square, Piece]]:
        """Get all pieces on board, optionally filtered by player."""
        pieces = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self.grid[row][col]
                if piece and (player is None or piece.owner == player):
                    pieces.append((Square(row, col), piece))
        return pieces

    def to_array(self) -> np.ndarray:
        """
        Signed piece-code matrix.

        Each cell holds the 1-based ``PieceType`` ordinal, positive for
        SENTE and negative for GOTE; empty squares are 0.
        """
        array = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for square, piece in self.get_all_pieces():
            code = piece.piece_type.value
            array[square.row, square.col] = code if piece.owner == Player.SENTE else -code
        return array

    def piece_count(self, player: Optional[Player] = None) -> int:
        """Count occupied squares."""
        array = self.to_array()
        if player is None:
            return int(np.count_nonzero(array))
        if player == Player.SENTE:
            return int(np.count_nonzero(array > 0))
        return int(np.count_nonzero(array < 0))

    def __repr__(self) -> str:
        """ASCII representation of the board."""
        lines = ["  " + "   ".join(str(BOARD_SIZE - c) for c in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            row_str = f"{row + 1} "
            for col in range(BOARD_SIZE):
                piece = self.grid[row][col]
                if piece:
                    row_str += repr(piece) + " "
                else:
                    row_str += " ·  "
            lines.append(row_str)
        return "\n".join(lines)


@dataclass(frozen=True)
class Hand:
    """
    Captured pieces held by one player.

    Counts are stored positionally over ``HAND_ORDER``. Promoted kinds
    never appear in hand.
    """
    counts: Tuple[int, ...] = (0,) * len(HAND_ORDER)

    def __post_init__(self):
        if len(self.counts) != len(HAND_ORDER):
            raise ValueError(f"hand needs {len(HAND_ORDER)} counts")
        if any(count < 0 for count in self.counts):
            raise ValueError("hand counts must be non-negative")
        object.__setattr__(self, "counts", tuple(int(count) for count in self.counts))

    @classmethod
    def from_counts(cls, counts: Mapping[PieceType, int]) -> 'Hand':
        for piece_type in counts:
            if piece_type not in HAND_ORDER:
                raise ValueError(f"{piece_type.name} cannot be held in hand")
        return cls(tuple(counts.get(piece_type, 0) for piece_type in HAND_ORDER))

    def count(self, piece_type: PieceType) -> int:
        if piece_type not in HAND_ORDER:
            return 0
        return self.counts[HAND_ORDER.index(piece_type)]

    def items(self) -> Iterator[Tuple[PieceType, int]]:
        """Yield (kind, count) for held kinds in canonical order."""
        for piece_type, count in zip(HAND_ORDER, self.counts):
            if count > 0:
                yield piece_type, count

    def to_dict(self) -> Dict[PieceType, int]:
        return dict(self.items())

    def total(self) -> int:
        return sum(self.counts)

    def is_empty(self) -> bool:
        return self.total() == 0

    def __repr__(self) -> str:
        if self.is_empty():
            return "なし"
        return " ".join(
            piece_type.symbol + (str(count) if count > 1 else "")
            for piece_type, count in self.items()
        )
