"""
Shogi Pieces Module
===================

Defines players, piece types and the fixed lookup tables that connect
them to SFEN letters and display glyphs.

All tables are read-only mappings keyed by the closed ``PieceType``
enum; nothing here can be extended at runtime.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class Player(Enum):
    """Two sides of a shogi game."""
    SENTE = auto()  # First player (Black in Western terms)
    GOTE = auto()   # Second player (White in Western terms)

    def opponent(self) -> 'Player':
        return Player.GOTE if self == Player.SENTE else Player.SENTE

    @property
    def mark(self) -> str:
        """Hand marker shown next to the player's captured pieces."""
        return "☗" if self == Player.SENTE else "☖"

    def __repr__(self) -> str:
        return self.mark


class PieceType(Enum):
    """
    The 14 shogi piece kinds.

    Eight basic kinds plus the six promoted forms. King and Gold never
    promote.
    """
    PAWN = auto()             # Fu
    LANCE = auto()            # Kyosha
    KNIGHT = auto()           # Keima
    SILVER = auto()           # Gin
    GOLD = auto()             # Kin
    BISHOP = auto()           # Kaku
    ROOK = auto()             # Hisha
    KING = auto()             # Gyoku/Ou

    # Promoted pieces
    TOKIN = auto()            # Promoted Pawn
    PROMOTED_LANCE = auto()   # Narikyo
    PROMOTED_KNIGHT = auto()  # Narikei
    PROMOTED_SILVER = auto()  # Narigin
    PROMOTED_BISHOP = auto()  # Uma
    PROMOTED_ROOK = auto()    # Ryu

    def can_promote(self) -> bool:
        """Check if this piece type can promote."""
        return self in _PROMOTIONS

    def promoted_form(self) -> Optional['PieceType']:
        """Get the promoted form of this piece."""
        return _PROMOTIONS.get(self)

    def demoted_form(self) -> 'PieceType':
        """Get the unpromoted form (for captured pieces)."""
        return _DEMOTIONS.get(self, self)

    def is_promoted(self) -> bool:
        return self in _DEMOTIONS

    @property
    def symbol(self) -> str:
        """Japanese character representation."""
        return PIECE_SYMBOLS[self]

    @property
    def sfen_letter(self) -> str:
        """Uppercase SFEN letter of the unpromoted form."""
        return SFEN_LETTERS[self.demoted_form()]


_PROMOTIONS: Mapping[PieceType, PieceType] = MappingProxyType({
    PieceType.PAWN: PieceType.TOKIN,
    PieceType.LANCE: PieceType.PROMOTED_LANCE,
    PieceType.KNIGHT: PieceType.PROMOTED_KNIGHT,
    PieceType.SILVER: PieceType.PROMOTED_SILVER,
    PieceType.BISHOP: PieceType.PROMOTED_BISHOP,
    PieceType.ROOK: PieceType.PROMOTED_ROOK,
})

_DEMOTIONS: Mapping[PieceType, PieceType] = MappingProxyType(
    {promoted: base for base, promoted in _PROMOTIONS.items()}
)

PIECE_SYMBOLS: Mapping[PieceType, str] = MappingProxyType({
    PieceType.PAWN: "歩",
    PieceType.LANCE: "香",
    PieceType.KNIGHT: "桂",
    PieceType.SILVER: "銀",
    PieceType.GOLD: "金",
    PieceType.BISHOP: "角",
    PieceType.ROOK: "飛",
    PieceType.KING: "玉",
    PieceType.TOKIN: "と",
    PieceType.PROMOTED_LANCE: "杏",
    PieceType.PROMOTED_KNIGHT: "圭",
    PieceType.PROMOTED_SILVER: "全",
    PieceType.PROMOTED_BISHOP: "馬",
    PieceType.PROMOTED_ROOK: "龍",
})

SFEN_LETTERS: Mapping[PieceType, str] = MappingProxyType({
    PieceType.PAWN: "P",
    PieceType.LANCE: "L",
    PieceType.KNIGHT: "N",
    PieceType.SILVER: "S",
    PieceType.GOLD: "G",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.KING: "K",
})

LETTER_TO_PIECE_TYPE: Mapping[str, PieceType] = MappingProxyType(
    {letter: piece_type for piece_type, letter in SFEN_LETTERS.items()}
)

# Order in which hand pieces are stacked in a diagram
HAND_ORDER: Tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.LANCE,
    PieceType.KNIGHT,
    PieceType.SILVER,
    PieceType.GOLD,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.KING,
)


@dataclass(frozen=True)
class Piece:
    """
    Immutable piece representation.

    Attributes:
        piece_type: The type of piece
        owner: The player who owns this piece
    """
    piece_type: PieceType
    owner: Player

    def __repr__(self) -> str:
        owner_mark = "+" if self.owner == Player.SENTE else "-"
        return f"{owner_mark}{self.piece_type.symbol}"

    @property
    def sfen(self) -> str:
        """SFEN token, e.g. ``P``, ``+r``."""
        letter = self.piece_type.sfen_letter
        if self.owner == Player.GOTE:
            letter = letter.lower()
        return "+" + letter if self.piece_type.is_promoted() else letter

    @classmethod
    def from_sfen(cls, token: str) -> 'Piece':
        """
        Build a piece from a one or two character SFEN token.

        Raises:
            ValueError: If the token does not name a piece.
        """
        promoted = token.startswith("+")
        letter = token[1:] if promoted else token
        piece_type = None
        if len(letter) == 1 and letter.isascii():
            piece_type = LETTER_TO_PIECE_TYPE.get(letter.upper())
        if piece_type is None:
            raise ValueError(f"unknown piece letter {token!r}")
        if promoted:
            if not piece_type.can_promote():
                raise ValueError(f"piece {letter!r} cannot be promoted")
            piece_type = piece_type.promoted_form()
        owner = Player.SENTE if letter.isupper() else Player.GOTE
        return cls(piece_type, owner)
