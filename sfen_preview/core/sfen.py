"""
SFEN Decoding and Encoding
==========================

SFEN record layout:

    <board> <turn> <hands> [<move-number>]

- board: 9 ranks separated by ``/``, rank 1 first, each rank from
  file 9 to file 1. Digits are runs of empty squares, letters are
  pieces (uppercase SENTE, lowercase GOTE), ``+`` marks promotion.
- turn: ``b`` (SENTE) or ``w`` (GOTE)
- hands: ``-`` or a sequence of ``[count]letter``

Parsing is structural only: unreachable positions (no kings, ten
rooks, ...) decode fine.

Each field is read through a ``_Cursor`` and failures are returned as
a ``ParseResult`` naming the field that failed. ``decode`` is the
raising wrapper used by the rest of the package.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .pieces import Piece, PieceType, Player, LETTER_TO_PIECE_TYPE
from .board import Board, Hand, BOARD_SIZE
from .position import Position
from .errors import MalformedSfenError


TURN_LETTERS = {"b": Player.SENTE, "w": Player.GOTE}

# SFEN convention for writing hands: most valuable first
SFEN_HAND_ORDER = (
    PieceType.ROOK, PieceType.BISHOP, PieceType.GOLD, PieceType.SILVER,
    PieceType.KNIGHT, PieceType.LANCE, PieceType.PAWN, PieceType.KING,
)


class _FieldError(Exception):
    """Internal failure signal carrying the failing field."""

    def __init__(self, field: str, reason: str):
        super().__init__(reason)
        self.field = field
        self.reason = reason


class _Cursor:
    """Character cursor over one SFEN field."""

    def __init__(self, text: str, field: str):
        self.text = text
        self.field = field
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if not self.at_end() else ""

    def take(self) -> str:
        ch = self.peek()
        self.pos += 1
        return ch

    def take_digits(self) -> str:
        start = self.pos
        while not self.at_end() and "0" <= self.peek() <= "9":
            self.pos += 1
        return self.text[start:self.pos]

    def fail(self, reason: str) -> _FieldError:
        return _FieldError(self.field, f"{reason} at offset {self.pos} of {self.text!r}")


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of ``parse_sfen``: either a position or a failure.

    Attributes:
        position: Decoded position on success
        field: Failing field on error ("board", "turn", "hands")
        reason: Failure description on error
    """
    position: Optional[Position] = None
    field: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.position is not None

    def unwrap(self) -> Position:
        if self.position is None:
            raise MalformedSfenError(self.field or "sfen", self.reason or "unknown error")
        return self.position


def _parse_piece_token(cursor: _Cursor) -> Piece:
    token = cursor.take()
    if token == "+":
        if cursor.at_end():
            raise cursor.fail("dangling '+'")
        token += cursor.take()
    try:
        return Piece.from_sfen(token)
    except ValueError as e:
        raise cursor.fail(str(e)) from e


def _parse_rank(text: str, rank: int) -> List[Optional[Piece]]:
    cursor = _Cursor(text, "board")
    row: List[Optional[Piece]] = []
    while not cursor.at_end():
        ch = cursor.peek()
        if "0" <= ch <= "9":
            cursor.take()
            if ch == "0":
                raise cursor.fail("empty run of 0 squares")
            row.extend([None] * int(ch))
        else:
            row.append(_parse_piece_token(cursor))
        if len(row) > BOARD_SIZE:
            raise cursor.fail(f"rank {rank} has more than {BOARD_SIZE} files")
    if len(row) != BOARD_SIZE:
        raise _FieldError("board", f"rank {rank} has {len(row)} files instead of {BOARD_SIZE}")
    return row


def _parse_board(text: str) -> Board:
    ranks = text.split("/")
    if len(ranks) != BOARD_SIZE:
        raise _FieldError("board", f"expected {BOARD_SIZE} ranks, got {len(ranks)}")
    return Board.from_rows([_parse_rank(rank_text, i + 1) for i, rank_text in enumerate(ranks)])


def _parse_turn(text: str) -> Player:
    if text not in TURN_LETTERS:
        raise _FieldError("turn", f"expected 'b' or 'w', got {text!r}")
    return TURN_LETTERS[text]


def _parse_hands(text: str) -> Dict[Player, Hand]:
    if text == "-":
        return {Player.SENTE: Hand(), Player.GOTE: Hand()}

    counts: Dict[Player, Dict[PieceType, int]] = {Player.SENTE: {}, Player.GOTE: {}}
    cursor = _Cursor(text, "hands")
    while not cursor.at_end():
        digits = cursor.take_digits()
        if digits.startswith("0"):
            raise cursor.fail(f"invalid count {digits!r}")
        count = int(digits) if digits else 1
        if cursor.at_end():
            raise cursor.fail("count without a piece")
        letter = cursor.take()
        if letter == "+":
            raise cursor.fail("promoted piece in hand")
        piece_type = LETTER_TO_PIECE_TYPE.get(letter.upper()) if letter.isascii() else None
        if piece_type is None:
            raise cursor.fail(f"unknown piece letter {letter!r}")
        owner = Player.SENTE if letter.isupper() else Player.GOTE
        counts[owner][piece_type] = counts[owner].get(piece_type, 0) + count

    return {player: Hand.from_counts(held) for player, held in counts.items()}


def parse_sfen(sfen: str) -> ParseResult:
    """
    Parse an SFEN record without raising on malformed input.

    Fields after the hands (move number, trailing text) are ignored.
    """
    fields = sfen.split()
    try:
        if not fields:
            raise _FieldError("board", "missing field")
        board = _parse_board(fields[0])
        if len(fields) < 2:
            raise _FieldError("turn", "missing field")
        turn = _parse_turn(fields[1])
        if len(fields) < 3:
            raise _FieldError("hands", "missing field")
        hands = _parse_hands(fields[2])
    except _FieldError as e:
        return ParseResult(field=e.field, reason=e.reason)

    return ParseResult(position=Position(
        board=board,
        sente_hand=hands[Player.SENTE],
        gote_hand=hands[Player.GOTE],
        turn=turn,
    ))


def decode(sfen: str) -> Position:
    """
    Decode an SFEN record into a ``Position``.

    Raises:
        MalformedSfenError: If the board, turn or hands field is malformed.
    """
    return parse_sfen(sfen).unwrap()


def _encode_board(board: Board) -> str:
    ranks = []
    for row in board.grid:
        rank = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                rank += str(empty)
                empty = 0
            rank += piece.sfen
        if empty:
            rank += str(empty)
        ranks.append(rank)
    return "/".join(ranks)


def _encode_hands(position: Position) -> str:
    parts = []
    for player in (Player.SENTE, Player.GOTE):
        hand = position.hand(player)
        for piece_type in SFEN_HAND_ORDER:
            count = hand.count(piece_type)
            if count == 0:
                continue
            letter = piece_type.sfen_letter
            if player == Player.GOTE:
                letter = letter.lower()
            parts.append((str(count) if count > 1 else "") + letter)
    return "".join(parts) or "-"


def encode(position: Position, move_number: Optional[int] = None) -> str:
    """Write a position back to SFEN."""
    turn = "b" if position.turn == Player.SENTE else "w"
    fields = [_encode_board(position.board), turn, _encode_hands(position)]
    if move_number is not None:
        fields.append(str(move_number))
    return " ".join(fields)
