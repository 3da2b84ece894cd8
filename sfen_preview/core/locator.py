"""
Finding SFEN in free text.

The locator only checks shape: the first whitespace separated token
with exactly nine ``/`` separated parts starts the record. Everything
after it is kept, so trailing unrelated words are captured as well;
the decoder reads only the fields it needs.
"""

import re
from typing import Optional

from .board import BOARD_SIZE
from .errors import SfenNotFoundError


# Characters that can appear in an SFEN record, spaces included
_HOVER_RUN = re.compile(r"[a-zA-Z0-9 /+-]+")


def is_board_token(token: str) -> bool:
    return len(token.split("/")) == BOARD_SIZE


def find_sfen(text: str) -> Optional[str]:
    """Return the SFEN found in ``text``, or None."""
    # Runs of whitespace collapse, so no empty tokens are produced
    tokens = text.split()
    for i, token in enumerate(tokens):
        if is_board_token(token):
            return " ".join(tokens[i:])
    return None


def locate(text: str) -> str:
    """
    Extract the SFEN contained in ``text``.

    Raises:
        SfenNotFoundError: If no token has nine rank segments.
    """
    sfen = find_sfen(text)
    if sfen is None:
        raise SfenNotFoundError()
    return sfen


def hover_text(line: str, column: int) -> Optional[str]:
    """
    The run of SFEN characters around ``column`` in ``line``.

    This is the word range an editor hover hands to ``locate``. Returns
    None when the column is not inside such a run.
    """
    for match in _HOVER_RUN.finditer(line):
        if match.start() <= column < match.end():
            return match.group()
    return None
