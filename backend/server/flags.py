from __future__ import annotations

from typing import Optional

from checkers.pieces import Color, Piece

PIECEFLAG_BLACK = 1
PIECEFLAG_WHITE = 2
PIECEFLAG_CROWN = 4
NO_PIECE = -1


def piece_to_flags(piece: Optional[Piece]) -> int:
    if piece is None:
        return NO_PIECE
    value = PIECEFLAG_BLACK if piece.color is Color.BLACK else PIECEFLAG_WHITE
    if piece.crowned:
        value += PIECEFLAG_CROWN
    return value
