from __future__ import annotations

from typing import Iterator, Optional

from .move import Coordinate
from .pieces import Color, Piece

BOARD_SIZE = 8

BoardStatePiece = tuple[int, int, str, bool]
BoardState = tuple[BoardStatePiece, ...]

# (columns, rows) of the twelve starting squares for each side
_WHITE_START = ((1, 3, 5, 7, 0, 2, 4, 6, 1, 3, 5, 7), (0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2))
_BLACK_START = ((0, 2, 4, 6, 1, 3, 5, 7, 0, 2, 4, 6), (5, 5, 5, 5, 6, 6, 6, 6, 7, 7, 7, 7))


class Board:
    """8x8 grid of optional pieces, indexed ``squares[x][y]`` (column, row)."""

    def __init__(self) -> None:
        self.squares: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.squares = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    def to_state(self) -> BoardState:
        return tuple(
            (coord.x, coord.y, piece.color.value, piece.crowned) for coord, piece in self.pieces()
        )

    def get(self, coord: Coordinate) -> Optional[Piece]:
        if not Coordinate(*coord).on_board():
            return None
        x, y = coord
        return self.squares[x][y]

    def place(self, coord: Coordinate, piece: Optional[Piece]) -> None:
        coord = Coordinate(*coord)
        if not coord.on_board():
            raise ValueError(f"Square {coord} is not on the board.")
        self.squares[coord.x][coord.y] = piece

    def clear(self, coord: Coordinate) -> None:
        self.place(coord, None)

    def pieces(self) -> Iterator[tuple[Coordinate, Piece]]:
        """Occupied squares in scan order: columns outer, rows inner."""
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                piece = self.squares[x][y]
                if piece is not None:
                    yield Coordinate(x, y), piece

    def count(self, color: Color) -> int:
        return sum(1 for _, piece in self.pieces() if piece.color is color)

    def _set_start_pieces(self) -> None:
        for color, (columns, rows) in ((Color.WHITE, _WHITE_START), (Color.BLACK, _BLACK_START)):
            for x, y in zip(columns, rows):
                self.squares[x][y] = Piece(color)
