from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from . import rules
from .board import Board
from .move import Coordinate, Move
from .pieces import Color, Piece

logger = logging.getLogger(__name__)


class EngineError(ValueError):
    """Base class for requests the engine rejects without changing state."""


class IllegalMoveError(EngineError):
    def __init__(self, move: Move) -> None:
        super().__init__(f"Illegal move {move}.")
        self.move = move


class OffBoardError(EngineError):
    def __init__(self, coord: Coordinate) -> None:
        super().__init__(f"Square {coord} is not on the board.")
        self.coord = coord


@dataclass(frozen=True, slots=True)
class MoveResult:
    move: Move
    crowned: bool
    captured: Optional[Coordinate] = None


class GameEngine:
    """Rules engine owning the board, the side to move and the move counter.

    Every accepted move is checked against the freshly generated legal-move
    list for the side to move. Rejected requests raise an ``EngineError``
    subclass and leave the engine untouched.
    """

    def __init__(self, *, require_empty_landing: bool = True) -> None:
        self.require_empty_landing = require_empty_landing
        self.board = Board()
        self._current_turn = Color.BLACK
        self._move_count = 0

    @classmethod
    def from_board(
        cls,
        board: Board,
        *,
        turn: Color = Color.BLACK,
        require_empty_landing: bool = True,
    ) -> "GameEngine":
        engine = cls(require_empty_landing=require_empty_landing)
        engine.board = board
        engine._current_turn = turn
        return engine

    def reset(self) -> None:
        self.board = Board()
        self._current_turn = Color.BLACK
        self._move_count = 0

    @property
    def current_turn(self) -> Color:
        return self._current_turn

    @property
    def move_count(self) -> int:
        return self._move_count

    def get_piece(self, coord: tuple[int, int]) -> Optional[Piece]:
        return self.board.get(self._require_on_board(coord))

    def is_crowned(self, coord: tuple[int, int]) -> bool:
        piece = self.get_piece(coord)
        return piece is not None and piece.crowned

    def piece_count(self, color: Color) -> int:
        return self.board.count(color)

    def legal_moves(self) -> list[Move]:
        return rules.legal_moves(
            self.board, self._current_turn, require_empty_landing=self.require_empty_landing
        )

    def moves_from(self, coord: tuple[int, int]) -> list[Move]:
        return rules.moves_from(
            self.board,
            self._require_on_board(coord),
            require_empty_landing=self.require_empty_landing,
        )

    def move_piece(self, move: Move) -> MoveResult:
        if move not in self.legal_moves():
            logger.debug("Rejected %s for %s", move, self._current_turn.value)
            raise IllegalMoveError(move)

        piece = self.board.get(move.start)
        if piece is None:
            raise RuntimeError("Legal move starts from an empty square.")

        captured = rules.midpoint_between(move.start, move.end)
        if captured is not None:
            self.board.clear(captured)

        self.board.place(move.end, piece)
        self.board.clear(move.start)

        crowned = self._should_crown(piece, move.end)
        if crowned:
            self.board.place(move.end, piece.crown())
            logger.debug("Crowned %s piece at %s", piece.color.value, move.end)

        self._advance_turn()
        return MoveResult(move=move, crowned=crowned, captured=captured)

    def _should_crown(self, piece: Piece, coord: Coordinate) -> bool:
        return coord.y == piece.color.crown_row

    def _advance_turn(self) -> None:
        self._current_turn = self._current_turn.opponent
        self._move_count += 1

    @staticmethod
    def _require_on_board(coord: tuple[int, int]) -> Coordinate:
        coord = Coordinate(*coord)
        if not coord.on_board():
            raise OffBoardError(coord)
        return coord
