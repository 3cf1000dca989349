from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Optional, Protocol

from checkers.game import GameEngine, IllegalMoveError, OffBoardError
from checkers.move import Coordinate, Move
from checkers.pieces import Color, Piece

from .flags import NO_PIECE, piece_to_flags
from .serializers import serialize_engine, serialize_move, serialize_piece

logger = logging.getLogger(__name__)


class HostListener(Protocol):
    """Notifications the embedding host receives after a successful move."""

    def on_piece_moved(self, from_x: int, from_y: int, to_x: int, to_y: int) -> None: ...

    def on_piece_crowned(self, x: int, y: int) -> None: ...


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    success: bool
    promoted: bool
    move: Move


class GameSession:
    """Thread-safe adapter around a single GameEngine instance.

    Translates primitive integer coordinates into engine calls and relays
    completed moves and promotions to the subscribed host listeners.
    """

    def __init__(self, engine: Optional[GameEngine] = None, *, require_empty_landing: bool = True) -> None:
        self.lock = Lock()
        self.engine = engine if engine is not None else GameEngine(require_empty_landing=require_empty_landing)
        self.listeners: list[HostListener] = []

    # public API ---------------------------------------------------------

    def subscribe(self, listener: HostListener) -> None:
        with self.lock:
            self.listeners.append(listener)

    def unsubscribe(self, listener: HostListener) -> None:
        with self.lock:
            self.listeners.remove(listener)

    def attempt_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> MoveOutcome:
        requested = Move.of((from_x, from_y), (to_x, to_y))
        with self.lock:
            try:
                result = self.engine.move_piece(requested)
            except IllegalMoveError:
                return MoveOutcome(success=False, promoted=False, move=requested)
            logger.info(
                "Move %s applied, %s to play (move %d)",
                result.move,
                self.engine.current_turn.value,
                self.engine.move_count,
            )
            listeners = list(self.listeners)

        # listeners run unlocked so they may query the session
        for listener in listeners:
            self._notify(listener, result.crowned, from_x, from_y, to_x, to_y)
        return MoveOutcome(success=True, promoted=result.crowned, move=result.move)

    def get_piece(self, x: int, y: int) -> Optional[Piece]:
        with self.lock:
            return self.engine.get_piece((x, y))

    def get_piece_flags(self, x: int, y: int) -> int:
        try:
            return piece_to_flags(self.get_piece(x, y))
        except OffBoardError:
            return NO_PIECE

    def current_turn(self) -> Color:
        with self.lock:
            return self.engine.current_turn

    def get_current_turn_flags(self) -> int:
        with self.lock:
            return piece_to_flags(Piece(self.engine.current_turn))

    def move_count(self) -> int:
        with self.lock:
            return self.engine.move_count

    def legal_moves(self) -> list[dict[str, Any]]:
        with self.lock:
            return [serialize_move(move) for move in self.engine.legal_moves()]

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return serialize_engine(self.engine)

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.engine.reset()
            logger.info("Game reset")
            return serialize_engine(self.engine)

    def describe_square(self, x: int, y: int) -> dict[str, Any]:
        with self.lock:
            coord = Coordinate(x, y)
            return serialize_piece(coord, self.engine.get_piece(coord))

    # helpers ------------------------------------------------------------

    @staticmethod
    def _notify(listener: HostListener, crowned: bool, from_x: int, from_y: int, to_x: int, to_y: int) -> None:
        # the move is already applied, so listener errors are logged, not raised
        try:
            listener.on_piece_moved(from_x, from_y, to_x, to_y)
            if crowned:
                listener.on_piece_crowned(to_x, to_y)
        except Exception:
            logger.exception("Host listener %r failed after move %s,%s -> %s,%s", listener, from_x, from_y, to_x, to_y)
