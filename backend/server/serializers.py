from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from checkers.game import GameEngine
from checkers.move import Coordinate, Move
from checkers.pieces import Color, Piece

from .flags import piece_to_flags

if TYPE_CHECKING:
    from .session import MoveOutcome


def _coord_to_dict(coord: Coordinate) -> dict[str, int]:
    x, y = coord
    return {"x": x, "y": y}


def serialize_piece(coord: Coordinate, piece: Optional[Piece]) -> dict[str, Any]:
    return {
        **_coord_to_dict(coord),
        "flags": piece_to_flags(piece),
        "color": piece.color.value if piece else None,
        "crowned": piece.crowned if piece else False,
    }


def serialize_move(move: Move) -> dict[str, Any]:
    return {
        "from": _coord_to_dict(move.start),
        "to": _coord_to_dict(move.end),
        "isJump": move.is_jump,
    }


def serialize_outcome(outcome: "MoveOutcome") -> dict[str, Any]:
    events: list[dict[str, Any]] = []
    if outcome.success:
        events.append({"type": "pieceMoved", **serialize_move(outcome.move)})
        if outcome.promoted:
            events.append({"type": "pieceCrowned", **_coord_to_dict(outcome.move.end)})
    return {
        "success": outcome.success,
        "promoted": outcome.promoted,
        "move": serialize_move(outcome.move),
        "events": events,
    }


def serialize_engine(engine: GameEngine) -> dict[str, Any]:
    pieces = [serialize_piece(coord, piece) for coord, piece in engine.board.pieces()]
    return {
        "turn": engine.current_turn.value,
        "moveCount": engine.move_count,
        "pieces": pieces,
        "pieceCounts": {
            "black": {
                "total": engine.piece_count(Color.BLACK),
                "crowned": sum(1 for p in pieces if p["color"] == "black" and p["crowned"]),
            },
            "white": {
                "total": engine.piece_count(Color.WHITE),
                "crowned": sum(1 for p in pieces if p["color"] == "white" and p["crowned"]),
            },
        },
        "legalMoves": [serialize_move(move) for move in engine.legal_moves()],
    }
