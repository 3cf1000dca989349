from __future__ import annotations

from typing import Optional

from .board import Board
from .move import Coordinate, Move
from .pieces import Color, Piece

MoveList = list[Move]


def midpoint_between(start: Coordinate, end: Coordinate) -> Optional[Coordinate]:
    """Square jumped over when travelling from ``start`` to ``end``, if that is a jump."""
    x, y = start
    to_x, to_y = end
    if to_x == x + 2 and to_y == y + 2:
        return Coordinate(x + 1, y + 1)
    if x >= 2 and y >= 2 and to_x == x - 2 and to_y == y - 2:
        return Coordinate(x - 1, y - 1)
    if x >= 2 and to_x == x - 2 and to_y == y + 2:
        return Coordinate(x - 1, y + 1)
    if y >= 2 and to_x == x + 2 and to_y == y - 2:
        return Coordinate(x + 1, y - 1)
    return None


def valid_move(board: Board, piece: Piece, start: Coordinate, end: Coordinate) -> bool:
    if not start.on_board() or not end.on_board():
        return False
    if board.get(end) is not None:
        return False
    return piece.can_step(start.y, end.y)


def valid_jump(
    board: Board,
    piece: Piece,
    start: Coordinate,
    end: Coordinate,
    *,
    require_empty_landing: bool = True,
) -> bool:
    if not start.on_board() or not end.on_board():
        return False
    if require_empty_landing and board.get(end) is not None:
        return False
    mid = midpoint_between(start, end)
    if mid is None:
        return False
    captured = board.get(mid)
    return captured is not None and captured.color is not piece.color


def moves_from(board: Board, origin: Coordinate, *, require_empty_landing: bool = True) -> MoveList:
    """Jumps first, then simple moves, each in geometry emission order."""
    piece = board.get(origin)
    if piece is None:
        return []
    jumps = [
        Move(origin, target)
        for target in origin.jump_targets_from()
        if valid_jump(board, piece, origin, target, require_empty_landing=require_empty_landing)
    ]
    steps = [
        Move(origin, target)
        for target in origin.move_targets_from()
        if valid_move(board, piece, origin, target)
    ]
    return jumps + steps


def legal_moves(board: Board, color: Color, *, require_empty_landing: bool = True) -> MoveList:
    moves: MoveList = []
    for coord, piece in board.pieces():
        if piece.color is not color:
            continue
        moves.extend(moves_from(board, coord, require_empty_landing=require_empty_landing))
    return moves
