"""Checkers rules engine package."""

from .board import Board
from .game import EngineError, GameEngine, IllegalMoveError, MoveResult, OffBoardError
from .move import Coordinate, Move
from .pieces import Color, Piece

__all__ = [
	"Board",
	"GameEngine",
	"MoveResult",
	"EngineError",
	"IllegalMoveError",
	"OffBoardError",
	"Move",
	"Coordinate",
	"Color",
	"Piece",
]
