from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers.board import Board  # noqa: E402
from checkers.game import GameEngine, IllegalMoveError, OffBoardError  # noqa: E402
from checkers.move import Coordinate, Move  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402


class BasicMoveTests(unittest.TestCase):
    def test_simple_move_relocates_piece(self) -> None:
        engine = GameEngine()
        result = engine.move_piece(Move.of((0, 5), (1, 4)))

        self.assertEqual(result.move, Move.of((0, 5), (1, 4)))
        self.assertFalse(result.crowned)
        self.assertIsNone(result.captured)
        self.assertIsNone(engine.get_piece((0, 5)))
        self.assertEqual(engine.get_piece((1, 4)), Piece(Color.BLACK, crowned=False))

    def test_turn_alternates_and_counter_increments(self) -> None:
        engine = GameEngine()
        engine.move_piece(Move.of((0, 5), (1, 4)))
        self.assertEqual(engine.current_turn, Color.WHITE)
        self.assertEqual(engine.move_count, 1)

        engine.move_piece(Move.of((1, 2), (2, 3)))
        self.assertEqual(engine.current_turn, Color.BLACK)
        self.assertEqual(engine.move_count, 2)

    def test_illegal_moves_leave_state_unchanged(self) -> None:
        engine = GameEngine()
        engine.move_piece(Move.of((0, 5), (1, 4)))
        before = engine.board.to_state()

        rejected = [
            Move.of((1, 4), (2, 4)),  # sideways
            Move.of((1, 4), (0, 3)),  # wrong color to move
            Move.of((1, 2), (1, 3)),  # not diagonal
            Move.of((1, 2), (0, 1)),  # backward onto own piece
            Move.of((7, 2), (8, 3)),  # off board
            Move.of((-1, 2), (0, 3)),
        ]
        for move in rejected:
            with self.assertRaises(IllegalMoveError) as ctx:
                engine.move_piece(move)
            self.assertEqual(ctx.exception.move, move)

        self.assertEqual(engine.board.to_state(), before)
        self.assertEqual(engine.current_turn, Color.WHITE)
        self.assertEqual(engine.move_count, 1)

    def test_reset_restores_opening(self) -> None:
        engine = GameEngine()
        engine.move_piece(Move.of((0, 5), (1, 4)))
        engine.reset()
        self.assertEqual(engine.board.to_state(), Board().to_state())
        self.assertEqual(engine.current_turn, Color.BLACK)
        self.assertEqual(engine.move_count, 0)


class CaptureTests(unittest.TestCase):
    def test_jump_removes_exactly_one_opposing_piece(self) -> None:
        board = Board()
        board.place(Coordinate(1, 4), Piece(Color.WHITE))
        engine = GameEngine.from_board(board)
        white_before = engine.piece_count(Color.WHITE)
        black_before = engine.piece_count(Color.BLACK)

        result = engine.move_piece(Move.of((0, 5), (2, 3)))

        self.assertEqual(result.captured, Coordinate(1, 4))
        self.assertIsNone(engine.get_piece((0, 5)))
        self.assertIsNone(engine.get_piece((1, 4)))
        self.assertEqual(engine.get_piece((2, 3)), Piece(Color.BLACK))
        self.assertEqual(engine.piece_count(Color.WHITE), white_before - 1)
        self.assertEqual(engine.piece_count(Color.BLACK), black_before)
        self.assertEqual(engine.current_turn, Color.WHITE)

    def test_simple_move_still_allowed_when_jump_available(self) -> None:
        board = Board()
        board.place(Coordinate(1, 4), Piece(Color.WHITE))
        engine = GameEngine.from_board(board)
        engine.move_piece(Move.of((6, 5), (7, 4)))
        self.assertEqual(engine.piece_count(Color.WHITE), 13)

    def _crowded_landing(self) -> Board:
        board = Board.empty()
        board.place(Coordinate(2, 2), Piece(Color.BLACK))
        board.place(Coordinate(3, 3), Piece(Color.WHITE))
        board.place(Coordinate(4, 4), Piece(Color.WHITE))
        return board

    def test_jump_onto_occupied_square_rejected_by_default(self) -> None:
        engine = GameEngine.from_board(self._crowded_landing())
        with self.assertRaises(IllegalMoveError):
            engine.move_piece(Move.of((2, 2), (4, 4)))
        self.assertEqual(engine.piece_count(Color.WHITE), 2)
        self.assertEqual(engine.move_count, 0)

    def test_legacy_jump_overwrites_occupied_landing(self) -> None:
        engine = GameEngine.from_board(self._crowded_landing(), require_empty_landing=False)
        result = engine.move_piece(Move.of((2, 2), (4, 4)))

        self.assertEqual(result.captured, Coordinate(3, 3))
        self.assertIsNone(engine.get_piece((2, 2)))
        self.assertIsNone(engine.get_piece((3, 3)))
        self.assertEqual(engine.get_piece((4, 4)), Piece(Color.BLACK))
        self.assertEqual(engine.piece_count(Color.WHITE), 0)
        self.assertEqual(engine.current_turn, Color.WHITE)


class PromotionTests(unittest.TestCase):
    def _engine(self) -> GameEngine:
        board = Board.empty()
        board.place(Coordinate(1, 1), Piece(Color.BLACK))
        board.place(Coordinate(7, 5), Piece(Color.WHITE))
        return GameEngine.from_board(board, turn=Color.BLACK)

    def test_crown_row_landing_reports_promotion(self) -> None:
        engine = self._engine()
        self.assertFalse(engine.is_crowned((1, 1)))

        result = engine.move_piece(Move.of((1, 1), (2, 0)))
        self.assertTrue(result.crowned)
        self.assertTrue(engine.is_crowned((2, 0)))
        self.assertEqual(engine.get_piece((2, 0)), Piece(Color.BLACK, crowned=True))

        engine.move_piece(Move.of((7, 5), (6, 6)))
        # crowned black may now travel toward higher rows
        self.assertEqual(
            engine.moves_from((2, 0)),
            [Move.of((2, 0), (1, 1)), Move.of((2, 0), (3, 1))],
        )
        result = engine.move_piece(Move.of((2, 0), (3, 1)))
        self.assertFalse(result.crowned)
        self.assertTrue(engine.is_crowned((3, 1)))

        result = engine.move_piece(Move.of((6, 6), (5, 7)))
        self.assertTrue(result.crowned)
        self.assertTrue(engine.is_crowned((5, 7)))

        # landing on the crown row again still reports a promotion; the flag stays set
        result = engine.move_piece(Move.of((3, 1), (2, 0)))
        self.assertTrue(result.crowned)
        self.assertEqual(engine.get_piece((2, 0)), Piece(Color.BLACK, crowned=True))
        self.assertEqual(engine.move_count, 5)

    def test_crowned_piece_keeps_backward_moves(self) -> None:
        engine = self._engine()
        engine.move_piece(Move.of((1, 1), (2, 0)))
        engine.move_piece(Move.of((7, 5), (6, 6)))
        engine.move_piece(Move.of((2, 0), (3, 1)))
        engine.move_piece(Move.of((6, 6), (7, 7)))
        self.assertEqual(
            engine.moves_from((3, 1)),
            [
                Move.of((3, 1), (2, 2)),
                Move.of((3, 1), (4, 2)),
                Move.of((3, 1), (4, 0)),
                Move.of((3, 1), (2, 0)),
            ],
        )


class QueryTests(unittest.TestCase):
    def test_repeated_queries_are_identical(self) -> None:
        engine = GameEngine()
        for x in range(8):
            for y in range(8):
                self.assertEqual(engine.get_piece((x, y)), engine.get_piece((x, y)))
        self.assertEqual(engine.legal_moves(), engine.legal_moves())

    def test_off_board_queries_raise(self) -> None:
        engine = GameEngine()
        for coord in ((8, 0), (0, 8), (-1, 0), (0, -1)):
            with self.assertRaises(OffBoardError):
                engine.get_piece(coord)
        with self.assertRaises(OffBoardError):
            engine.is_crowned((8, 8))

    def test_is_crowned_false_for_empty_and_plain_squares(self) -> None:
        engine = GameEngine()
        self.assertFalse(engine.is_crowned((3, 3)))
        self.assertFalse(engine.is_crowned((0, 5)))


if __name__ == "__main__":
    unittest.main()
