from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers.board import Board  # noqa: E402
from checkers.game import Game, GameOverError  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402
from checkers.rules import InvalidMoveError, MoveErrorKind  # noqa: E402


class GameTurnTests(unittest.TestCase):
    def test_black_moves_first_and_turns_alternate(self) -> None:
        game = Game()
        self.assertEqual(game.current_player, Color.BLACK)
        self.assertEqual(game.status_text(), "Black to move")

        game.make_move([(2, 1), (3, 2)])
        self.assertEqual(game.current_player, Color.WHITE)
        game.make_move([(5, 0), (4, 1)])
        self.assertEqual(game.current_player, Color.BLACK)
        self.assertEqual(len(game.move_history), 2)

    def test_rejected_move_keeps_turn(self) -> None:
        game = Game()
        before = game.board.to_state()
        with self.assertRaises(InvalidMoveError) as ctx:
            game.make_move([(5, 0), (4, 1)])
        self.assertEqual(ctx.exception.kind, MoveErrorKind.NOT_YOUR_PIECE)
        self.assertEqual(game.current_player, Color.BLACK)
        self.assertEqual(game.board.to_state(), before)
        self.assertEqual(game.move_history, [])

    def test_configurable_first_player(self) -> None:
        game = Game(first_player=Color.WHITE)
        game.make_move([(5, 0), (4, 1)])
        game.reset()
        self.assertEqual(game.current_player, Color.WHITE)
        self.assertEqual(game.move_history, [])
        self.assertEqual(game.board.to_state(), Board.standard().to_state())


class GameUndoTests(unittest.TestCase):
    def test_undo_restores_board_and_player(self) -> None:
        game = Game()
        before = game.board.to_state()
        game.make_move([(2, 1), (3, 2)])

        self.assertTrue(game.undo_move())
        self.assertEqual(game.board.to_state(), before)
        self.assertEqual(game.current_player, Color.BLACK)
        self.assertFalse(game.undo_move())

    def test_undo_reverts_capture_and_promotion(self) -> None:
        game = Game()
        game.board = Board.empty()
        game.board.place(Piece(Color.BLACK, 5, 0))
        game.board.place(Piece(Color.WHITE, 6, 1))
        game.board.place(Piece(Color.WHITE, 6, 3))
        before = game.board.to_state()

        result = game.make_move([(5, 0), (7, 2)])
        self.assertTrue(result.crowned)
        game.undo_move()

        self.assertEqual(game.board.to_state(), before)
        self.assertFalse(game.board.cell_at((5, 0)).is_king)


class GameOverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.game = Game()
        self.game.board = Board.empty()
        self.game.board.place(Piece(Color.BLACK, 2, 1))
        self.game.board.place(Piece(Color.WHITE, 3, 2))

    def test_capturing_last_piece_wins(self) -> None:
        self.game.make_move([(2, 1), (4, 3)])
        self.assertEqual(self.game.winner, Color.BLACK)
        self.assertFalse(self.game.draw)
        self.assertTrue(self.game.is_over)
        self.assertEqual(self.game.status_text(), "BLACK WINS")

        with self.assertRaises(GameOverError):
            self.game.make_move([(4, 3), (5, 4)])

    def test_undo_reopens_finished_game(self) -> None:
        self.game.make_move([(2, 1), (4, 3)])
        self.game.undo_move()
        self.assertFalse(self.game.is_over)
        self.assertIsNone(self.game.winner)

    def test_locked_position_is_a_draw(self) -> None:
        game = Game()
        game.board = Board.empty()
        for col in (1, 3, 5, 7):
            game.board.place(Piece(Color.BLACK, 6, col))
        for col in (0, 2, 4):
            game.board.place(Piece(Color.BLACK, 5, col))
        game.board.place(Piece(Color.BLACK, 4, 7))
        for col in (0, 2, 4, 6):
            game.board.place(Piece(Color.WHITE, 7, col))

        game.make_move([(4, 7), (5, 6)])

        self.assertIsNone(game.winner)
        self.assertTrue(game.draw)
        self.assertTrue(game.is_over)
        self.assertEqual(game.status_text(), "IT'S A DRAW")


if __name__ == "__main__":
    unittest.main()
