from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers.board import Board  # noqa: E402
from checkers.outcome import has_any_move, is_draw, winner  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402


def board_with(*pieces: Piece) -> Board:
    board = Board.empty()
    for piece in pieces:
        board.place(piece)
    return board


class OutcomeTests(unittest.TestCase):
    def test_standard_board_is_undecided(self) -> None:
        board = Board.standard()
        self.assertTrue(has_any_move(board, Color.BLACK))
        self.assertTrue(has_any_move(board, Color.WHITE))
        self.assertFalse(is_draw(board))
        self.assertIsNone(winner(board))

    def test_boxed_in_pieces_draw(self) -> None:
        # Men that were placed on their own far edge have no forward diagonal left.
        board = board_with(Piece(Color.BLACK, 7, 0), Piece(Color.WHITE, 0, 7))
        self.assertFalse(has_any_move(board, Color.BLACK))
        self.assertFalse(has_any_move(board, Color.WHITE))
        self.assertTrue(is_draw(board))
        self.assertIsNone(winner(board))

    def test_side_without_moves_loses(self) -> None:
        board = board_with(
            Piece(Color.WHITE, 5, 0),
            Piece(Color.BLACK, 4, 1),
            Piece(Color.BLACK, 3, 2),
        )
        self.assertFalse(has_any_move(board, Color.WHITE))
        self.assertTrue(has_any_move(board, Color.BLACK))
        self.assertFalse(is_draw(board))
        self.assertEqual(winner(board), Color.BLACK)
        self.assertIsNone(winner(board, colors=(Color.WHITE,)))

    def test_side_without_pieces_loses(self) -> None:
        board = board_with(Piece(Color.WHITE, 4, 3))
        self.assertEqual(winner(board), Color.WHITE)

        blocked = board_with(Piece(Color.WHITE, 0, 1))
        self.assertEqual(winner(blocked), Color.WHITE)

    def test_empty_board_has_no_winner(self) -> None:
        self.assertIsNone(winner(Board.empty()))


if __name__ == "__main__":
    unittest.main()
