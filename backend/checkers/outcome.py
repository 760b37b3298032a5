from __future__ import annotations

from typing import Iterable, Optional

from .board import Board
from .pieces import Color


def has_any_move(board: Board, color: Color) -> bool:
    return any(piece.available_moves(board).moves for piece in board.pieces_of(color))


def is_draw(board: Board) -> bool:
    return all(not piece.available_moves(board).moves for piece in board.all_pieces())


def winner(board: Board, colors: Iterable[Color] = (Color.BLACK, Color.WHITE)) -> Optional[Color]:
    """Return the color whose opponent is out of moves, if any.

    A side that has lost all of its pieces has lost even when the survivor is
    itself blocked.
    """
    for color in colors:
        if not board.pieces_of(color):
            continue
        opponent = color.opponent
        if not board.pieces_of(opponent):
            return color
        if not has_any_move(board, opponent) and has_any_move(board, color):
            return color
    return None
