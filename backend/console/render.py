from __future__ import annotations

from checkers.board import BOARD_SIZE, Board
from checkers.pieces import Color, Piece

_SYMBOLS = {
    (Color.WHITE, False): "○",
    (Color.WHITE, True): "☺",
    (Color.BLACK, False): "●",
    (Color.BLACK, True): "☻",
}


def piece_symbol(piece: Piece) -> str:
    return _SYMBOLS[(piece.color, piece.is_king)]


def render_board(board: Board) -> str:
    lines = ["   " + " ".join(f"{col:^3}" for col in range(BOARD_SIZE))]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board.cell_at((row, col))
            if piece is not None:
                cells.append(f" {piece_symbol(piece)} ")
            elif (row + col) % 2 == 1:
                cells.append(" . ")
            else:
                cells.append("   ")
        lines.append(f"{row:>2} " + " ".join(cells))
    return "\n".join(lines)
