from __future__ import annotations

from typing import Callable, Optional

from .move import Coordinate
from .pieces import Color, Piece


BOARD_SIZE = 8
START_ROWS = 3

PiecePredicate = Callable[[Piece], bool]
BoardStatePiece = tuple[int, int, str, bool]
BoardState = tuple[BoardStatePiece, ...]


class Board:
    def __init__(self) -> None:
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def standard(cls) -> "Board":
        board = cls()
        board._set_start_pieces()
        return board

    def to_state(self) -> BoardState:
        return tuple(
            (piece.row, piece.col, piece.color.value, piece.is_king)
            for piece in self.all_pieces()
        )

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board = cls()
        for row, col, color_value, is_king in state:
            board.place(Piece(Color(color_value), row, col, is_king=is_king))
        return board

    def is_in_bounds(self, position: Coordinate) -> bool:
        row, col = position
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def cell_at(self, position: Coordinate) -> Optional[Piece]:
        if not self.is_in_bounds(position):
            raise IndexError(f"Position {position} is off the board.")
        row, col = position
        return self.board[row][col]

    def place(self, piece: Piece) -> None:
        if not self.is_in_bounds(piece.position):
            raise IndexError(f"Cannot place {piece!r} off the board.")
        self.board[piece.row][piece.col] = piece

    def remove(self, position: Coordinate) -> Optional[Piece]:
        occupant = self.cell_at(position)
        row, col = position
        self.board[row][col] = None
        return occupant

    def move_piece(self, piece: Piece, destination: Coordinate) -> bool:
        """Relocate ``piece`` and crown it on its king row.

        Returns ``True`` when this move crowned the piece.
        """
        if self.cell_at(piece.position) is not piece:
            raise ValueError("Piece must occupy its recorded position before moving.")
        if not self.is_in_bounds(destination):
            raise IndexError(f"Position {destination} is off the board.")
        self.remove(piece.position)
        piece.move(*destination)
        self.place(piece)
        return self._handle_promotion(piece)

    def all_pieces(self, predicate: Optional[PiecePredicate] = None) -> list[Piece]:
        pieces: list[Piece] = []
        for row in self.board:
            for piece in row:
                if piece is None:
                    continue
                if predicate is None or predicate(piece):
                    pieces.append(piece)
        return pieces

    def pieces_of(self, color: Color) -> list[Piece]:
        return self.all_pieces(lambda piece: piece.color == color)

    def copy(self) -> "Board":
        new_board = Board()
        for piece in self.all_pieces():
            new_board.place(piece.getCopy())
        return new_board

    def _handle_promotion(self, piece: Piece) -> bool:
        if piece.row == piece.color.king_row:
            return piece.crown()
        return False

    def _set_start_pieces(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if (row + col) % 2 == 1:
                    if row < START_ROWS:
                        self.place(Piece(Color.BLACK, row, col))
                    elif row >= BOARD_SIZE - START_ROWS:
                        self.place(Piece(Color.WHITE, row, col))

    def __repr__(self) -> str:
        return f"Board({len(self.all_pieces())} pieces)"
