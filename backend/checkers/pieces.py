from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .move import Coordinate

if TYPE_CHECKING:
    from .board import Board


Direction = tuple[int, int]

_FORWARD_DIRECTIONS: dict[str, tuple[Direction, ...]] = {
    "black": ((1, 1), (1, -1)),
    "white": ((-1, 1), (-1, -1)),
}


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def forward_directions(self) -> tuple[Direction, ...]:
        return _FORWARD_DIRECTIONS[self.value]

    @property
    def king_row(self) -> int:
        return 7 if self is Color.BLACK else 0


@dataclass(frozen=True, slots=True)
class AvailableMoves:
    moves: tuple[Coordinate, ...]
    must_jump: bool


class Piece:
    """A single checker.

    The piece only reads the board; relocating it is the board's job
    (see ``Board.move_piece``), so the grid and the piece never disagree.
    """

    def __init__(self, color: Color, row: int, col: int, *, is_king: bool = False) -> None:
        self.color = color
        self.row = row
        self.col = col
        self.is_king = is_king

    @property
    def position(self) -> Coordinate:
        return (self.row, self.col)

    def move(self, new_row: int, new_col: int) -> None:
        self.row = new_row
        self.col = new_col

    def crown(self) -> bool:
        if self.is_king:
            return False
        self.is_king = True
        return True

    def diagonal_directions(self) -> tuple[Direction, ...]:
        if self.is_king:
            return Color.BLACK.forward_directions + Color.WHITE.forward_directions
        return self.color.forward_directions

    def slide_moves(self, board: "Board") -> list[Coordinate]:
        moves: list[Coordinate] = []
        for dr, dc in self.diagonal_directions():
            target = (self.row + dr, self.col + dc)
            if board.is_in_bounds(target) and board.cell_at(target) is None:
                moves.append(target)
        return moves

    def jump_moves(self, board: "Board") -> list[Coordinate]:
        moves: list[Coordinate] = []
        for dr, dc in self.diagonal_directions():
            landing = (self.row + 2 * dr, self.col + 2 * dc)
            if not board.is_in_bounds(landing) or board.cell_at(landing) is not None:
                continue
            jumped = board.cell_at((self.row + dr, self.col + dc))
            if jumped is None or jumped.color == self.color:
                continue
            moves.append(landing)
        return moves

    def available_moves(self, board: "Board") -> AvailableMoves:
        jumps = self.jump_moves(board)
        if jumps:
            return AvailableMoves(moves=tuple(jumps), must_jump=True)
        return AvailableMoves(moves=tuple(self.slide_moves(board)), must_jump=False)

    def getCopy(self) -> "Piece":
        return Piece(self.color, self.row, self.col, is_king=self.is_king)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.color.name},{self.row},{self.col})"
