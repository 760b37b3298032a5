"""Move-sequence validation and application.

A sequence is first replayed on a throwaway copy of the board; the real board
is only touched once the whole sequence has been found legal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .board import Board
from .move import Coordinate, MoveResult, MoveSequence, as_sequence
from .pieces import Color, Piece

logger = logging.getLogger(__name__)

_JUMP_OFFSETS = ((2, 2), (2, -2), (-2, 2), (-2, -2))


class MoveErrorKind(str, Enum):
    NO_PIECE_AT_ORIGIN = "no_piece_at_origin"
    NOT_YOUR_PIECE = "not_your_piece"
    MANDATORY_JUMP_PENDING = "mandatory_jump_pending"
    ILLEGAL_SLIDE = "illegal_slide"
    ILLEGAL_JUMP = "illegal_jump"
    NO_PIECE_TO_CAPTURE = "no_piece_to_capture"
    MUST_CONTINUE_JUMPING = "must_continue_jumping"


class InvalidMoveError(ValueError):
    def __init__(self, kind: MoveErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


@dataclass(frozen=True, slots=True)
class ValidationResult:
    success: bool
    kind: Optional[MoveErrorKind] = None
    message: str = ""


def jumping_pieces(board: Board, color: Color) -> list[Piece]:
    return [piece for piece in board.pieces_of(color) if piece.jump_moves(board)]


def legal_moves(board: Board, color: Color) -> dict[Coordinate, tuple[Coordinate, ...]]:
    """Map each movable piece of ``color`` to its next landing cells.

    When any piece can jump, only jumping pieces are listed.
    """
    jumpers = jumping_pieces(board, color)
    if jumpers:
        return {piece.position: tuple(piece.jump_moves(board)) for piece in jumpers}
    moves: dict[Coordinate, tuple[Coordinate, ...]] = {}
    for piece in board.pieces_of(color):
        slides = piece.slide_moves(board)
        if slides:
            moves[piece.position] = tuple(slides)
    return moves


def validate_move_sequence(
    board: Board, sequence: Iterable[Coordinate], acting_color: Color
) -> ValidationResult:
    try:
        _perform_moves(board.copy(), as_sequence(sequence), acting_color)
    except InvalidMoveError as exc:
        return ValidationResult(success=False, kind=exc.kind, message=exc.message)
    return ValidationResult(success=True)


def apply_move_sequence(
    board: Board, sequence: Iterable[Coordinate], acting_color: Color
) -> MoveResult:
    path = as_sequence(sequence)
    try:
        _perform_moves(board.copy(), path, acting_color)
    except InvalidMoveError as exc:
        logger.debug("Rejected %s for %s: %s", path, acting_color.value, exc.message)
        raise
    move = _perform_moves(board, path, acting_color)
    logger.debug("%s played %s", acting_color.value, move)
    return move


def _perform_moves(board: Board, path: MoveSequence, acting_color: Color) -> MoveResult:
    if not path:
        raise InvalidMoveError(MoveErrorKind.NO_PIECE_AT_ORIGIN, "No move was given.")
    start, destinations = path[0], path[1:]
    piece = board.cell_at(start) if board.is_in_bounds(start) else None
    if piece is None:
        raise InvalidMoveError(MoveErrorKind.NO_PIECE_AT_ORIGIN, f"No piece at {start}.")
    if piece.color != acting_color:
        raise InvalidMoveError(MoveErrorKind.NOT_YOUR_PIECE, "You can only move your own pieces.")
    if not destinations:
        raise InvalidMoveError(MoveErrorKind.ILLEGAL_SLIDE, "The move needs at least one destination.")

    if _is_jump_move(piece, destinations):
        captures, crowned = _jump_move(board, piece, destinations)
    else:
        captures, crowned = (), _slide_move(board, piece, destinations[0])
    return MoveResult(path=path, captures=captures, crowned=crowned)


def _is_jump_move(piece: Piece, destinations: MoveSequence) -> bool:
    return len(destinations) > 1 or abs(destinations[0][0] - piece.row) == 2


def _slide_move(board: Board, piece: Piece, destination: Coordinate) -> bool:
    if jumping_pieces(board, piece.color):
        raise InvalidMoveError(
            MoveErrorKind.MANDATORY_JUMP_PENDING,
            "You have a piece that is able to jump, so you have to jump.",
        )
    if destination not in piece.slide_moves(board):
        raise InvalidMoveError(MoveErrorKind.ILLEGAL_SLIDE, f"That piece can't move to {destination}.")
    return board.move_piece(piece, destination)


def _jump_move(board: Board, piece: Piece, destinations: MoveSequence) -> tuple[tuple[Coordinate, ...], bool]:
    if destinations[0] not in piece.jump_moves(board):
        raise InvalidMoveError(MoveErrorKind.ILLEGAL_JUMP, f"This piece can't jump to {destinations[0]}.")

    captures: list[Coordinate] = []
    crowned = False
    for destination in destinations:
        if crowned:
            # Crowning ends the turn; the new king jumps again next turn.
            raise InvalidMoveError(
                MoveErrorKind.ILLEGAL_JUMP,
                "A piece crowned during a jump must stop on the king row.",
            )
        captures.append(_perform_jump(board, piece, destination))
        crowned = board.move_piece(piece, destination)

    if not crowned and piece.jump_moves(board):
        raise InvalidMoveError(
            MoveErrorKind.MUST_CONTINUE_JUMPING,
            "Jumping is mandatory while the piece can keep capturing.",
        )
    return tuple(captures), crowned


def _perform_jump(board: Board, piece: Piece, destination: Coordinate) -> Coordinate:
    row_delta = destination[0] - piece.row
    col_delta = destination[1] - piece.col
    if (
        not board.is_in_bounds(destination)
        or abs(row_delta) != 2
        or abs(col_delta) != 2
        or board.cell_at(destination) is not None
    ):
        raise InvalidMoveError(MoveErrorKind.ILLEGAL_JUMP, f"This piece can't jump to {destination}.")
    if (row_delta // 2, col_delta // 2) not in piece.diagonal_directions():
        raise InvalidMoveError(MoveErrorKind.ILLEGAL_JUMP, f"This piece can't jump backwards to {destination}.")

    between = (piece.row + row_delta // 2, piece.col + col_delta // 2)
    jumped = board.cell_at(between)
    if jumped is None:
        raise InvalidMoveError(MoveErrorKind.NO_PIECE_TO_CAPTURE, f"No piece to jump at {between}.")
    if jumped.color == piece.color:
        raise InvalidMoveError(MoveErrorKind.ILLEGAL_JUMP, f"You can't jump your own piece at {between}.")
    board.remove(between)
    return between


def continuation_moves(board: Board, path: Iterable[Coordinate], acting_color: Color) -> list[Coordinate]:
    """Cells the piece at ``path[0]`` may land on next after following ``path``.

    Used by front-ends that build a jump chain one click at a time.
    """
    path = list(as_sequence(path))
    if not path:
        return []
    if len(path) == 1:
        return list(legal_moves(board, acting_color).get(path[0], ()))
    row, col = path[-1]
    options: list[Coordinate] = []
    for dr, dc in _JUMP_OFFSETS:
        candidate = (row + dr, col + dc)
        result = validate_move_sequence(board, [*path, candidate], acting_color)
        if result.success or result.kind == MoveErrorKind.MUST_CONTINUE_JUMPING:
            options.append(candidate)
    return options
