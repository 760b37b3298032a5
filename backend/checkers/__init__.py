"""Core checkers engine package."""

from .board import Board
from .game import Game, GameOverError
from .move import Coordinate, MoveResult
from .outcome import has_any_move, is_draw, winner
from .pieces import AvailableMoves, Color, Piece
from .rules import (
	InvalidMoveError,
	MoveErrorKind,
	ValidationResult,
	apply_move_sequence,
	continuation_moves,
	legal_moves,
	validate_move_sequence,
)

__all__ = [
	"Board",
	"Game",
	"GameOverError",
	"Coordinate",
	"MoveResult",
	"Color",
	"Piece",
	"AvailableMoves",
	"InvalidMoveError",
	"MoveErrorKind",
	"ValidationResult",
	"apply_move_sequence",
	"validate_move_sequence",
	"legal_moves",
	"continuation_moves",
	"has_any_move",
	"is_draw",
	"winner",
]
