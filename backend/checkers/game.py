from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from . import outcome
from .board import Board, BoardState
from .move import Coordinate, MoveResult
from .pieces import Color
from .rules import apply_move_sequence, legal_moves

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    pass


@dataclass
class MoveRecord:
    player: Color
    state_before: BoardState
    result: MoveResult


class Game:
    """Turn bookkeeping around a single board: who moves, history, result."""

    def __init__(self, first_player: Color = Color.BLACK) -> None:
        self.first_player = first_player
        self.board = Board.standard()
        self.current_player = first_player
        self.winner: Optional[Color] = None
        self.draw = False
        self.move_history: list[MoveRecord] = []

    def reset(self) -> None:
        self.board = Board.standard()
        self.current_player = self.first_player
        self.winner = None
        self.draw = False
        self.move_history.clear()

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.draw

    def switchTurn(self) -> None:
        self.current_player = self.current_player.opponent

    def legal_moves(self) -> dict[Coordinate, tuple[Coordinate, ...]]:
        return legal_moves(self.board, self.current_player)

    def make_move(self, sequence: Iterable[Coordinate]) -> MoveResult:
        if self.is_over:
            raise GameOverError("The game is already over.")
        state_before = self.board.to_state()
        result = apply_move_sequence(self.board, sequence, self.current_player)
        self.move_history.append(
            MoveRecord(player=self.current_player, state_before=state_before, result=result)
        )
        self.evaluate_outcome()
        self.switchTurn()
        return result

    def evaluate_outcome(self) -> Optional[Color]:
        self.winner = outcome.winner(self.board)
        self.draw = self.winner is None and outcome.is_draw(self.board)
        if self.winner is not None:
            logger.info("Game over, %s wins after %d moves", self.winner.value, len(self.move_history))
        elif self.draw:
            logger.info("Game over, draw after %d moves", len(self.move_history))
        return self.winner

    def undo_move(self) -> bool:
        if not self.move_history:
            return False
        record = self.move_history.pop()
        self.board = Board.from_state(record.state_before)
        self.current_player = record.player
        self.winner = None
        self.draw = False
        return True

    def status_text(self) -> str:
        if self.winner is not None:
            return f"{self.winner.value.upper()} WINS"
        if self.draw:
            return "IT'S A DRAW"
        return f"{self.current_player.value.capitalize()} to move"
