from __future__ import annotations

from typing import Callable

from checkers.game import Game

from .render import render_board
from .schemas import parse_sequence

Reader = Callable[[str], str]
Writer = Callable[[str], None]

QUIT_WORDS = {"q", "quit", "exit"}
UNDO_WORDS = {"u", "undo"}


class ConsoleSession:
    """Text turn loop: prompt, parse, apply, repeat until the game ends."""

    def __init__(self, game: Game, read: Reader = input, write: Writer = print) -> None:
        self.game = game
        self.read = read
        self.write = write

    def run(self) -> None:
        while not self.game.is_over:
            if not self.play_turn():
                self.write("Goodbye.")
                return
        self.write(render_board(self.game.board))
        self.write(self.game.status_text())

    def play_turn(self) -> bool:
        """Handle one line of input; returns ``False`` when the player quits."""
        player = self.game.current_player
        self.write(f"{player.value.capitalize()} turn!")
        self.write(render_board(self.game.board))
        self.write("Type a sequence of coordinates you would like to move to (Ex: 2,1 3,2)")
        try:
            line = self.read("> ").strip()
        except EOFError:
            return False

        if line.lower() in QUIT_WORDS:
            return False
        if line.lower() in UNDO_WORDS:
            if not self.game.undo_move():
                self.write("No moves to undo.")
            return True

        try:
            result = self.game.make_move(parse_sequence(line))
        except ValueError as exc:
            self.write(str(exc))
            return True

        if result.captures:
            self.write(f"Captured {len(result.captures)} piece(s).")
        if result.crowned:
            self.write("Crowned!")
        return True
