from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from checkers.game import Game
from checkers.pieces import Color

from .session import ConsoleSession


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play a game of checkers.")
	parser.add_argument("--ui", choices=("console", "gui"), default="console", help="Front-end to play with.")
	parser.add_argument(
		"--first",
		choices=[color.value for color in Color],
		default=Color.BLACK.value,
		help="Color that moves first.",
	)
	parser.add_argument("--log-level", default="warning", help="Logging level for the rules engine.")
	return parser.parse_args(argv)


def run_gui(game: Game) -> None:
	import pygame

	from ui.pygame_gui import CheckersGUI

	pygame.init()
	try:
		CheckersGUI(game).run()
	finally:
		pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
	args = parse_args(argv)
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	game = Game(first_player=Color(args.first))
	if args.ui == "gui":
		run_gui(game)
	else:
		ConsoleSession(game).run()
