"""Console front-end: input parsing, text rendering and the turn loop."""

from .render import render_board
from .schemas import InputError, parse_sequence
from .session import ConsoleSession

__all__ = ["ConsoleSession", "InputError", "parse_sequence", "render_board"]
