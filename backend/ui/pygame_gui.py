from __future__ import annotations

import pygame
from pygame import gfxdraw

from checkers.board import BOARD_SIZE
from checkers.game import Game
from checkers.move import Coordinate
from checkers.pieces import Color, Piece
from checkers.rules import InvalidMoveError, MoveErrorKind, continuation_moves, validate_move_sequence


class CheckersGUI:
    def __init__(self, game: Game, square_size: int = 80, info_height: int = 150) -> None:
        self.game = game
        self.square_size = square_size
        self.board_pixels = self.square_size * BOARD_SIZE
        self.info_height = info_height

        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.small_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 24, bold=True)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.path: list[Coordinate] = []
        self.destinations: list[Coordinate] = []
        self.message = ""

        self.colors = {
            "light": (233, 210, 173),
            "dark": (145, 104, 66),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "white_piece": (245, 245, 245),
            "black_piece": (35, 35, 35),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "text": (230, 230, 230),
            "error": (255, 120, 110),
            "king": (255, 215, 0),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.game.reset()
                        self._clear_selection()
                    elif event.key == pygame.K_u:
                        self.game.undo_move()
                        self._clear_selection()
                    elif event.key == pygame.K_BACKSPACE:
                        self._clear_selection()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(60)

    def _clear_selection(self) -> None:
        self.path = []
        self.destinations = []

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None or self.game.is_over:
            return

        if self.path and cell in self.destinations:
            self._extend_path(cell)
            return

        piece = self.game.board.cell_at(cell)
        if piece is None or piece.color != self.game.current_player or len(self.path) > 1:
            self._clear_selection()
            return

        self.path = [cell]
        self.destinations = continuation_moves(self.game.board, self.path, self.game.current_player)
        self.message = ""

    def _extend_path(self, cell: Coordinate) -> None:
        self.path.append(cell)
        result = validate_move_sequence(self.game.board, self.path, self.game.current_player)
        if result.kind == MoveErrorKind.MUST_CONTINUE_JUMPING:
            self.destinations = continuation_moves(self.game.board, self.path, self.game.current_player)
            return
        try:
            self.game.make_move(self.path)
        except InvalidMoveError as exc:
            self.message = exc.message
        self._clear_selection()

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Coordinate | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return (y // self.square_size, x // self.square_size)

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()

    def _draw_board(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                color = self.colors["light"] if (row + col) % 2 == 0 else self.colors["dark"]
                pygame.draw.rect(self.screen, color, self._rect_for_cell(row, col))

        for idx in range(BOARD_SIZE):
            label = self.small_font.render(str(idx), True, self.colors["text"])
            offset = self.margin + idx * self.square_size + self.square_size // 2
            self.screen.blit(label, label.get_rect(center=(offset, self.margin - 18)))
            self.screen.blit(label, label.get_rect(center=(self.margin - 18, offset)))

    def _draw_selection(self) -> None:
        for row, col in self.path:
            pygame.draw.rect(self.screen, self.colors["selected"], self._rect_for_cell(row, col), 4)

        for dest in self.destinations:
            cx, cy = self._center_for_cell(*dest)
            gfxdraw.filled_circle(self.screen, cx, cy, 12, (*self.colors["highlight"], 160))
            gfxdraw.aacircle(self.screen, cx, cy, 12, self.colors["outline"])

    def _draw_pieces(self) -> None:
        radius = (self.square_size - 14) // 2
        for piece in self.game.board.all_pieces():
            center = self._center_for_cell(piece.row, piece.col)
            pygame.draw.circle(self.screen, self._piece_fill(piece), center, radius)
            pygame.draw.circle(self.screen, self.colors["outline"], center, radius, 2)
            if piece.is_king:
                king_color = self.colors["outline"] if piece.color == Color.WHITE else self.colors["king"]
                crown = self.king_font.render("K", True, king_color)
                self.screen.blit(crown, crown.get_rect(center=center))

    def _draw_info_panel(self) -> None:
        top = self.margin * 2 + self.board_pixels
        title = self.title_font.render(self.game.status_text(), True, self.colors["text"])
        self.screen.blit(title, (self.margin, top))

        counts = {color: len(self.game.board.pieces_of(color)) for color in Color}
        lines = [
            f"Black pieces: {counts[Color.BLACK]}   White pieces: {counts[Color.WHITE]}",
            f"Moves played: {len(self.game.move_history)}",
            "R: Reset  |  U: Undo  |  Backspace: Deselect  |  Esc/Q: Quit",
        ]
        y_offset = top + 36
        for line in lines:
            self.screen.blit(self.small_font.render(line, True, self.colors["text"]), (self.margin, y_offset))
            y_offset += 22
        if self.message:
            error = self.small_font.render(self.message, True, self.colors["error"])
            self.screen.blit(error, (self.margin, y_offset))

    def _piece_fill(self, piece: Piece) -> tuple[int, int, int]:
        return self.colors["white_piece"] if piece.color == Color.WHITE else self.colors["black_piece"]

    def _rect_for_cell(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(
            self.margin + col * self.square_size,
            self.margin + row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )
