"""A two-player tic-tac-toe board played by clicking cells."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Sequence

EMPTY = " "
CROSS = "X"
NOUGHT = "O"
CELL_COUNT = 9
COLUMNS = 3

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "First App"
PANEL_TITLE = "Tic-Tac-Toe"
CLEAR_COLOR = (0.906, 0.910, 0.918, 1.0)

BUTTON_SIZE = 100
RESTART_HEIGHT = 50
MARGIN = 20
LABEL_HEIGHT = 40


@dataclass
class TicTacToe:
    """Board of nine cells; players alternate placing their mark.

    Marks are placed only on empty cells. There is no winner detection:
    the board simply fills up until it is restarted.
    """

    cells: list[str] = field(default_factory=lambda: [EMPTY] * CELL_COUNT)
    turn: str = CROSS

    def click(self, cell: int) -> bool:
        """Place the current player's mark on ``cell`` if it is empty.

        Returns whether a mark was placed. Raises ``IndexError`` for a cell
        outside the board.
        """
        if not 0 <= cell < CELL_COUNT:
            raise IndexError(f"cell {cell} is outside the board")
        if self.cells[cell] != EMPTY:
            return False
        self.cells[cell] = self.turn
        self.turn = NOUGHT if self.turn == CROSS else CROSS
        return True

    def restart(self) -> None:
        """Empty every cell; whoever's turn it is keeps it."""
        self.cells = [EMPTY] * CELL_COUNT

    @property
    def status(self) -> str:
        """Text announcing whose turn it is."""
        return f"{self.turn} turn"

    def rows(self) -> list[list[str]]:
        """The board as three rows of three cells."""
        return [self.cells[start:start + COLUMNS] for start in range(0, CELL_COUNT, COLUMNS)]


def _layout(width: int):
    import pygame

    grid_left = MARGIN
    grid_top = MARGIN + LABEL_HEIGHT
    cells = [
        pygame.Rect(
            grid_left + (index % COLUMNS) * BUTTON_SIZE,
            grid_top + (index // COLUMNS) * BUTTON_SIZE,
            BUTTON_SIZE - 4,
            BUTTON_SIZE - 4,
        )
        for index in range(CELL_COUNT)
    ]
    restart = pygame.Rect(
        MARGIN,
        grid_top + COLUMNS * BUTTON_SIZE + MARGIN // 2,
        width - 2 * MARGIN,
        RESTART_HEIGHT,
    )
    return cells, restart


def _draw(game: TicTacToe, surface, font) -> None:
    import pygame

    width, _ = surface.get_size()
    surface.fill(tuple(round(255 * c) for c in CLEAR_COLOR[:3]))
    label = font.render(game.status, True, (20, 20, 20))
    surface.blit(label, (MARGIN, MARGIN))

    cells, restart = _layout(width)
    for mark, rect in zip(game.cells, cells):
        pygame.draw.rect(surface, (66, 150, 250), rect)
        text = font.render(mark, True, (255, 255, 255))
        surface.blit(text, text.get_rect(center=rect.center))

    pygame.draw.rect(surface, (66, 150, 250), restart)
    text = font.render("Restart Game", True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=restart.center))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the tic-tac-toe window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="tictactoe", description=PANEL_TITLE)
    parser.parse_args(argv)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        print(f"Initial window size: {WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        font = pygame.font.Font(None, 48)
        game = TicTacToe()
        ticker = pygame.time.Clock()
        running = True
        while running:
            ticker.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    cells, restart = _layout(screen.get_width())
                    if restart.collidepoint(event.pos):
                        game.restart()
                    for index, rect in enumerate(cells):
                        if rect.collidepoint(event.pos):
                            game.click(index)
            _draw(game, screen, font)
            pygame.display.flip()
    except pygame.error as exc:
        print(exc, file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())