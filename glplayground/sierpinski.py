"""The chaos game that draws a Sierpinski triangle one point at a time."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from glplayground.geometry import Vec2

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Sierpinski Triangle"
POINT_SIZE = 2

VERTICES: tuple[Vec2, Vec2, Vec2] = (Vec2(0.0, 1.0), Vec2(-1.0, -1.0), Vec2(1.0, -1.0))


class ChaosGame:
    """A point that repeatedly jumps halfway to a random triangle vertex."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.vertices = VERTICES
        self.position = Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))

    def step(self) -> Vec2:
        """Return the current point, then move halfway to a random vertex."""
        current = self.position
        target = self.vertices[self._rng.randint(0, len(self.vertices) - 1)]
        self.position = (current + target) / 2.0
        return current


def _to_screen(point: Vec2, width: int, height: int) -> tuple[int, int]:
    return (round((point.x + 1.0) * 0.5 * width), round((1.0 - point.y) * 0.5 * height))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and keep plotting points until it is closed."""
    parser = argparse.ArgumentParser(prog="sierpinski", description=WINDOW_TITLE)
    parser.parse_args(argv)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 24)
        game = ChaosGame()
        clear_button = pygame.Rect(5, 5 + 50 + 16 + 5, 150, 30)
        canvas = pygame.Surface(screen.get_size())
        canvas.fill((0, 0, 0))
        ticker = pygame.time.Clock()
        running = True
        while running:
            ticker.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    canvas = pygame.Surface((event.w, event.h))
                    canvas.fill((0, 0, 0))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if clear_button.collidepoint(event.pos):
                        canvas.fill((0, 0, 0))
            point = game.step()
            x, y = _to_screen(point, *canvas.get_size())
            canvas.fill((255, 255, 255), (x, y, POINT_SIZE, POINT_SIZE))
            screen.blit(canvas, (0, 0))
            pygame.draw.rect(screen, (66, 150, 250), clear_button)
            label = font.render("Clear window", True, (255, 255, 255))
            screen.blit(label, label.get_rect(center=clear_button.center))
            pygame.display.flip()
    except pygame.error as exc:
        print(exc, file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())