"""Random triangles with one editable colour per vertex."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from glplayground.geometry import PolygonModel, Vec2

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Colored Triangles"
POSITION_RANGE = (-1.5, 1.5)

Color = tuple[float, float, float, float]

DEFAULT_VERTEX_COLORS: tuple[Color, Color, Color] = (
    (0.36, 0.83, 1.00, 1.0),
    (0.63, 0.00, 0.61, 1.0),
    (1.00, 0.69, 0.30, 1.0),
)


class ColoredTriangles:
    """Produces triangles at random positions with the current vertex colours."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.vertex_colors: list[Color] = list(DEFAULT_VERTEX_COLORS)

    def random_triangle(self) -> PolygonModel:
        """A triangle whose corners lie anywhere in [-1.5, 1.5] on both axes."""
        low, high = POSITION_RANGE
        positions = tuple(
            Vec2(self._rng.uniform(low, high), self._rng.uniform(low, high))
            for _ in range(3)
        )
        return PolygonModel(positions, tuple(self.vertex_colors))

    def set_vertex_color(self, index: int, color: Sequence[float]) -> None:
        """Set the RGB colour of one vertex, keeping its alpha."""
        if not 0 <= index < len(self.vertex_colors):
            raise IndexError(f"vertex {index} does not exist")
        if len(color) != 3:
            raise ValueError("a vertex colour needs exactly three components")
        r, g, b = (float(c) for c in color)
        self.vertex_colors[index] = (r, g, b, self.vertex_colors[index][3])


def _to_screen(point: Vec2, width: int, height: int) -> tuple[float, float]:
    return ((point.x + 1.0) * 0.5 * width, (1.0 - point.y) * 0.5 * height)


def _blend(colors: Sequence[Color]) -> tuple[int, int, int]:
    count = len(colors)
    return tuple(
        max(0, min(255, round(255 * sum(c[k] for c in colors) / count)))
        for k in range(3)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and keep drawing random triangles until it is closed."""
    parser = argparse.ArgumentParser(prog="coloredtriangles", description=WINDOW_TITLE)
    for index in range(3):
        parser.add_argument(
            f"--v{index}",
            nargs=3,
            type=float,
            metavar=("R", "G", "B"),
            help=f"colour of vertex {index}, components in [0, 1]",
        )
    args = parser.parse_args(argv)

    scene = ColoredTriangles()
    for index in range(3):
        color = getattr(args, f"v{index}")
        if color is not None:
            scene.set_vertex_color(index, color)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        screen.fill((0, 0, 0))
        ticker = pygame.time.Clock()
        running = True
        while running:
            ticker.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen.fill((0, 0, 0))
            triangle = scene.random_triangle()
            width, height = screen.get_size()
            points = [_to_screen(p, width, height) for p in triangle.positions]
            pygame.draw.polygon(screen, _blend(triangle.colors), points)
            pygame.display.flip()
    except pygame.error as exc:
        print(exc, file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())