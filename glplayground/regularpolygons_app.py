"""Regular polygons with radial gradients, spawned on a timer."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from glplayground.gamedata import Stopwatch
from glplayground.geometry import PolygonModel, Vec2, polygon_model

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Regular Polygons"

POLYGON_SIDES = 4
START_TRANSLATION = Vec2(1.0, 0.0)
TRANSLATION_STEP = 0.1
SCALE_RANGE = (0.01, 0.25)
DEFAULT_DELAY_MS = 200
DELAY_RANGE_MS = (0, 200)
DELAY_STEP_MS = 10


@dataclass(frozen=True)
class PlacedPolygon:
    """A polygon model with the offset and scale it is drawn at."""

    model: PolygonModel
    translation: Vec2
    scale: float

    def transformed(self) -> list[Vec2]:
        """Vertex positions after scaling and translating."""
        return [p * self.scale + self.translation for p in self.model.positions]


class PolygonSpawner:
    """Produces a new gradient polygon whenever the delay has passed.

    Every polygon has four sides and random centre and border colours.
    Each new polygon sits 0.1 further left than the one before, starting
    from x = 1, with a random scale between 1% and 25%.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        delay_ms: int = DEFAULT_DELAY_MS,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._delay_ms = DEFAULT_DELAY_MS
        self.delay_ms = delay_ms
        self.timer = Stopwatch(clock)
        self.translation = START_TRANSLATION

    @property
    def delay_ms(self) -> int:
        """Milliseconds to wait between polygons."""
        return self._delay_ms

    @delay_ms.setter
    def delay_ms(self, value: int) -> None:
        low, high = DELAY_RANGE_MS
        if not low <= value <= high:
            raise ValueError(f"delay must be between {low} and {high} ms")
        self._delay_ms = value

    def ready(self) -> bool:
        """Whether the delay has passed; if so the timer starts again."""
        if self.timer.elapsed() < self._delay_ms / 1000.0:
            return False
        self.timer.restart()
        return True

    def next_polygon(self) -> PlacedPolygon:
        """Build the next polygon and move the spawn point left."""
        rng = self._rng
        center = (rng.random(), rng.random(), rng.random())
        border = (rng.random(), rng.random(), rng.random())
        model = polygon_model(POLYGON_SIDES, center, border)
        self.translation = Vec2(self.translation.x - TRANSLATION_STEP, self.translation.y)
        scale = rng.uniform(*SCALE_RANGE)
        return PlacedPolygon(model, self.translation, scale)


def _to_screen(point: Vec2, width: int, height: int) -> tuple[float, float]:
    return ((point.x + 1.0) * 0.5 * width, (1.0 - point.y) * 0.5 * height)


def _rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(255 * c))) for c in color[:3])


def _draw_polygon(surface, polygon: PlacedPolygon) -> None:
    import pygame

    width, height = surface.get_size()
    points = [_to_screen(p, width, height) for p in polygon.transformed()]
    colors = polygon.model.colors
    center = points[0]
    for k in range(1, len(points) - 1):
        blend = tuple(
            (colors[0][c] + colors[k][c] + colors[k + 1][c]) / 3.0 for c in range(3)
        )
        pygame.draw.polygon(surface, _rgb(blend), [center, points[k], points[k + 1]])


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and keep spawning polygons until it is closed."""
    parser = argparse.ArgumentParser(prog="regularpolygons", description=WINDOW_TITLE)
    parser.add_argument(
        "--delay", type=int, default=DEFAULT_DELAY_MS, help="milliseconds between polygons"
    )
    args = parser.parse_args(argv)

    spawner = PolygonSpawner(delay_ms=args.delay)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 24)
        canvas = pygame.Surface(screen.get_size())
        canvas.fill((0, 0, 0))
        ticker = pygame.time.Clock()
        running = True
        while running:
            ticker.tick(60)
            width, height = screen.get_size()
            clear_button = pygame.Rect(width - 205, height - 40, 200, 30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    canvas = pygame.Surface((event.w, event.h))
                    canvas.fill((0, 0, 0))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if clear_button.collidepoint(event.pos):
                        canvas.fill((0, 0, 0))
                elif event.type == pygame.KEYDOWN:
                    low, high = DELAY_RANGE_MS
                    if event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_UP):
                        spawner.delay_ms = min(high, spawner.delay_ms + DELAY_STEP_MS)
                    elif event.key in (pygame.K_MINUS, pygame.K_DOWN):
                        spawner.delay_ms = max(low, spawner.delay_ms - DELAY_STEP_MS)
            if spawner.ready():
                _draw_polygon(canvas, spawner.next_polygon())
            screen.blit(canvas, (0, 0))
            label = font.render(f"Delay {spawner.delay_ms} ms", True, (255, 255, 255))
            screen.blit(label, (width - 205, height - 65))
            pygame.draw.rect(screen, (66, 150, 250), clear_button)
            text = font.render("Clear window", True, (255, 255, 255))
            screen.blit(text, text.get_rect(center=clear_button.center))
            pygame.display.flip()
    except pygame.error as exc:
        print(exc, file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())