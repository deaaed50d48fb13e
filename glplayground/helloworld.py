"""A coloured triangle with a small panel of example widgets."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Sequence

from glplayground.geometry import PolygonModel, Vec2

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Hello, World!"

COMBO_ITEMS: tuple[str, ...] = ("First item", "Second item", "Third item", "Fourth item")
DEFAULT_CLEAR_COLOR = (0.906, 0.910, 0.918, 1.0)

TRIANGLE = PolygonModel(
    positions=(Vec2(0.0, 0.5), Vec2(0.5, -0.5), Vec2(-0.5, -0.5)),
    colors=((1.0, 0.0, 0.0), (1.0, 0.0, 1.0), (0.0, 1.0, 0.0)),
)


@dataclass
class HelloWorld:
    """State of the example widgets and the triangle they sit beside."""

    current_index: int = 0
    show_demo_window: bool = False
    show_another_window: bool = False
    slider: float = 0.0
    clear_color: tuple[float, float, float, float] = DEFAULT_CLEAR_COLOR
    items: tuple[str, ...] = field(default=COMBO_ITEMS)

    @property
    def selected(self) -> str:
        """The combo box entry currently chosen."""
        return self.items[self.current_index]

    def select(self, index: int) -> str:
        """Choose a combo box entry by position and return it."""
        if not 0 <= index < len(self.items):
            raise IndexError(f"item {index} does not exist")
        self.current_index = index
        return self.items[index]

    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the background RGB colour, keeping its alpha."""
        if len(color) != 3:
            raise ValueError("a background colour needs exactly three components")
        r, g, b = (float(c) for c in color)
        self.clear_color = (r, g, b, self.clear_color[3])

    def triangle(self) -> PolygonModel:
        """The red, magenta and green triangle drawn in the middle."""
        return TRIANGLE


def _to_screen(point: Vec2, width: int, height: int) -> tuple[float, float]:
    return ((point.x + 1.0) * 0.5 * width, (1.0 - point.y) * 0.5 * height)


def _rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(255 * c))) for c in color[:3])


def _draw(app: HelloWorld, surface, font) -> None:
    import pygame

    width, height = surface.get_size()
    surface.fill(_rgb(app.clear_color))
    model = app.triangle()
    points = [_to_screen(p, width, height) for p in model.positions]
    blend = tuple(sum(c[k] for c in model.colors) / len(model.colors) for k in range(3))
    pygame.draw.polygon(surface, _rgb(blend), points)
    for point, color in zip(points, model.colors):
        pygame.draw.circle(surface, _rgb(color), point, 6)

    lines = [
        "Some example widgets are given below.",
        f"Combo (1-4): {app.selected}",
        f"[d] Show demo window: {app.show_demo_window}",
        f"[a] Show another window: {app.show_another_window}",
        f"[left/right] Slider: {app.slider:.3f}",
    ]
    if app.show_another_window:
        lines.append("Hello from another window!")
    for row, line in enumerate(lines):
        surface.blit(font.render(line, True, (20, 20, 20)), (5, 75 + row * 22))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="helloworld", description=WINDOW_TITLE)
    parser.parse_args(argv)

    import pygame

    app = HelloWorld()
    try:
        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 24)
        ticker = pygame.time.Clock()
        running = True
        while running:
            ticker.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    name = pygame.key.name(event.key)
                    if name in ("1", "2", "3", "4"):
                        app.select(int(name) - 1)
                    elif name == "d":
                        app.show_demo_window = not app.show_demo_window
                    elif name == "a":
                        app.show_another_window = not app.show_another_window
                    elif name == "left":
                        app.slider = max(0.0, app.slider - 0.05)
                    elif name == "right":
                        app.slider = min(1.0, app.slider + 0.05)
            _draw(app, screen, font)
            pygame.display.flip()
    except pygame.error as exc:
        print(exc, file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())