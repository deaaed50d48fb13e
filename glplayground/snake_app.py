"""The snake game: eat fruit, grow, and avoid biting your own tail."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Sequence

from glplayground.gamedata import GameData, Input, State, Stopwatch
from glplayground.geometry import Vec2
from glplayground.snake import Fruit, Snake, SnakeBody

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Snake"
RESTART_DELAY = 5.0
STEP_INTERVAL = 0.1
FONT_SIZE = 60
GAME_OVER_TEXT = "Game Over!"

# Each key moves in a direction unless the snake is heading the opposite way.
KEY_BINDINGS: dict[str, tuple[Input, Input]] = {
    "up": (Input.UP, Input.DOWN),
    "w": (Input.UP, Input.DOWN),
    "down": (Input.DOWN, Input.UP),
    "s": (Input.DOWN, Input.UP),
    "left": (Input.LEFT, Input.RIGHT),
    "a": (Input.LEFT, Input.RIGHT),
    "right": (Input.RIGHT, Input.LEFT),
    "d": (Input.RIGHT, Input.LEFT),
}


class SnakeGame:
    """Game state and rules, independent of any window or renderer."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.width = width
        self.height = height
        self.game_data = GameData()
        self.snake = Snake()
        self.body = SnakeBody()
        self.fruit = Fruit(rng=rng if rng is not None else random.Random())
        self.step_timer = Stopwatch(clock)
        self.restart_wait_timer = Stopwatch(clock)
        self.restart()

    def handle_key(self, key: str) -> None:
        """Turn the snake in response to a key press, never straight back."""
        if self.game_data.state is not State.PLAYING:
            return
        binding = KEY_BINDINGS.get(key.lower())
        if binding is None:
            return
        direction, opposite = binding
        if not self.game_data.is_pressed(opposite):
            self.game_data.clear()
            self.game_data.press(direction)

    def update(self) -> bool:
        """Advance the game if a step is due; return whether it moved."""
        if (
            self.game_data.state is not State.PLAYING
            and self.restart_wait_timer.elapsed() > RESTART_DELAY
        ):
            self.restart()
            return False

        if self.step_timer.elapsed() < STEP_INTERVAL:
            return False
        self.step_timer.restart()

        self.body.update(self.snake)
        self.snake.update(self.game_data)

        if self.game_data.state is State.PLAYING:
            self.check_collisions()
        return True

    def check_collisions(self) -> None:
        """Grow on reaching the fruit; end the game on biting the body."""
        reach = self.snake.scale * 0.1 + self.fruit.scale * 0.1
        if self.snake.translation.distance(self.fruit.translation) < reach:
            self.fruit.spawn()
            self.body.pieces.append(self.body.create_piece(self.snake, self.body.length))
            self.body.length += 1

        if self.body.length >= 1:
            head = (self.snake.x, self.snake.y)
            if any((piece.x, piece.y) == head for piece in self.body.pieces[1:]):
                self.game_data.state = State.GAME_OVER
                self.game_data.clear()
                self.restart_wait_timer.restart()

    def restart(self) -> None:
        """Start a fresh round heading up."""
        self.snake.reset()
        self.fruit.spawn()
        self.game_data.press(Input.UP)
        self.body.clear()
        self.game_data.state = State.PLAYING

    def resize(self, width: int, height: int) -> None:
        """Record the new viewport size."""
        self.width = width
        self.height = height


def _cell_rect(translation: Vec2, scale: float, width: int, height: int):
    import pygame

    left = (translation.x + 1.0) * 0.5 * width
    top = (1.0 - (translation.y + scale)) * 0.5 * height
    size_x = max(1, round(scale * 0.5 * width))
    size_y = max(1, round(scale * 0.5 * height))
    return pygame.Rect(round(left), round(top), size_x, size_y)


def _rgb(color: tuple[float, ...]) -> tuple[int, int, int]:
    return tuple(round(255 * c) for c in color[:3])


def draw(game: SnakeGame, surface) -> None:
    """Render the game onto a pygame surface."""
    import pygame

    width, height = surface.get_size()
    surface.fill((0, 0, 0))
    playing = game.game_data.state is State.PLAYING

    if playing:
        snake = game.snake
        pygame.draw.rect(
            surface, _rgb(snake.color),
            _cell_rect(snake.translation, snake.scale, width, height),
        )

    for piece in game.body.pieces:
        pygame.draw.rect(
            surface, _rgb(piece.color),
            _cell_rect(piece.translation, piece.scale, width, height),
        )

    if playing:
        fruit = game.fruit
        pygame.draw.rect(
            surface, _rgb(fruit.color),
            _cell_rect(fruit.translation, fruit.scale, width, height),
        )
    else:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, FONT_SIZE)
        rendered = font.render(GAME_OVER_TEXT, True, (255, 255, 255))
        surface.blit(rendered, rendered.get_rect(center=(width / 2, height / 2)))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the snake window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="snake", description=WINDOW_TITLE)
    parser.parse_args(argv)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode(
            (WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
        game = SnakeGame(WINDOW_WIDTH, WINDOW_HEIGHT)
        ticker = pygame.time.Clock()
        running = True
        while running:
            ticker.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(pygame.key.name(event.key))
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.w, event.h)
            game.update()
            draw(game, screen)
            pygame.display.flip()
    except pygame.error as exc:
        print(exc, file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())