"""The asteroids arena: a ship among scrolling stars that fires bullets."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Sequence

from glplayground.bullets import Bullets
from glplayground.gamedata import GameData, Input, State, Stopwatch
from glplayground.geometry import Vec2
from glplayground.ship import Ship, mouse_rotation
from glplayground.starlayers import StarLayers

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Asteroids"
STARS_PER_LAYER = 25
RESTART_DELAY = 5.0
FONT_SIZE = 60

MOUSE_LEFT = 1
MOUSE_RIGHT = 3

KEY_BINDINGS: dict[str, Input] = {
    "space": Input.FIRE,
    "up": Input.UP,
    "w": Input.UP,
    "down": Input.DOWN,
    "s": Input.DOWN,
    "left": Input.LEFT,
    "a": Input.LEFT,
    "right": Input.RIGHT,
    "d": Input.RIGHT,
}

MOUSE_BINDINGS: dict[int, Input] = {
    MOUSE_LEFT: Input.FIRE,
    MOUSE_RIGHT: Input.UP,
}

MESSAGES: dict[State, str] = {
    State.GAME_OVER: "Game Over!",
    State.WIN: "*You Win!*",
}


class AsteroidsGame:
    """Game state and rules, independent of any window or renderer.

    With ``with_scenery`` the arena also has parallax star layers and the
    ship can fire bullets; without it only the ship flies.
    """

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        with_scenery: bool = True,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.width = width
        self.height = height
        self.with_scenery = with_scenery
        self._rng = rng if rng is not None else random.Random()
        self.game_data = GameData()
        self.ship = Ship(clock=clock)
        self.restart_wait_timer = Stopwatch(clock)
        self.star_layers: StarLayers | None = None
        self.bullets: Bullets | None = None
        if with_scenery:
            self.star_layers = StarLayers(STARS_PER_LAYER, self._rng)
            self.bullets = Bullets()
        self.restart()

    def handle_key(self, key: str, pressed: bool) -> None:
        """Press or release the control bound to a named key."""
        control = KEY_BINDINGS.get(key.lower())
        if control is None:
            return
        if pressed:
            self.game_data.press(control)
        else:
            self.game_data.release(control)

    def handle_mouse_button(self, button: int, pressed: bool) -> None:
        """Left button fires, right button thrusts."""
        control = MOUSE_BINDINGS.get(button)
        if control is None:
            return
        if pressed:
            self.game_data.press(control)
        else:
            self.game_data.release(control)

    def handle_mouse_motion(self, x: int, y: int) -> None:
        """Point the ship from the viewport centre towards the mouse."""
        self.ship.set_rotation(mouse_rotation(x, y, self.width, self.height))

    def update(self, delta_time: float) -> None:
        """Advance the game by ``delta_time`` seconds."""
        if (
            self.game_data.state is not State.PLAYING
            and self.restart_wait_timer.elapsed() > RESTART_DELAY
        ):
            self.restart()
            return

        self.ship.update(self.game_data, delta_time)
        if self.star_layers is not None:
            self.star_layers.update(self.ship, delta_time)
        if self.bullets is not None:
            self.bullets.update(self.ship, self.game_data, delta_time)

    def restart(self) -> None:
        """Start a fresh round."""
        self.game_data.state = State.PLAYING
        if self.star_layers is not None:
            self.star_layers.reset(STARS_PER_LAYER)
        self.ship.reset()
        if self.bullets is not None:
            self.bullets.reset()

    def resize(self, width: int, height: int) -> None:
        """Record the new viewport size."""
        self.width = width
        self.height = height

    def message(self) -> str:
        """Banner text for the current state, empty while playing."""
        return MESSAGES.get(self.game_data.state, "")


def _to_screen(point: Vec2, width: int, height: int) -> tuple[float, float]:
    return ((point.x + 1.0) * 0.5 * width, (1.0 - point.y) * 0.5 * height)


def _ship_transform(ship: Ship, vertex: Vec2) -> Vec2:
    return vertex.rotated(ship.rotation) * ship.scale + ship.translation


def draw(game: AsteroidsGame, surface) -> None:
    """Render the game onto a pygame surface."""
    import pygame

    width, height = surface.get_size()
    surface.fill((0, 0, 0))

    if game.star_layers is not None:
        for layer in game.star_layers:
            radius = max(1, round(layer.point_size / 2))
            for offset in layer.copies():
                for star in layer.stars:
                    sx, sy = _to_screen(star.position + offset, width, height)
                    if -radius <= sx <= width + radius and -radius <= sy <= height + radius:
                        grey = round(255 * star.intensity)
                        pygame.draw.circle(surface, (grey, grey, grey), (sx, sy), radius)

    if game.bullets is not None:
        radius = max(1, round(game.bullets.scale * width / 2))
        for bullet in game.bullets:
            pygame.draw.circle(
                surface,
                (255, 255, 255),
                _to_screen(bullet.translation, width, height),
                radius,
            )

    ship = game.ship
    if game.game_data.state is State.PLAYING:
        with_trail = ship.show_trail(game.game_data)
        triangles = ship.triangles(with_trail)
        body = ship.triangles(False)
        trail = triangles[len(body):]
        for triangle in trail:
            points = [_to_screen(_ship_transform(ship, v), width, height) for v in triangle]
            pygame.draw.polygon(surface, (128, 128, 128), points)
        color = tuple(round(255 * c) for c in ship.color[:3])
        for triangle in body:
            points = [_to_screen(_ship_transform(ship, v), width, height) for v in triangle]
            pygame.draw.polygon(surface, color, points)

    text = game.message()
    if text:
        font = pygame.font.Font(None, FONT_SIZE)
        rendered = font.render(text, True, (255, 255, 255))
        rect = rendered.get_rect(center=(width / 2, height / 2))
        surface.blit(rendered, rect)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the asteroids window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="asteroids", description=WINDOW_TITLE)
    parser.add_argument(
        "--no-scenery",
        action="store_true",
        help="fly the ship alone, without stars and bullets",
    )
    args = parser.parse_args(argv)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode(
            (WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
        game = AsteroidsGame(WINDOW_WIDTH, WINDOW_HEIGHT, not args.no_scenery)
        ticker = pygame.time.Clock()
        running = True
        while running:
            delta_time = ticker.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    game.handle_key(
                        pygame.key.name(event.key), event.type == pygame.KEYDOWN
                    )
                elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                    game.handle_mouse_button(
                        event.button, event.type == pygame.MOUSEBUTTONDOWN
                    )
                elif event.type == pygame.MOUSEMOTION:
                    game.handle_mouse_motion(*event.pos)
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.w, event.h)
            game.update(delta_time)
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