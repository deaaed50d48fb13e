"""Bullets fired in pairs from the ship's cannons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from glplayground.gamedata import GameData, Input, State
from glplayground.geometry import Vec2, regular_polygon
from glplayground.ship import Ship

COOLDOWN = 250.0 / 1000.0
BULLET_SPEED = 2.0
RECOIL = 0.1
CANNON_OFFSET = 11.0 / 15.5
SCREEN_LIMIT = 1.1
BULLET_SIDES = 10


@dataclass
class Bullet:
    """A single bullet in flight."""

    dead: bool = False
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()


@dataclass
class Bullets:
    """All bullets currently in flight."""

    scale: float = 0.015
    _bullets: list[Bullet] = field(default_factory=list, repr=False)

    @property
    def shape(self) -> list[Vec2]:
        """Triangle-fan vertices of the bullet's disc."""
        return regular_polygon(BULLET_SIDES)

    def reset(self) -> None:
        """Remove every bullet."""
        self._bullets.clear()

    def update(self, ship: Ship, game_data: GameData, delta_time: float) -> None:
        """Fire new bullets if allowed, move them and drop those off screen."""
        if (
            game_data.is_pressed(Input.FIRE)
            and game_data.state is State.PLAYING
            and ship.bullet_cooldown_timer.elapsed() > COOLDOWN
        ):
            ship.bullet_cooldown_timer.restart()
            forward = ship.forward
            offset = ship.right * (CANNON_OFFSET * ship.scale)
            velocity = ship.velocity + forward * BULLET_SPEED
            self._bullets.append(Bullet(False, ship.translation + offset, velocity))
            self._bullets.append(Bullet(False, ship.translation - offset, velocity))
            ship.velocity = ship.velocity - forward * RECOIL

        for bullet in self._bullets:
            bullet.translation = (
                bullet.translation
                - ship.velocity * delta_time
                + bullet.velocity * delta_time
            )
            x, y = bullet.translation
            if abs(x) > SCREEN_LIMIT or abs(y) > SCREEN_LIMIT:
                bullet.dead = True

        self._bullets = [bullet for bullet in self._bullets if not bullet.dead]

    def __iter__(self) -> Iterator[Bullet]:
        return iter(self._bullets)

    def __len__(self) -> int:
        return len(self._bullets)