"""The player's ship: its outline, steering and thrust."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Callable

from glplayground.gamedata import GameData, Input, State, Stopwatch
from glplayground.geometry import Vec2, wrap_angle

Triangle = tuple[Vec2, Vec2, Vec2]

_OUTLINE_SIZE = 15.5

_RAW_POSITIONS = (
    # Ship body
    (-2.5, +12.5), (-15.5, +2.5),
    (-15.5, -12.5), (-9.5, -7.5),
    (-3.5, -12.5), (+3.5, -12.5),
    (+9.5, -7.5), (+15.5, -12.5),
    (+15.5, +2.5), (+2.5, +12.5),
    # Cannon left
    (-12.5, +10.5), (-12.5, +4.0),
    (-9.5, +4.0), (-9.5, +10.5),
    # Cannon right
    (+9.5, +10.5), (+9.5, +4.0),
    (+12.5, +4.0), (+12.5, +10.5),
    # Thruster trail (left)
    (-12.0, -7.5), (-9.5, -18.0), (-7.0, -7.5),
    # Thruster trail (right)
    (+7.0, -7.5), (+9.5, -18.0), (+12.0, -7.5),
)

SHIP_POSITIONS: tuple[Vec2, ...] = tuple(
    Vec2(x, y) / _OUTLINE_SIZE for x, y in _RAW_POSITIONS
)

SHIP_INDICES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 3),
    (1, 2, 3),
    (0, 3, 4),
    (0, 4, 5),
    (9, 0, 5),
    (9, 5, 6),
    (9, 6, 8),
    (8, 6, 7),
    # Cannons
    (10, 11, 12),
    (10, 12, 13),
    (14, 15, 16),
    (14, 16, 17),
    # Thruster trails
    (18, 19, 20),
    (21, 22, 23),
)

BODY_TRIANGLES = 12
TRAIL_TRIANGLES = 14

TURN_SPEED = 4.0
TRAIL_PERIOD = 100.0 / 1000.0
TRAIL_VISIBLE = 50.0 / 1000.0


@dataclass
class Ship:
    """A ship that stays at the centre of the screen and turns and thrusts."""

    clock: Callable[[], float] = field(
        default=time.perf_counter, repr=False, compare=False
    )
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    rotation: float = 0.0
    scale: float = 0.125
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()
    trail_blink_timer: Stopwatch = field(init=False, repr=False, compare=False)
    bullet_cooldown_timer: Stopwatch = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.trail_blink_timer = Stopwatch(self.clock)
        self.bullet_cooldown_timer = Stopwatch(self.clock)

    def reset(self) -> None:
        """Put the ship back at rest, facing up, at the centre."""
        self.rotation = 0.0
        self.translation = Vec2()
        self.velocity = Vec2()

    def set_rotation(self, rotation: float) -> None:
        """Point the ship at an absolute angle in radians."""
        self.rotation = rotation

    @property
    def forward(self) -> Vec2:
        """Unit vector the ship's nose points along."""
        return Vec2(0.0, 1.0).rotated(self.rotation)

    @property
    def right(self) -> Vec2:
        """Unit vector to the ship's right-hand side."""
        return Vec2(1.0, 0.0).rotated(self.rotation)

    def update(self, game_data: GameData, delta_time: float) -> None:
        """Turn and thrust according to the controls held down."""
        if game_data.is_pressed(Input.LEFT):
            self.rotation = wrap_angle(self.rotation + TURN_SPEED * delta_time)
        if game_data.is_pressed(Input.RIGHT):
            self.rotation = wrap_angle(self.rotation - TURN_SPEED * delta_time)

        if game_data.is_pressed(Input.UP) and game_data.state is State.PLAYING:
            self.velocity = self.velocity + self.forward * delta_time

    def show_trail(self, game_data: GameData) -> bool:
        """Whether the blinking thruster trail is visible in this frame.

        The blink timer restarts every 100 ms; while thrusting, the trail
        shows during the first 50 ms of each period.
        """
        if game_data.state is not State.PLAYING:
            return False
        if self.trail_blink_timer.elapsed() > TRAIL_PERIOD:
            self.trail_blink_timer.restart()
        return (
            game_data.is_pressed(Input.UP)
            and self.trail_blink_timer.elapsed() < TRAIL_VISIBLE
        )

    def triangles(self, with_trail: bool) -> list[Triangle]:
        """Model-space triangles of the outline, optionally with the trail."""
        count = TRAIL_TRIANGLES if with_trail else BODY_TRIANGLES
        return [
            (SHIP_POSITIONS[a], SHIP_POSITIONS[b], SHIP_POSITIONS[c])
            for a, b, c in SHIP_INDICES[:count]
        ]


def mouse_rotation(x: int, y: int, width: int, height: int) -> float:
    """Ship rotation that points from the viewport centre to the mouse."""
    dx = x - width // 2
    dy = -(y - height // 2)
    return math.atan2(dy, dx) - math.pi / 2