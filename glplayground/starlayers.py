"""Parallax layers of stars that scroll against the ship's motion."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator

from glplayground.geometry import Vec2
from glplayground.ship import Ship

LAYER_COUNT = 5


@dataclass(frozen=True)
class Star:
    """A star's position in layer space and its grey intensity."""

    position: Vec2
    intensity: float


@dataclass
class StarLayer:
    """One layer of stars drawn at a common point size and offset."""

    point_size: float = 0.0
    quantity: int = 0
    translation: Vec2 = Vec2()
    stars: list[Star] = field(default_factory=list)

    def copies(self) -> list[Vec2]:
        """Offsets of the 3x3 tiling that covers the screen while wrapping."""
        return [
            Vec2(self.translation.x + j, self.translation.y + i)
            for i in (-2, 0, 2)
            for j in (-2, 0, 2)
        ]


class StarLayers:
    """Five star layers; nearer layers are denser and scroll faster."""

    def __init__(
        self, quantity: int = 25, rng: random.Random | None = None
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.layers: list[StarLayer] = []
        self.reset(quantity)

    def reset(self, quantity: int) -> None:
        """Regenerate every layer with ``quantity`` stars per depth step."""
        rng = self._rng
        self.layers = []
        for index in range(LAYER_COUNT):
            count = quantity * (index + 1)
            stars = []
            for _ in range(count):
                x = rng.uniform(-1.0, 1.0)
                y = rng.uniform(-1.0, 1.0)
                stars.append(Star(Vec2(x, y), rng.uniform(0.5, 1.0)))
            self.layers.append(
                StarLayer(
                    point_size=10.0 / (1.0 + index),
                    quantity=count,
                    translation=Vec2(),
                    stars=stars,
                )
            )

    def update(self, ship: Ship, delta_time: float) -> None:
        """Scroll each layer against the ship's velocity and wrap it."""
        for index, layer in enumerate(self.layers):
            speed_scale = 1.0 / (index + 2.0)
            x, y = layer.translation - ship.velocity * (delta_time * speed_scale)
            if x < -1.0:
                x += 2.0
            if x > 1.0:
                x -= 2.0
            if y < -1.0:
                y += 2.0
            if y > 1.0:
                y -= 2.0
            layer.translation = Vec2(x, y)

    def __iter__(self) -> Iterator[StarLayer]:
        return iter(self.layers)