"""The snake's head, its trailing body and the fruit it chases."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from glplayground.gamedata import GameData, Input
from glplayground.geometry import Vec2

GRID_SCALE = 0.09090909
FRUIT_CELL_RANGE = (-9, 9)

Color = tuple[float, float, float, float]

SNAKE_COLOR: Color = (0.0, 1.0, 0.0, 1.0)
FRUIT_COLOR: Color = (1.0, 0.0, 0.0, 1.0)

# Unit square drawn for every cell, as two triangles.
SQUARE_VERTICES: tuple[Vec2, ...] = (
    Vec2(1.0, 1.0),
    Vec2(1.0, 0.0),
    Vec2(0.0, 0.0),
    Vec2(0.0, 1.0),
)
SQUARE_INDICES: tuple[tuple[int, int, int], ...] = ((0, 1, 2), (0, 2, 3))


@dataclass
class Snake:
    """The snake's head, moving one cell per step on a wrapping grid.

    ``translation`` is the head's position in clip space; ``x`` and ``y``
    are its integer grid coordinates, used for self-collision checks.
    """

    color: Color = SNAKE_COLOR
    scale: float = GRID_SCALE
    translation: Vec2 = Vec2()
    x: int = 0
    y: int = 0

    def reset(self) -> None:
        """Move the head back to the centre of the screen.

        Only the on-screen position is reset; the grid coordinates keep
        their values.
        """
        self.translation = Vec2()

    def update(self, game_data: GameData) -> None:
        """Move one cell in every held direction, wrapping at the edges."""
        tx, ty = self.translation
        step = self.scale

        if game_data.is_pressed(Input.LEFT):
            tx -= step
            self.x -= 1
            if tx <= -1.0 - step:
                tx = 1.0 - step
                self.x = 10
        if game_data.is_pressed(Input.RIGHT):
            tx += step
            self.x += 1
            if tx >= 1.0:
                tx = -1.0
                self.x = -11
        if game_data.is_pressed(Input.UP):
            ty += step
            self.y += 1
            if ty >= 1.0:
                ty = -1.0
                self.y = -11
        if game_data.is_pressed(Input.DOWN):
            ty -= step
            self.y -= 1
            if ty <= -1.0 - step:
                ty = 1.0 - step
                self.y = 10

        self.translation = Vec2(tx, ty)


@dataclass
class BodyPiece:
    """One segment of the snake's body."""

    color: Color = SNAKE_COLOR
    scale: float = GRID_SCALE
    translation: Vec2 = Vec2()
    x: int = 0
    y: int = 0


@dataclass
class SnakeBody:
    """The segments trailing behind the head, nearest first."""

    pieces: list[BodyPiece] = field(default_factory=list)
    length: int = 0

    def update(self, snake: Snake) -> None:
        """Shift every segment into the place of the one ahead of it."""
        for index in range(len(self.pieces) - 1, -1, -1):
            leader = snake if index == 0 else self.pieces[index - 1]
            piece = self.pieces[index]
            piece.translation = leader.translation
            piece.x = leader.x
            piece.y = leader.y

    def create_piece(self, snake: Snake, index: int) -> BodyPiece:
        """A new segment placed on the head or on the segment before ``index``.

        A piece at index zero takes the head's position and grid
        coordinates; any later piece takes the on-screen position of the
        previous piece and starts at grid cell (0, 0).
        """
        piece = BodyPiece()
        if index == 0:
            piece.translation = Vec2(snake.translation.x, snake.translation.y)
            piece.x = snake.x
            piece.y = snake.x
        else:
            previous = self.pieces[index - 1]
            piece.translation = Vec2(previous.translation.x, previous.translation.y)
        return piece

    def clear(self) -> None:
        """Remove every segment."""
        self.pieces.clear()
        self.length = 0


@dataclass
class Fruit:
    """A fruit placed on a random grid cell."""

    rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )
    color: Color = FRUIT_COLOR
    scale: float = GRID_SCALE
    translation: Vec2 = Vec2()

    def __post_init__(self) -> None:
        self.spawn()

    def spawn(self) -> None:
        """Move the fruit to a random cell of the grid."""
        low, high = FRUIT_CELL_RANGE
        self.translation = Vec2(
            self.rng.randint(low, high) * self.scale,
            self.rng.randint(low, high) * self.scale,
        )