"""Two-dimensional vectors and regular polygon meshes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

Color = tuple[float, float, float]

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def rotated(self, angle: float) -> Vec2:
        """The vector rotated counter-clockwise by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into the range [0, 2*pi)."""
    wrapped = angle % TWO_PI
    return 0.0 if wrapped == TWO_PI else wrapped


def regular_polygon(sides: int) -> list[Vec2]:
    """Triangle-fan vertices of a unit regular polygon.

    The fan starts at the centre, walks the border counter-clockwise from
    angle zero and repeats the first border vertex to close the shape.
    Fewer than three sides are raised to three.
    """
    sides = max(3, sides)
    step = TWO_PI / sides
    positions = [Vec2(0.0, 0.0)]
    positions.extend(
        Vec2(math.cos(k * step), math.sin(k * step)) for k in range(sides)
    )
    positions.append(positions[1])
    return positions


@dataclass(frozen=True)
class PolygonModel:
    """A triangle-fan polygon with one colour per vertex."""

    positions: tuple[Vec2, ...]
    colors: tuple[Color, ...]

    @property
    def vertex_count(self) -> int:
        return len(self.positions)


def polygon_model(sides: int, center_color: Color, border_color: Color) -> PolygonModel:
    """A regular polygon shaded from the centre colour to the border colour."""
    positions = regular_polygon(sides)
    colors = (tuple(center_color),) + (tuple(border_color),) * (len(positions) - 1)
    return PolygonModel(tuple(positions), colors)