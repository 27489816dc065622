"""Core value types and configuration for the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector in this direction.

        Raises ValueError for a vector that has no direction.
        """
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return Vec2(self.x / length, self.y / length)

    def normalize_or_zero(self) -> Vec2:
        """Return the unit vector in this direction, or the zero vector."""
        try:
            return self.normalize()
        except ValueError:
            return Vec2(0.0, 0.0)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float | Vec2) -> Vec2:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(factor, Vec2):
            return Vec2(self.x * factor.x, self.y * factor.y)
        if isinstance(factor, (int, float)):
            return Vec2(self.x * factor, self.y * factor)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


WINDOW_SIZE = Vec2(1000.0, 700.0)
BALL_DIAMETER = 40.0
PADDLE_SIZE = Vec2(20.0, 100.0)


class Collision(Enum):
    """The side of a box that another box touched."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class Body:
    """A moving object: where it is, how fast it goes and how big it is."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))


@dataclass(frozen=True)
class GameConfig:
    """Tunable settings of a game round."""

    window_size: Vec2 = WINDOW_SIZE
    ball_speed: float = 300.0
    player_speed: float = 300.0
    enemy_speed: float = 150.0