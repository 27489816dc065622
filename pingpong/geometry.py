"""Axis-aligned boxes, collision sides and colour helpers."""

from __future__ import annotations

from dataclasses import dataclass

from pingpong.model import Collision, Vec2


@dataclass(frozen=True)
class Aabb2d:
    """An axis-aligned bounding box given by its corners."""

    min: Vec2
    max: Vec2

    def center(self) -> Vec2:
        """Return the centre point of the box."""
        return (self.min + self.max) * 0.5

    def intersects(self, other: Aabb2d) -> bool:
        """Return whether the boxes overlap or touch."""
        x_overlaps = self.min.x <= other.max.x and self.max.x >= other.min.x
        y_overlaps = self.min.y <= other.max.y and self.max.y >= other.min.y
        return x_overlaps and y_overlaps

    def closest_point(self, point: Vec2) -> Vec2:
        """Return the point of the box nearest to ``point``."""
        return Vec2(
            min(max(point.x, self.min.x), self.max.x),
            min(max(point.y, self.min.y), self.max.y),
        )


def aabb(center: Vec2, half_size: Vec2) -> Aabb2d:
    """Build a box from its centre and half extents."""
    return Aabb2d(center - half_size, center + half_size)


def check_collision(a: Aabb2d, b: Aabb2d) -> Collision | None:
    """Return the side of ``b`` that ``a`` hit, or None if they do not touch."""
    if not a.intersects(b):
        return None

    offset = a.center() - b.closest_point(a.center())
    if abs(offset.x) > abs(offset.y):
        return Collision.LEFT if offset.x < 0.0 else Collision.RIGHT
    return Collision.TOP if offset.y > 0.0 else Collision.BOTTOM


def from_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert 0-255 channel values to 0-1 floats."""
    return (r / 255.0, g / 255.0, b / 255.0)