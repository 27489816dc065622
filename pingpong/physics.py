"""Movement and bouncing of the ball and paddles."""

from __future__ import annotations

from collections.abc import Iterable

from pingpong.geometry import aabb, check_collision
from pingpong.model import BALL_DIAMETER, WINDOW_SIZE, Body, Collision, Vec2


def _ball_half_size() -> Vec2:
    radius = BALL_DIAMETER / 2.0
    return Vec2(radius, radius)


def check_collisions(ball: Body, colliders: Iterable[Body]) -> int:
    """Bounce the ball off any colliders it touches.

    Returns the number of collisions found.
    """
    hits = 0
    for collider in colliders:
        side = check_collision(
            aabb(ball.position, _ball_half_size()),
            aabb(collider.position, collider.scale * 0.5),
        )
        if side is None:
            continue
        hits += 1
        vx, vy = ball.velocity.x, ball.velocity.y
        reflect_x = (side is Collision.LEFT and vx > 0.0) or (
            side is Collision.RIGHT and vx < 0.0
        )
        reflect_y = (side is Collision.TOP and vy < 0.0) or (
            side is Collision.BOTTOM and vy > 0.0
        )
        ball.velocity = Vec2(-vx if reflect_x else vx, -vy if reflect_y else vy)
    return hits


def check_wall_collision(ball: Body) -> int:
    """Bounce the ball off the window edges.

    Returns the number of collisions: one per axis that bounced.
    """
    half_x, half_y = WINDOW_SIZE.x / 2.0, WINDOW_SIZE.y / 2.0
    radius = BALL_DIAMETER / 2.0
    x, y = ball.position.x, ball.position.y
    vx, vy = ball.velocity.x, ball.velocity.y
    hits = 0

    if x + radius > half_x or x - radius < -half_x:
        hits += 1
        vx = -vx
    if y + radius > half_y or y - radius < -half_y:
        hits += 1
        vy = -vy

    ball.velocity = Vec2(vx, vy)
    return hits


def _step_along(body: Body, direction: Vec2, dt: float) -> None:
    delta = direction.normalize_or_zero() * body.velocity * dt
    body.position = body.position + delta


def move_player(player: Body, up: bool, down: bool, dt: float) -> None:
    """Move the player paddle by the keys held down."""
    dy = (1.0 if up else 0.0) - (1.0 if down else 0.0)
    _step_along(player, Vec2(0.0, dy), dt)


def move_ball(ball: Body, dt: float) -> None:
    """Advance the ball along its velocity."""
    ball.position = ball.position + ball.velocity * dt


def move_enemy(enemy: Body, ball: Body, dt: float) -> None:
    """Move the enemy paddle towards the ball's height."""
    dy = 1.0 if ball.position.y > enemy.position.y else -1.0
    _step_along(enemy, Vec2(0.0, dy), dt)