"""The playing field: paddles, ball and score, and one frame of play."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from pingpong.model import (
    BALL_DIAMETER,
    PADDLE_SIZE,
    WINDOW_SIZE,
    Body,
    GameConfig,
    Vec2,
)
from pingpong.physics import (
    check_collisions,
    check_wall_collision,
    move_ball,
    move_enemy,
    move_player,
)

INSTRUCTIONS = "Move use Vim motions J(Down) and K(Up)"
SCORE_LABEL = "Score: "
PADDLE_MARGIN = 20.0

WORLD_COLOR = (0.2, 0.2, 0.3)
PLAYER_COLOR = (1.25, 2.4, 2.1)
ENEMY_COLOR = (1.25, 0.4, 0.1)
BALL_COLOR = (1.25, 1.25, 1.25)


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class World:
    """Everything that takes part in a round of play."""

    config: GameConfig
    player: Body
    enemy: Body
    ball: Body
    score: int = 0

    @property
    def colliders(self) -> tuple[Body, Body]:
        """The bodies the ball bounces off."""
        return (self.player, self.enemy)

    def check_for_score(self) -> bool:
        """Add a point if the ball reached the right wall; return whether it did."""
        right = WINDOW_SIZE.x / 2.0
        if self.ball.position.x + BALL_DIAMETER / 2.0 > right:
            self.score += 1
            return True
        return False

    def update(self, dt: float, up: bool, down: bool) -> int:
        """Advance the world by ``dt`` seconds.

        Returns the number of collision events raised during the frame.
        """
        move_player(self.player, up, down, dt)
        move_ball(self.ball, dt)
        move_enemy(self.enemy, self.ball, dt)
        collisions = check_collisions(self.ball, self.colliders)
        collisions += check_wall_collision(self.ball)
        self.check_for_score()
        return collisions

    def scoreboard_text(self) -> str:
        """Return the text shown on the scoreboard."""
        return f"{SCORE_LABEL}{self.score}"


def setup_scene(
    config: GameConfig | None = None, rng: _RandomSource | None = None
) -> World:
    """Place the paddles and launch the ball in a random direction.

    Raises ValueError if the random direction has no length.
    """
    config = config if config is not None else GameConfig()
    rng = rng if rng is not None else random.Random()
    half_width = config.window_size.x / 2.0
    up = Vec2(0.0, 1.0).normalize()

    player = Body(
        position=Vec2(-half_width + PADDLE_MARGIN, 0.0),
        velocity=up * config.player_speed,
        scale=PADDLE_SIZE,
    )
    enemy = Body(
        position=Vec2(half_width - PADDLE_MARGIN, 0.0),
        velocity=up * config.enemy_speed,
        scale=PADDLE_SIZE,
    )
    direction = Vec2(rng.random(), rng.random())
    ball = Body(
        position=Vec2(0.0, 0.0),
        velocity=direction.normalize() * config.ball_speed,
        scale=Vec2(BALL_DIAMETER, BALL_DIAMETER),
    )
    return World(config=config, player=player, enemy=enemy, ball=ball)