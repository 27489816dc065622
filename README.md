# pingpong

This is a small Pong-style arcade game. You control the paddle on the left. A
computer paddle on the right moves towards the height of the ball. The ball
bounces off both paddles and off all four walls. You score a point on each
frame in which the ball touches the right-hand wall.

## Installing

```
pip install .
```

This also installs `pygame`. The game uses it for its window, input and
drawing.

## Playing

```
pingpong
```

The game opens a 1000 × 700 window with the main menu, titled "Ping & Pong".
Click **Play** to start a round.

The controls use Vim motions:

| Key | Action           |
|-----|------------------|
| `J` | Move paddle down |
| `K` | Move paddle up   |

The score appears in the top-right corner and the instructions appear in the
bottom-left corner. Close the window to quit.

When the ball scores, the game plays `assets/sounds/hit.ogg`. It looks for that
file relative to the current directory. The package does not ship the file. If
the file is missing, or no audio device is available, the game runs silently.

## What it does not do

- A round never ends. There is no game over, no winning score, and no way back
  to the menu once play has started.
- The ball is not served again after a point. It bounces off the right wall and
  play carries on.
- There is only one human player. The computer scores no points.
- There is no pause and no settings screen. The speeds are fixed by
  `GameConfig` unless you drive the game from code.

## Using it as a library

The game logic does not depend on a window, so you can drive it yourself:

```python
import random

from pingpong.model import GameConfig
from pingpong.world import setup_scene

world = setup_scene(GameConfig(), random.Random(1))
for _ in range(600):
    world.update(1 / 60, up=False, down=True)
print(world.scoreboard_text())
```

The package has these modules:

- `pingpong.model` holds three types:
  - `Vec2`, an immutable vector with `length`, `normalize` and `normalize_or_zero`. It supports addition, subtraction, negation and multiplication.
  - `Body`, which holds a position, a velocity and a scale.
  - `GameConfig`, which holds the window size and the ball, player and enemy speeds. The defaults are 300, 300 and 150.

  It also holds the `Collision` sides and the constants `WINDOW_SIZE`, `BALL_DIAMETER` and `PADDLE_SIZE`.
- `pingpong.geometry` holds the axis-aligned boxes `Aabb2d` and `aabb(center, half_size)`. It also holds `check_collision(a, b)`, which returns the side of `b` that `a` hit, or `None`. `from_rgb` converts 0–255 colour channels to 0–1 floats.
- `pingpong.physics` has these functions:
  - `move_player`, `move_ball` and `move_enemy` move the paddles and the ball.
  - `check_collisions` and `check_wall_collision` bounce the ball. Each returns the number of collisions it found.
- `pingpong.world` holds `World`:
  - `update(dt, up, down)` runs one frame and returns the number of collision events.
  - `check_for_score()` adds a point when the ball reaches the right-hand wall.
  - `scoreboard_text()` returns the text of the scoreboard.

  `setup_scene(config, rng)` places the paddles and launches the ball in a random direction.
- `pingpong.menu` holds these types:
  - the `GameState`, `MenuState` and `Interaction` enums;
  - `Menu`, with `enter`, `exit`, `button_at` and `set_interaction`;
  - the `Play` `MenuButton`.

  It also holds `button_color`.
- `pingpong.app` holds `PongApp`, which ties the menu and the world to a pygame surface. It provides `handle_event`, `step` and `draw`. The module also holds `main`, which is the `pingpong` command.

## Running the tests

```
pip install ".[test]"
pytest
```