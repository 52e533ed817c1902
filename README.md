# snakegame

A snake game for the terminal, played with the arrow keys.

## Installing

    pip install .

The game draws with the standard library's `curses` module. It needs a
terminal of at least 100 columns by 45 rows.

## Playing

    snakegame

To keep the high score files somewhere other than the current directory:

    snakegame --directory ~/.snake

The main menu offers two entries:

- **Game**: choose a level, then play.
- **Record**: show the best score for each level.

Move between them with UP and DOWN and confirm with ENTER. The menu runs until
you interrupt it with Ctrl+C.

At the level prompt, press `1`, `2` or `3`, or press `r` to go back to the menu.

| Level | Starting tick | Speed-up per food | Obstacles |
|-------|---------------|-------------------|-----------|
| 1, Easy | 200 ms | 20 ms | a fixed complex block plus 3 random shapes, all stationary |
| 2, Hard | 100 ms | 15 ms | 5 random shapes, some of which drift and bounce off the borders |
| 3, Super Hard | 50 ms | 10 ms | 7 random shapes, some of which drift and bounce off the borders |

### Controls

- Arrow keys steer the snake. It cannot turn straight back on itself.
- `q` ends the current game and returns to the menu.

### Rules

- Each piece of food (`%`) is worth one point and makes the snake grow by five segments.
- Each piece also shortens the tick, down to a floor of 10 ms.
- The snake's head wraps around the edges of the play field.
- The game ends if any part of the snake touches an obstacle (`#`), or if the
  head runs into the body. Press SPACE after that to return to the menu.

### High scores

The best score for each level is kept in `highscore1.txt`, `highscore2.txt` and
`highscore3.txt`, in the current directory or the one given with
`--directory`. A file that is missing or unreadable counts as a score of 0. A
score is written when a game ends, by collision or by `q`, above the stored one.

## Using it as a library

The game logic does not need a terminal:

```python
import random
from snakegame.game import Game
from snakegame.model import Direction

game = Game(level=1, rng=random.Random(1))
game.turn(Direction.DOWN)
dead = game.advance()
print(game.score, dead)
print("\n".join(game.render()))
```

Other pieces usable on their own:

- `snakegame.model`: `Point`, `Direction` (with `opposite()` and `step()`) and `Obstacle`.
- `snakegame.obstacles`: `generate_obstacles`, `create_complex_obstacle` and
  `update_obstacles`, each taking an optional `random.Random` and board size.
- `snakegame.scores`: `score_path`, `get_high_score` and `save_high_score`.
- `snakegame.game.level_settings(level)`: the tuning of each level; raises
  `ValueError` for a level other than 1, 2 or 3.

## Running the tests

    pip install .[test]
    pytest