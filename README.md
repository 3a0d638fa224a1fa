# brickgame

A falling-block puzzle game for the terminal. The package holds three parts:

- `brickgame.tetris` – the game engine: pieces, the 10 x 20 field, collisions,
  line clearing, scoring and levels.
- `brickgame.interface` – a small front-end-neutral layer: feed it a
  `UserAction`, read back a `GameInfo` snapshot.
- `brickgame.cli` – a curses front end built on that layer.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
brickgame
```

A game starts at once. The keys are:

| Key             | Action                          |
|-----------------|---------------------------------|
| Space / Enter   | Start a new game                |
| Left / Right    | Move the piece sideways         |
| Down            | Hard drop                       |
| `z` / `Z`       | Rotate                          |
| `p` / `P`       | Pause / resume                  |
| Esc             | Quit                            |

Other keys are ignored. When the game is over the board stays on screen with
a "GAME OVER" banner; press Space to play again or Esc to leave.

Clearing 1, 2, 3 or 4 lines at once scores 100, 300, 700 or 1500 points.
While the level is below 10 it is recomputed after each clear as
`score // 600 + 1`. The fall delay is 500 ms at level 1 and 45 ms shorter for
each level after that, never below 100 ms.

The best score is read from `high_score.txt` in the current directory when a
game starts and written back there whenever the score beats it.

## Using the engine

The engine can be driven directly:

```python
from brickgame.tetris import TetrisGame

game = TetrisGame("high_score.txt")
game.start()
game.move_figure(-1)
game.rotate_figure()
game.hard_drop()
print(game.score, game.level, game.speed, game.state)
```

`TetrisGame` also offers `drop_figure()` (one row down, locking the piece if
it cannot move), `tick()` (drops one row once the fall delay has passed),
`check_collision(figure)`, `clear_lines()` and `spawn_figure()`. Pieces are
immutable `Figure` values; `get_shape(kind)` returns the 4 x 4 matrix of piece
kind 0–6.

Or go through the interface a front end uses, which works on the single game
returned by `brickgame.tetris.get_game_instance()`:

```python
from brickgame.interface import UserAction, user_input, update_current_state

user_input(UserAction.START, False)
user_input(UserAction.LEFT, False)
info = update_current_state()
print(info.score, info.level, info.pause)
for row in info.field:
    print("".join("#" if cell else "." for cell in row))
```

`UserAction.UP` moves the piece down one row. `update_current_state` advances
the game clock and returns a `GameInfo` holding the board with the falling
piece drawn in, the next piece, score, high score, level, speed and a pause
code (0 running, 1 paused, 2 game over).

## Limitations

- The front end needs Python's `curses` module, which standard Windows builds
  of Python lack; the engine and interface work anywhere.
- All pieces are drawn in one colour, and there is no hold piece, ghost piece
  or saved game; only the high score is kept between runs.