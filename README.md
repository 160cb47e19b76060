# jetris

A compact falling-block puzzle game on a 10 × 20 grid, drawn with pygame.
Pieces fall on a timer; rows that fill completely are cleared and
everything above drops down. A preview box shows the next piece and a
hold box keeps one piece in reserve.

## Installing

```
pip install .
```

## Playing

```
jetris
```

The command prints the controls, opens the window and runs until the
window is closed. Options:

| Option          | Meaning                                                   |
|-----------------|-----------------------------------------------------------|
| `--speed N`     | frames between automatic drops (default 500)              |
| `--seed N`      | seed for the random piece sequence, to replay a game      |

Controls:

| Key          | Action                           |
|--------------|----------------------------------|
| Left / Right | Move the piece sideways          |
| Down         | Move the piece down one row      |
| Z            | Rotate left (on key release)     |
| X            | Rotate right (on key release)    |
| C            | Hold the piece, or swap it back  |
| Space        | Drop the piece to the bottom     |

A piece can be held once per landing: after you hold or swap, the next
hold only works once the current piece has landed.

## Using the game logic

The rules live apart from the drawing code, so they can be driven
without a window:

```python
import random

from jetris.game import Action, Game

game = Game(rng=random.Random(1), speed=500)
game.apply(Action.LEFT)
game.apply(Action.ROTATE_RIGHT)
game.apply(Action.DROP)
cleared = game.step()

print(game.next_piece().shape, game.held_piece(), cleared)
```

- `jetris.game.Game` holds the board, the current piece, the upcoming
  pieces and the hold slot. `tick()` counts one frame and calls `step()`
  once more frames than `speed` have passed; `step()` moves the piece
  down and, when it lands, brings in the next piece and clears full rows,
  returning the cleared row indices. `apply(action)` carries out one
  `Action` (`LEFT`, `RIGHT`, `DOWN`, `ROTATE_LEFT`, `ROTATE_RIGHT`,
  `HOLD`, `DROP`).
- `jetris.board.Board` holds the grid of filled cells and their colours
  (`is_filled`, `fill`, `clear`, `toggle`, `color_at`,
  `clear_full_rows`).
- `jetris.tetromino.Tetromino` moves, rotates and drops a single piece of
  a given `Shape` on a board; a rotation that runs into blocks is nudged
  up, left or right, and undone if it still does not fit.
- `jetris.app` has `draw(surface, game)` for rendering onto a pygame
  surface, `key_action(key, pressed)` for mapping keys to actions, and
  `main()`, which the `jetris` command runs.

## What it does not do

There is no score, level, speed-up or game-over screen: cleared rows are
only collected in `Game.cleared_rows`, and nothing is saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```