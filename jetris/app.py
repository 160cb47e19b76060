"""The window: drawing the board and previews, and turning keys into game actions."""

from __future__ import annotations

import argparse
import itertools
import random

import pygame

from jetris.board import BACKGROUND, CELL_SIZE, COLUMNS, RESIZE, ROWS
from jetris.game import DEFAULT_SPEED, Action, Game
from jetris.tetromino import Shape

CONTROLS = (
    "Arrow Keys: Left and Right\nZ: Rotate Left\nX: Rotate Right\n"
    "C: Hold/Replace\nSpace: Fast Drop"
)

LOGICAL_SIZE = (int(2.5 * CELL_SIZE * COLUMNS), CELL_SIZE * ROWS)
GRID_LEFT = 60
PREVIEW_BOX = pygame.Rect(150, 15, 40, 40)
HOLD_BOX = pygame.Rect(10, 15, 40, 40)
PREVIEW_ORIGIN = (154, 32)
HOLD_ORIGIN = (15, 32)
BLACK = (0, 0, 0)

_SIDE = CELL_SIZE - 1

# Top-left corners of the four cells of each shape, relative to the preview origin.
_PREVIEW_OFFSETS: dict[Shape, tuple[tuple[int, int], ...]] = {
    Shape.I: ((0, 0), (8, 0), (16, 0), (24, 0)),
    Shape.J: ((5, -7), (5, 1), (13, 1), (21, 1)),
    Shape.L: ((2, 0), (10, 0), (18, 0), (18, -8)),
    Shape.O: ((8, -6), (8, 2), (16, 2), (16, -6)),
    Shape.S: ((5, 2), (13, 2), (13, -6), (21, -6)),
    Shape.T: ((4, 2), (12, 2), (12, -6), (20, 2)),
    Shape.Z: ((4, -5), (12, -5), (12, 3), (20, 3)),
}

_KEY_DOWN_ACTIONS = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_c: Action.HOLD,
    pygame.K_SPACE: Action.DROP,
}

_KEY_UP_ACTIONS = {
    pygame.K_z: Action.ROTATE_LEFT,
    pygame.K_x: Action.ROTATE_RIGHT,
}


def preview_cells(x: int, y: int, shape: Shape | int) -> list[tuple[int, int]]:
    """Top-left corners of the cells drawn for a shape shown at (x, y); empty for an unknown shape."""
    try:
        offsets = _PREVIEW_OFFSETS[Shape(shape)]
    except ValueError:
        return []
    return [(x + dx, y + dy) for dx, dy in offsets]


def key_action(key: int, pressed: bool) -> Action | None:
    """The action for a key going down (pressed) or coming up, if it has one."""
    return (_KEY_DOWN_ACTIONS if pressed else _KEY_UP_ACTIONS).get(key)


def _draw_box(surface: pygame.Surface, box: pygame.Rect) -> None:
    pygame.draw.rect(surface, BACKGROUND, box, width=1)
    surface.fill(BLACK, box.inflate(-2, -2))


def _draw_preview(surface: pygame.Surface, origin: tuple[int, int], shape: Shape) -> None:
    for left, top in preview_cells(*origin, shape):
        surface.fill(shape.color, pygame.Rect(left, top, _SIDE, _SIDE))


def draw(surface: pygame.Surface, game: Game) -> None:
    """Render the game onto a surface of LOGICAL_SIZE."""
    surface.fill(BLACK)
    _draw_box(surface, PREVIEW_BOX)
    _draw_box(surface, HOLD_BOX)
    _draw_preview(surface, PREVIEW_ORIGIN, game.next_piece().shape)
    held = game.held_piece()
    if held is not None:
        _draw_preview(surface, HOLD_ORIGIN, held.shape)
    for x, y in itertools.product(range(COLUMNS), range(ROWS)):
        cell = pygame.Rect(CELL_SIZE * x + GRID_LEFT, CELL_SIZE * y, _SIDE, _SIDE)
        surface.fill(game.board.color_at(x, y), cell)


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="jetris", description="A falling-block puzzle game.")
    parser.add_argument("--speed", type=int, default=DEFAULT_SPEED,
                        help="frames between automatic drops")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece sequence")
    args = parser.parse_args(argv)

    print(CONTROLS)
    pygame.init()
    try:
        window = pygame.display.set_mode(
            (LOGICAL_SIZE[0] * RESIZE, LOGICAL_SIZE[1] * RESIZE)
        )
        pygame.display.set_caption("Jetris")
        pygame.mouse.set_visible(True)
        canvas = pygame.Surface(LOGICAL_SIZE)
        game = Game(rng=random.Random(args.seed), speed=args.speed)

        running = True
        while running:
            game.tick()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    action = key_action(event.key, event.type == pygame.KEYDOWN)
                    if action is not None:
                        game.apply(action)
            draw(canvas, game)
            pygame.transform.scale(canvas, window.get_size(), window)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0