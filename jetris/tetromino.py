"""Falling pieces: their shapes, rotations, and movement on a board."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import NamedTuple

from jetris.board import COLUMNS, ROWS, Board, Color

Point = tuple[int, int]


class Shape(IntEnum):
    I = 0  # noqa: E741
    J = 1
    L = 2
    O = 3  # noqa: E741
    S = 4
    T = 5
    Z = 6

    @property
    def color(self) -> Color:
        return SHAPE_COLORS[self]


class Orientation(IntEnum):
    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3

    def turned(self, step: int) -> Orientation:
        """The orientation reached after step quarter turns (positive is to the left)."""
        return Orientation((self + step) % len(Orientation))


SHAPE_COLORS: dict[Shape, Color] = {
    Shape.I: (0, 240, 240),
    Shape.J: (0, 0, 240),
    Shape.L: (240, 160, 0),
    Shape.O: (240, 240, 0),
    Shape.S: (0, 240, 0),
    Shape.T: (160, 0, 240),
    Shape.Z: (240, 0, 0),
}

SHAPES: dict[Shape, dict[Orientation, tuple[Point, ...]]] = {
    Shape.I: {
        Orientation.UP: ((6, 0), (5, 0), (4, 0), (3, 0)),
        Orientation.LEFT: ((4, 3), (4, 2), (4, 1), (4, 0)),
        Orientation.DOWN: ((6, 0), (5, 0), (4, 0), (3, 0)),
        Orientation.RIGHT: ((5, 3), (5, 2), (5, 1), (5, 0)),
    },
    Shape.J: {
        Orientation.UP: ((6, 1), (5, 1), (4, 1), (4, 0)),
        Orientation.LEFT: ((5, 2), (4, 2), (5, 1), (5, 0)),
        Orientation.DOWN: ((6, 2), (6, 1), (5, 1), (4, 1)),
        Orientation.RIGHT: ((5, 2), (5, 1), (6, 0), (5, 0)),
    },
    Shape.L: {
        Orientation.UP: ((5, 1), (4, 1), (3, 1), (5, 0)),
        Orientation.LEFT: ((4, 2), (4, 1), (4, 0), (3, 0)),
        Orientation.DOWN: ((3, 2), (5, 1), (4, 1), (3, 1)),
        Orientation.RIGHT: ((5, 2), (4, 2), (4, 1), (4, 0)),
    },
    Shape.O: {
        orientation: ((5, 1), (4, 1), (5, 0), (4, 0)) for orientation in Orientation
    },
    Shape.S: {
        Orientation.UP: ((4, 1), (3, 1), (5, 0), (4, 0)),
        Orientation.LEFT: ((4, 2), (4, 1), (3, 1), (3, 0)),
        Orientation.DOWN: ((4, 2), (3, 2), (5, 1), (4, 1)),
        Orientation.RIGHT: ((5, 2), (5, 1), (4, 1), (4, 0)),
    },
    Shape.T: {
        Orientation.UP: ((5, 1), (4, 1), (3, 1), (4, 0)),
        Orientation.LEFT: ((4, 2), (4, 1), (3, 1), (4, 0)),
        Orientation.DOWN: ((4, 2), (5, 1), (4, 1), (3, 1)),
        Orientation.RIGHT: ((4, 2), (5, 1), (4, 1), (4, 0)),
    },
    Shape.Z: {
        Orientation.UP: ((6, 1), (5, 1), (5, 0), (4, 0)),
        Orientation.LEFT: ((4, 2), (5, 1), (4, 1), (5, 0)),
        Orientation.DOWN: ((6, 2), (5, 2), (5, 1), (4, 1)),
        Orientation.RIGHT: ((5, 2), (6, 1), (5, 1), (6, 0)),
    },
}

# Directions tried, in order, to push a rotated piece clear of a blocked cell.
_NUDGES: tuple[Point, ...] = ((0, -1), (-1, 0), (1, 0))


class Collisions(NamedTuple):
    """Cells next to a piece, outside it, that it would move into."""

    below: list[Point]
    left: list[Point]
    right: list[Point]


def _inside(x: int, y: int) -> bool:
    return 0 <= x < COLUMNS and 0 <= y < ROWS


def _free(board: Board, x: int, y: int) -> bool:
    return _inside(x, y) and not board.is_filled(x, y)


class Tetromino:
    """A piece of one shape, placed on the board by an offset from its spawn position."""

    def __init__(self, shape: Shape | int | None = None, rng: random.Random | None = None) -> None:
        if shape is None:
            shape = (rng or random).randrange(len(Shape))
        self.shape = Shape(shape)
        self.color: Color = self.shape.color
        self.orientation = Orientation.UP
        self.x_offset = 0
        self.y_offset = 0
        self.landed = False

    def __repr__(self) -> str:
        return (
            f"Tetromino({self.shape.name}, {self.orientation.name}, "
            f"offset=({self.x_offset}, {self.y_offset}), landed={self.landed})"
        )

    def cells(self) -> list[Point]:
        """The board cells the piece covers."""
        return [
            (x + self.x_offset, y + self.y_offset)
            for x, y in SHAPES[self.shape][self.orientation]
        ]

    def collision_cells(self) -> Collisions:
        """The neighbouring cells, outside the piece, below it and to either side."""
        cells = self.cells()
        own = set(cells)

        def neighbours(dx: int, dy: int) -> list[Point]:
            return [(x + dx, y + dy) for x, y in cells if (x + dx, y + dy) not in own]

        return Collisions(below=neighbours(0, 1), left=neighbours(-1, 0), right=neighbours(1, 0))

    def spawn(self, board: Board) -> None:
        """Toggle the board cells the piece covers."""
        for x, y in self.cells():
            board.toggle(x, y)

    def _erase(self, board: Board) -> None:
        for x, y in self.cells():
            board.clear(x, y)

    def _draw(self, board: Board) -> None:
        for x, y in self.cells():
            board.fill(x, y, self.color)

    def _shift(self, board: Board, dx: int, dy: int) -> None:
        self._erase(board)
        self.x_offset += dx
        self.y_offset += dy
        self._draw(board)

    def move_down(self, board: Board) -> bool:
        """Move one row down; mark the piece landed if it cannot. Return whether it moved."""
        if self.landed:
            return False
        if any(y >= ROWS or board.is_filled(x, y) for x, y in self.collision_cells().below):
            self.landed = True
            return False
        self._shift(board, 0, 1)
        return True

    def move_left(self, board: Board) -> bool:
        """Move one column left if there is room. Return whether it moved."""
        if any(x < 0 or board.is_filled(x, y) for x, y in self.collision_cells().left):
            return False
        self._shift(board, -1, 0)
        return True

    def move_right(self, board: Board) -> bool:
        """Move one column right if there is room. Return whether it moved."""
        if any(x >= COLUMNS or board.is_filled(x, y) for x, y in self.collision_cells().right):
            return False
        self._shift(board, 1, 0)
        return True

    def _settle(self, board: Board) -> bool:
        """Nudge the freshly rotated piece off occupied cells; False if it cannot fit."""
        tried = {(self.x_offset, self.y_offset)}
        while True:
            cells = self.cells()
            own = set(cells)
            blocked = None
            for x, y in cells:
                if not _inside(x, y):
                    return False
                if board.is_filled(x, y):
                    blocked = (x, y)
                    break
            if blocked is None:
                return True
            x, y = blocked
            nudge = next(
                (
                    (dx, dy)
                    for dx, dy in _NUDGES
                    if _free(board, x + dx, y + dy) and (x + dx, y + dy) not in own
                ),
                None,
            )
            if nudge is None:
                return False
            offset = (self.x_offset + nudge[0], self.y_offset + nudge[1])
            if offset in tried:
                return False
            tried.add(offset)
            self.x_offset, self.y_offset = offset

    def _rotate(self, board: Board, step: int) -> bool:
        self._erase(board)
        previous = (self.orientation, self.x_offset, self.y_offset)
        self.orientation = self.orientation.turned(step)
        turned = self._settle(board)
        if not turned:
            self.orientation, self.x_offset, self.y_offset = previous
        self._draw(board)
        return turned

    def rotate_left(self, board: Board) -> bool:
        """Turn a quarter to the left, nudging clear of blocks. Return whether it turned."""
        return self._rotate(board, 1)

    def rotate_right(self, board: Board) -> bool:
        """Turn a quarter to the right, nudging clear of blocks. Return whether it turned."""
        return self._rotate(board, -1)

    def remove_from_board(self, board: Board) -> None:
        """Take the piece off the board and reset it to its spawn position."""
        self._erase(board)
        self.orientation = Orientation.UP
        self.x_offset = 0
        self.y_offset = 0

    def fast_drop(self, board: Board) -> int:
        """Drop until landed; return the number of rows moved."""
        rows = 0
        while not self.landed:
            if self.move_down(board):
                rows += 1
        return rows