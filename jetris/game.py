"""Game state: the falling piece, the queue of upcoming pieces, holding and line clears."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum, auto

from jetris.board import Board
from jetris.tetromino import Tetromino

DEFAULT_SPEED = 500


class Action(Enum):
    """Player commands the game understands."""

    LEFT = auto()
    RIGHT = auto()
    DOWN = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    HOLD = auto()
    DROP = auto()


class Game:
    """One game: a board, the current piece, upcoming pieces and a hold slot."""

    def __init__(self, rng: random.Random | None = None, speed: int = DEFAULT_SPEED) -> None:
        self._rng = rng
        self.speed = speed
        self.board = Board()
        self.current = self._new_piece()
        self._upcoming: deque[Tetromino] = deque([self._new_piece(), self._new_piece()])
        self._held: deque[Tetromino] = deque()
        self.can_hold = True
        self.counter = 0
        self.cleared_rows: list[int] = []

    def _new_piece(self) -> Tetromino:
        return Tetromino(rng=self._rng)

    def next_piece(self) -> Tetromino:
        """The piece that comes after the current one."""
        return self._upcoming[0]

    def held_piece(self) -> Tetromino | None:
        """The piece in the hold slot, if any."""
        return self._held[0] if self._held else None

    def tick(self) -> bool:
        """Count one frame; once more frames than the speed have passed, step. Return whether it stepped."""
        self.counter += 1
        if self.counter > self.speed:
            self.step()
            return True
        return False

    def step(self) -> list[int]:
        """Move the current piece down; on landing bring in the next piece and clear full rows.

        Return the rows cleared by this step.
        """
        self.current.move_down(self.board)
        self.counter = 0
        if not self.current.landed:
            return []
        self.current = self._upcoming.popleft()
        self._upcoming.append(self._new_piece())
        cleared = self.board.clear_full_rows()
        self.cleared_rows.extend(cleared)
        self.can_hold = True
        return cleared

    def hold(self) -> bool:
        """Put the current piece in the hold slot and take another; once per landing."""
        if not self.can_hold:
            return False
        self.can_hold = False
        was_empty = not self._held
        self.current.remove_from_board(self.board)
        self._held.append(self.current)
        self.current = (self._upcoming if was_empty else self._held).popleft()
        return True

    def apply(self, action: Action) -> bool | int:
        """Carry out a player command and return what it reports."""
        if action is Action.HOLD:
            return self.hold()
        piece, board = self.current, self.board
        handlers = {
            Action.LEFT: piece.move_left,
            Action.RIGHT: piece.move_right,
            Action.DOWN: piece.move_down,
            Action.ROTATE_LEFT: piece.rotate_left,
            Action.ROTATE_RIGHT: piece.rotate_right,
            Action.DROP: piece.fast_drop,
        }
        return handlers[action](board)