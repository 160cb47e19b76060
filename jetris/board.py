"""The playing field: a grid of cells that are either empty or filled with a colour."""

from __future__ import annotations

COLUMNS = 10
ROWS = 20
CELL_SIZE = 8
RESIZE = 4

Color = tuple[int, int, int]

BACKGROUND: Color = (255 // 4, 255 // 4, 255 // 4)


class Board:
    """A COLUMNS x ROWS grid addressed by (x, y), with y growing downwards."""

    def __init__(self, background: Color = BACKGROUND) -> None:
        self.background = background
        self._filled = [[False] * COLUMNS for _ in range(ROWS)]
        self._colors = [[background] * COLUMNS for _ in range(ROWS)]

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < COLUMNS and 0 <= y < ROWS):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def is_filled(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) holds a block."""
        self._check(x, y)
        return self._filled[y][x]

    def fill(self, x: int, y: int, color: Color) -> None:
        """Put a block of the given colour at (x, y)."""
        self._check(x, y)
        self._filled[y][x] = True
        self._colors[y][x] = color

    def clear(self, x: int, y: int) -> None:
        """Empty the cell at (x, y) and paint it with the background colour."""
        self._check(x, y)
        self._filled[y][x] = False
        self._colors[y][x] = self.background

    def toggle(self, x: int, y: int) -> bool:
        """Flip whether (x, y) is filled, leaving its colour alone; return the new state."""
        self._check(x, y)
        self._filled[y][x] = not self._filled[y][x]
        return self._filled[y][x]

    def color_at(self, x: int, y: int) -> Color:
        """The colour shown at (x, y)."""
        self._check(x, y)
        return self._colors[y][x]

    def clear_full_rows(self) -> list[int]:
        """Remove every full row, dropping the rows above it; return the removed row indices."""
        cleared = []
        for row in range(ROWS):
            if all(self._filled[row]):
                del self._filled[row]
                del self._colors[row]
                self._filled.insert(0, [False] * COLUMNS)
                self._colors.insert(0, [self.background] * COLUMNS)
                cleared.append(row)
        return cleared