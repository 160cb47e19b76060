import random

import pytest

from jetris.board import COLUMNS, ROWS, Board
from jetris.tetromino import SHAPES, Orientation, Shape, Tetromino


def filled_cells(board):
    return {
        (x, y) for x in range(COLUMNS) for y in range(ROWS) if board.is_filled(x, y)
    }


def test_initial_cells_match_spawn_shape():
    piece = Tetromino(Shape.I)
    assert piece.cells() == [(6, 0), (5, 0), (4, 0), (3, 0)]
    assert piece.orientation == Orientation.UP
    assert not piece.landed


@pytest.mark.parametrize(
    "shape, color",
    [
        (Shape.I, (0, 240, 240)),
        (Shape.J, (0, 0, 240)),
        (Shape.L, (240, 160, 0)),
        (Shape.O, (240, 240, 0)),
        (Shape.S, (0, 240, 0)),
        (Shape.T, (160, 0, 240)),
        (Shape.Z, (240, 0, 0)),
    ],
)
def test_shape_colors(shape, color):
    assert Tetromino(shape).color == color


def test_shape_from_int():
    assert Tetromino(3).shape is Shape.O


def test_random_shape_is_reproducible_with_seeded_rng():
    first = [Tetromino(rng=random.Random(7)).shape for _ in range(5)]
    second = [Tetromino(rng=random.Random(7)).shape for _ in range(5)]
    assert first == second
    assert all(shape in Shape for shape in first)


def test_orientation_turned_wraps():
    assert Orientation.RIGHT.turned(1) is Orientation.UP
    assert Orientation.UP.turned(-1) is Orientation.RIGHT


@pytest.mark.parametrize("shape", list(Shape))
def test_collision_cells_lie_outside_and_next_to_piece(shape):
    piece = Tetromino(shape)
    cells = set(piece.cells())
    collisions = piece.collision_cells()
    assert all((x, y - 1) in cells and (x, y) not in cells for x, y in collisions.below)
    assert all((x + 1, y) in cells and (x, y) not in cells for x, y in collisions.left)
    assert all((x - 1, y) in cells and (x, y) not in cells for x, y in collisions.right)
    assert collisions.below and collisions.left and collisions.right


def test_spawn_toggles_cells():
    board = Board()
    piece = Tetromino(Shape.T)
    piece.spawn(board)
    assert filled_cells(board) == set(piece.cells())
    piece.spawn(board)
    assert filled_cells(board) == set()


@pytest.mark.parametrize("shape", list(Shape))
def test_move_down_shifts_one_row(shape):
    board = Board()
    piece = Tetromino(shape)
    before = piece.cells()
    assert piece.move_down(board)
    assert piece.cells() == [(x, y + 1) for x, y in before]
    assert filled_cells(board) == set(piece.cells())
    assert all(board.color_at(x, y) == piece.color for x, y in piece.cells())


@pytest.mark.parametrize("shape", list(Shape))
def test_fast_drop_lands_on_floor(shape):
    board = Board()
    piece = Tetromino(shape)
    rows = piece.fast_drop(board)
    assert piece.landed
    assert max(y for _, y in piece.cells()) == ROWS - 1
    assert rows == piece.y_offset
    assert filled_cells(board) == set(piece.cells())


def test_move_down_after_landing_does_nothing():
    board = Board()
    piece = Tetromino(Shape.O)
    piece.fast_drop(board)
    cells = piece.cells()
    assert not piece.move_down(board)
    assert piece.cells() == cells


def test_piece_lands_on_another():
    board = Board()
    first = Tetromino(Shape.O)
    first.fast_drop(board)
    second = Tetromino(Shape.O)
    second.fast_drop(board)
    assert max(y for _, y in second.cells()) == min(y for _, y in first.cells()) - 1
    assert len(filled_cells(board)) == 8


def test_move_left_stops_at_wall():
    board = Board()
    piece = Tetromino(Shape.I)
    piece.move_down(board)
    while piece.move_left(board):
        pass
    assert min(x for x, _ in piece.cells()) == 0
    assert not piece.move_left(board)
    assert filled_cells(board) == set(piece.cells())


def test_move_right_stops_at_wall():
    board = Board()
    piece = Tetromino(Shape.Z)
    piece.move_down(board)
    while piece.move_right(board):
        pass
    assert max(x for x, _ in piece.cells()) == COLUMNS - 1
    assert not piece.move_right(board)
    assert filled_cells(board) == set(piece.cells())


def test_move_blocked_by_filled_cell():
    board = Board()
    piece = Tetromino(Shape.O)
    piece.move_down(board)
    blocker = piece.collision_cells().left[0]
    board.fill(*blocker, (1, 2, 3))
    cells = piece.cells()
    assert not piece.move_left(board)
    assert piece.cells() == cells


def test_rotate_left_uses_next_orientation():
    board = Board()
    piece = Tetromino(Shape.I)
    assert piece.rotate_left(board)
    assert piece.orientation == Orientation.LEFT
    assert piece.cells() == list(SHAPES[Shape.I][Orientation.LEFT])
    assert filled_cells(board) == set(piece.cells())


@pytest.mark.parametrize("shape", list(Shape))
def test_rotate_left_then_right_restores(shape):
    board = Board()
    piece = Tetromino(shape)
    piece.move_down(board)
    before = piece.cells()
    assert piece.rotate_left(board)
    assert piece.rotate_right(board)
    assert piece.orientation == Orientation.UP
    assert piece.cells() == before
    assert filled_cells(board) == set(before)


def test_rotate_right_from_up_goes_to_right():
    board = Board()
    piece = Tetromino(Shape.T)
    assert piece.rotate_right(board)
    assert piece.orientation == Orientation.RIGHT


def test_rotation_off_the_wall_is_refused():
    board = Board()
    piece = Tetromino(Shape.I)
    piece.rotate_left(board)
    while piece.move_left(board):
        pass
    cells = piece.cells()
    assert not piece.rotate_left(board)
    assert piece.orientation == Orientation.LEFT
    assert piece.cells() == cells
    assert filled_cells(board) == set(cells)


def test_rotation_nudges_around_blocked_cell():
    board = Board()
    blocker = SHAPES[Shape.I][Orientation.LEFT][0]
    board.fill(*blocker, (9, 9, 9))
    piece = Tetromino(Shape.I)
    assert piece.rotate_left(board)
    assert piece.orientation == Orientation.LEFT
    assert blocker not in piece.cells()
    assert board.is_filled(*blocker)
    assert filled_cells(board) == set(piece.cells()) | {blocker}


def test_remove_from_board_resets_piece():
    board = Board()
    piece = Tetromino(Shape.L)
    spawn_cells = piece.cells()
    piece.move_down(board)
    piece.move_right(board)
    piece.rotate_left(board)
    piece.remove_from_board(board)
    assert filled_cells(board) == set()
    assert piece.orientation == Orientation.UP
    assert piece.cells() == spawn_cells
    assert all(board.color_at(x, y) == board.background for x, y in spawn_cells)