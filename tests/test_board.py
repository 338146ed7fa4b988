import pytest

from dungeonlab.board import Board, is_in_bounds
from dungeonlab.constants import BOARD_SIZE, STATE_EMPTY, STATE_UNKNOWN, STATE_WALL

from tests.board_test_utils import make_board


def empty_grid(state=STATE_EMPTY):
    return [[state] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def test_out_of_bounds_reads_as_wall():
    b = Board(empty_grid(), [0] * 8, [0] * 8)
    for r, c in [(-1, 0), (0, -1), (8, 3), (3, 8), (-5, 12)]:
        assert not b.is_in_bounds(r, c)
        assert b.at(r, c) == STATE_WALL
    assert b.is_in_bounds(0, 0) and b.is_in_bounds(7, 7)
    assert not is_in_bounds(BOARD_SIZE, 0) and is_in_bounds(BOARD_SIZE - 1, 0)
    assert b.at(7, 7) == STATE_EMPTY


def test_board_does_not_alias_its_input():
    grid = empty_grid()
    b = Board(grid, [0] * 8, [0] * 8)
    grid[0][0] = STATE_WALL
    assert b.at(0, 0) == STATE_EMPTY

    clone = b.copy()
    clone.cells[1][1] = STATE_WALL
    assert b.at(1, 1) == STATE_EMPTY
    assert clone != b


def test_targets_are_immutable_tuples():
    b = Board(empty_grid(), list(range(8)), [1] * 8)
    assert b.row_counts == (0, 1, 2, 3, 4, 5, 6, 7)
    with pytest.raises(TypeError):
        b.row_counts[0] = 3


@pytest.mark.parametrize(
    "cells, rows, cols",
    [
        ([[STATE_EMPTY] * 8] * 7, [0] * 8, [0] * 8),
        ([[STATE_EMPTY] * 7] * 8, [0] * 8, [0] * 8),
        ([[9] * 8] * 8, [0] * 8, [0] * 8),
        ([[STATE_EMPTY] * 8] * 8, [0] * 7, [0] * 8),
        ([[STATE_EMPTY] * 8] * 8, [0] * 8, [9] + [0] * 7),
        ([[STATE_EMPTY] * 8] * 8, [-1] + [0] * 7, [0] * 8),
    ],
)
def test_constructor_rejects_bad_shapes(cells, rows, cols):
    with pytest.raises(ValueError):
        Board(cells, rows, cols)


def test_unknown_scan_is_row_major():
    rows = ["########"] * 8
    rows[2] = "##### ##"
    rows[5] = " #######"
    b = make_board(rows)
    assert b.first_unknown() == (2, 5)
    assert b.unknown_cells() == [(2, 5), (5, 0)]
    assert not b.is_complete()

    b.cells[2][5] = STATE_WALL
    b.cells[5][0] = STATE_WALL
    assert b.first_unknown() is None
    assert b.is_complete()
    assert all(cell != STATE_UNKNOWN for row in b.cells for cell in row)
