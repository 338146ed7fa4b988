"""Unit tests for the individual rule checks in dungeonlab.rules."""

from dungeonlab import rules
from dungeonlab.board import is_in_bounds
from dungeonlab.constants import STATE_CHEST, STATE_EMPTY, STATE_MONSTER, STATE_UNKNOWN, STATE_WALL

from tests.board_test_utils import make_board

OPEN_ROWS = ["##  ...."] + ["........"] * 7


def test_rows_acceptable_uses_unknowns_as_slack():
    cols = [1, 1, 0, 0, 0, 0, 0, 0]
    for target in (2, 3, 4):
        b = make_board(OPEN_ROWS, row_counts=[target] + [0] * 7, column_counts=cols)
        assert rules.rows_acceptable(b) is None
    for target in (1, 5):
        b = make_board(OPEN_ROWS, row_counts=[target] + [0] * 7, column_counts=cols)
        assert rules.rows_acceptable(b) == 0


def test_rows_acceptable_reports_first_bad_row():
    b = make_board(OPEN_ROWS, row_counts=[3, 0, 1, 0, 0, 0, 2, 0])
    assert rules.rows_acceptable(b) == 2


def test_cols_acceptable():
    b = make_board(OPEN_ROWS)
    assert rules.cols_acceptable(b) is None
    b = make_board(OPEN_ROWS, column_counts=[1, 1, 1, 0, 0, 0, 0, 0])
    assert rules.cols_acceptable(b) is None
    b = make_board(OPEN_ROWS, column_counts=[1, 1, 2, 0, 0, 0, 0, 0])
    assert rules.cols_acceptable(b) == 2
    b = make_board(OPEN_ROWS, column_counts=[1, 1, 0, 0, 0, 0, 0, 1])
    assert rules.cols_acceptable(b) == 7


def test_dead_end_counts_the_board_edge_as_wall():
    rows = [".." + "######"] + ["#" * 8] * 7
    b = make_board(rows)
    assert rules.wall_neighbors(b, 0, 0) == 3
    assert rules.is_dead_end(b, 0, 0)
    assert rules.is_dead_end(b, 0, 1)
    assert not rules.is_dead_end(b, 0, 2)  # a wall is never a dead end


def test_dead_end_needs_a_resolved_cell():
    rows = ["#" * 8, "## #####", "## #####"] + ["#" * 8] * 5
    b = make_board(rows)
    assert b.at(1, 2) == STATE_UNKNOWN
    assert not rules.is_dead_end(b, 1, 2)

    b.cells[1][2] = STATE_MONSTER
    assert rules.is_dead_end(b, 1, 2)
    b.cells[1][2] = STATE_CHEST
    assert rules.is_dead_end(b, 1, 2)


def test_maybe_dead_end():
    rows = ["#" * 8, "###.####", "##.M.###", "### ####"] + ["#" * 8] * 4
    b = make_board(rows)
    # more than one empty neighbour can never leave three walls
    assert not rules.maybe_dead_end(b, 2, 3)
    b.cells[2][4] = STATE_WALL
    assert not rules.maybe_dead_end(b, 2, 3)

    b.cells[2][2] = STATE_WALL
    assert rules.maybe_dead_end(b, 2, 3)

    b.cells[1][3] = STATE_MONSTER
    b.cells[3][3] = STATE_CHEST
    assert rules.maybe_dead_end(b, 2, 3)

    for r, c in [(1, 3), (2, 2), (3, 3)]:
        b.cells[r][c] = STATE_WALL
    assert not rules.maybe_dead_end(b, 2, 3)


def test_treasure_room_candidates_are_row_major():
    assert rules.treasure_room_candidates(5, 5) == [
        (3, 3), (3, 4), (3, 5),
        (4, 3), (4, 4), (4, 5),
        (5, 3), (5, 4), (5, 5),
    ]


def test_treasure_room_boundary_skips_corners():
    boundary = rules.treasure_room_boundary(1, 2)
    assert len(set(boundary)) == 12
    assert (0, 1) not in boundary and (4, 5) not in boundary
    assert {(0, 2), (3, 1), (2, 5), (4, 4)} <= set(boundary)
    assert not set(boundary) & set(rules.treasure_room_interior(1, 2))


def test_exact_treasure_room(treasure_board):
    assert rules.is_treasure_room(treasure_board, 1, 2)
    assert not rules.is_treasure_room(treasure_board, 0, 2)
    assert rules.find_treasure_room(treasure_board, 2, 4) == (1, 2)
    assert rules.find_treasure_room(treasure_board, 2, 4, relaxed=True) == (1, 2)


def test_second_entrance_breaks_the_room(treasure_board):
    treasure_board.cells[4][4] = STATE_EMPTY
    assert not rules.is_treasure_room(treasure_board, 1, 2)
    assert not rules.maybe_treasure_room(treasure_board, 1, 2)


def test_relaxed_room_boundary_range_is_inclusive(treasure_board):
    # 10 walls + 1 unknown: 11 is the top of the range
    treasure_board.cells[4][4] = STATE_UNKNOWN
    assert not rules.is_treasure_room(treasure_board, 1, 2)
    assert rules.maybe_treasure_room(treasure_board, 1, 2)

    # 12 walls: no entrance left
    treasure_board.cells[4][4] = STATE_WALL
    treasure_board.cells[3][1] = STATE_WALL
    assert not rules.is_treasure_room(treasure_board, 1, 2)
    assert not rules.maybe_treasure_room(treasure_board, 1, 2)

    # 11 walls + 1 unknown: 11 is the bottom of the range
    treasure_board.cells[0][2] = STATE_UNKNOWN
    assert rules.maybe_treasure_room(treasure_board, 1, 2)


def test_room_interior_rules(treasure_board):
    treasure_board.cells[2][2] = STATE_UNKNOWN
    assert not rules.is_treasure_room(treasure_board, 1, 2)
    assert rules.maybe_treasure_room(treasure_board, 1, 2)

    treasure_board.cells[2][2] = STATE_CHEST
    assert not rules.is_treasure_room(treasure_board, 1, 2)
    assert not rules.maybe_treasure_room(treasure_board, 1, 2)

    treasure_board.cells[2][2] = STATE_MONSTER
    assert not rules.maybe_treasure_room(treasure_board, 1, 2)


def test_treasure_room_buffer_shape():
    buffer = rules.treasure_room_buffer(2, 2)
    assert len(buffer) == 32
    assert (0, 1) in buffer and (0, 4) in buffer and (4, 5) in buffer and (5, 4) in buffer
    for corner in [(0, 0), (0, 5), (5, 0), (5, 5)]:
        assert corner not in buffer
    # clipped to the board
    assert len(rules.treasure_room_buffer(0, 0)) == 15
    for r, c in [(0, 0), (0, 5), (5, 0), (5, 5)]:
        assert all(is_in_bounds(br, bc) for br, bc in rules.treasure_room_buffer(r, c))


def test_count_connected(load):
    assert rules.count_connected(load("all_walls")) is None
    assert rules.count_connected(load("single_cell")) == (1, 1)
    assert rules.count_connected(load("monster_alcove")) == (11, 11)
    assert rules.count_connected(load("bad_unconnected")) == (10, 18)
