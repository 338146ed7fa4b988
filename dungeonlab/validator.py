"""**********************************************************************************
 * Title: validator.py
 * -------------------------------------------------------------------------------
 * Description:
 * The two board checks built from the rules in `rules.py`:
 *
 *   check_solved   - decides whether a complete board is a valid solution and
 *                    reports the first violation in a fixed scan order.
 *   maybe_solvable - a cheaper test for partial boards used by the search to
 *                    prune. It may accept boards without a valid completion
 *                    but never rejects one that has one.
 *
 * Both return None on success and a `BoardError` value on failure.
 **********************************************************************************"""

from dungeonlab import rules
from dungeonlab.constants import BOARD_SIZE, STATE_UNKNOWN, STATE_WALL, STATE_CHEST
from dungeonlab.errors import (
    Unsolved, WrongRowCount, WrongColumnCount, MonsterNotInDeadEnd,
    DeadEndWithNoMonster, NoTreasureRoomForChest, CorridorsTooWide, UnconnectedCorridors
)


def check_solved(board):
    """
    Verifies a complete board against every rule.

    Checks, stopping at the first failure: no unknown cells; row wall counts;
    column wall counts; monsters exactly in dead ends and a treasure room for
    every chest (row-major scan); no empty 2x2 block outside treasure rooms;
    a single connected corridor.

    :param Board board: The board to verify. It is not modified.
    :returns: None if the board is a valid solution, otherwise the first error.
    :rtype: BoardError | None
    """
    if not board.is_complete():
        return Unsolved()

    for i, row in enumerate(board.cells):
        if row.count(STATE_WALL) != board.row_counts[i]:
            return WrongRowCount(i)
    for j in range(BOARD_SIZE):
        if board.column(j).count(STATE_WALL) != board.column_counts[j]:
            return WrongColumnCount(j)

    treasure_rooms = []
    for r, c in board.coordinates():
        error = _dead_end_error(board, r, c)
        if error:
            return error
        if board.cells[r][c] == STATE_CHEST:
            room = rules.find_treasure_room(board, r, c)
            if room is None:
                return NoTreasureRoomForChest(r, c)
            treasure_rooms.append(room)

    exempt = set()
    for room in treasure_rooms:
        exempt.update(rules.treasure_room_buffer(*room))
    for r in range(BOARD_SIZE - 1):
        for c in range(BOARD_SIZE - 1):
            if (r, c) not in exempt and rules.is_empty_block(board, r, c):
                return CorridorsTooWide(r, c)

    connected = rules.count_connected(board)
    if connected is not None:
        reached, total = connected
        if reached != total:
            return UnconnectedCorridors()

    return None


def _dead_end_error(board, r, c):
    # Monsters live in dead ends, and every dead end holds a monster.
    monster = rules.is_monster(board, r, c)
    if monster != rules.is_dead_end(board, r, c):
        return MonsterNotInDeadEnd(r, c) if monster else DeadEndWithNoMonster(r, c)
    return None


def maybe_solvable(board):
    """
    Cheap feasibility test for a board that may still contain unknown cells.

    Runs the line-count range tests, then scans the board: a monster must still
    be able to end up in a dead end, no other cell may already be a settled dead
    end, and every chest needs at least one candidate room that passes the
    relaxed treasure room test. The 2x2 and connectivity rules are left to
    `check_solved`.

    :returns: None if the board may still have a valid completion, otherwise the
              error that rules it out.
    :rtype: BoardError | None
    """
    bad_row = rules.rows_acceptable(board)
    if bad_row is not None:
        return WrongRowCount(bad_row)
    bad_col = rules.cols_acceptable(board)
    if bad_col is not None:
        return WrongColumnCount(bad_col)

    for r, c in board.coordinates():
        if rules.is_monster(board, r, c):
            if not rules.maybe_dead_end(board, r, c):
                return MonsterNotInDeadEnd(r, c)
        elif rules.is_dead_end(board, r, c) and not _has_unknown_neighbor(board, r, c):
            return DeadEndWithNoMonster(r, c)

        if board.cells[r][c] == STATE_CHEST and rules.find_treasure_room(board, r, c, relaxed=True) is None:
            return NoTreasureRoomForChest(r, c)

    return None


def _has_unknown_neighbor(board, r, c):
    # An unknown fourth neighbour may still become a wall and close the cell off.
    return any(board.at(nr, nc) == STATE_UNKNOWN for nr, nc in rules.neighbors(r, c))
