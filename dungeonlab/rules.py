"""**********************************************************************************
 * Title: rules.py
 * -------------------------------------------------------------------------------
 * Description:
 * The individual rule checks of the dungeon puzzle. Every check is a pure
 * function of the board. Most come in two flavours: an exact version for
 * fully resolved cells and a relaxed version that stays true while the
 * remaining unknown cells could still make the rule hold. The relaxed
 * versions are what the search uses to prune partial boards.
 **********************************************************************************"""

from collections import deque

from dungeonlab.board import is_in_bounds
from dungeonlab.constants import (
    BOARD_SIZE, TREASURE_ROOM_SIZE,
    STATE_UNKNOWN, STATE_EMPTY, STATE_WALL, STATE_MONSTER, STATE_CHEST
)

ROOM_BOUNDARY_WALLS = 4 * TREASURE_ROOM_SIZE - 1


def neighbors(r, c):
    """The four orthogonal neighbours of (r, c); they may be off the board."""
    return [(r - 1, c), (r, c - 1), (r, c + 1), (r + 1, c)]


# --- LINE COUNTS ---
def _first_line_out_of_range(lines, targets):
    for i, (line, target) in enumerate(zip(lines, targets)):
        walls = line.count(STATE_WALL)
        unknowns = line.count(STATE_UNKNOWN)
        if not walls <= target <= walls + unknowns:
            return i
    return None


def rows_acceptable(board):
    """
    Checks that every row can still reach its wall target.

    A row with `walls` walls and `unknowns` unknown cells can end up with any
    wall count in [walls, walls + unknowns].

    :returns: The index of the first row whose target is out of reach, or None.
    :rtype: int | None
    """
    return _first_line_out_of_range(board.cells, board.row_counts)


def cols_acceptable(board):
    """Column counterpart of `rows_acceptable`."""
    columns = [board.column(c) for c in range(BOARD_SIZE)]
    return _first_line_out_of_range(columns, board.column_counts)


# --- DEAD ENDS ---
def wall_neighbors(board, r, c):
    return sum(1 for nr, nc in neighbors(r, c) if board.at(nr, nc) == STATE_WALL)


def is_dead_end(board, r, c):
    """True if (r, c) is a resolved open cell with exactly three wall neighbours."""
    if board.at(r, c) in (STATE_UNKNOWN, STATE_WALL):
        return False
    return wall_neighbors(board, r, c) == 3


def maybe_dead_end(board, r, c):
    """
    True while (r, c) could still end up with exactly three wall neighbours.

    Only empty neighbours count as air; monsters, chests and unknown cells
    count towards neither side.
    """
    cells = [board.at(nr, nc) for nr, nc in neighbors(r, c)]
    walls = cells.count(STATE_WALL)
    air = cells.count(STATE_EMPTY)
    return walls <= 3 and air <= 1


# --- TREASURE ROOMS ---
def treasure_room_interior(r, c):
    """Cells of the room whose top-left corner is (r, c)."""
    return [(r + dr, c + dc) for dr in range(TREASURE_ROOM_SIZE) for dc in range(TREASURE_ROOM_SIZE)]


def treasure_room_boundary(r, c):
    """The 12 cells orthogonally bordering the room; corners are not part of it."""
    size = TREASURE_ROOM_SIZE
    top = [(r - 1, c + i) for i in range(size)]
    sides = []
    for i in range(size):
        sides.append((r + i, c - 1))
        sides.append((r + i, c + size))
    bottom = [(r + size, c + i) for i in range(size)]
    return top + sides + bottom


def _interior_fits(board, r, c, allowed):
    chest_seen = False
    for ir, ic in treasure_room_interior(r, c):
        cell = board.at(ir, ic)
        if cell == STATE_CHEST:
            if chest_seen:
                return False
            chest_seen = True
        elif cell not in allowed:
            return False
    return True


def is_treasure_room(board, r, c):
    """
    Exact test for a treasure room with its top-left corner at (r, c).

    Every interior cell must be empty apart from at most one chest, and exactly
    one of the 12 boundary cells may be something other than a wall.
    """
    if not _interior_fits(board, r, c, (STATE_EMPTY,)):
        return False
    boundary = [board.at(br, bc) for br, bc in treasure_room_boundary(r, c)]
    return boundary.count(STATE_WALL) == ROOM_BOUNDARY_WALLS


def maybe_treasure_room(board, r, c):
    """
    Relaxed test: unknown interior cells are allowed, and unknown boundary cells
    are slack, so the room passes while 11 lies in [walls, walls + unknowns].
    """
    if not _interior_fits(board, r, c, (STATE_EMPTY, STATE_UNKNOWN)):
        return False
    boundary = [board.at(br, bc) for br, bc in treasure_room_boundary(r, c)]
    walls = boundary.count(STATE_WALL)
    unknowns = boundary.count(STATE_UNKNOWN)
    return walls <= ROOM_BOUNDARY_WALLS <= walls + unknowns


def treasure_room_candidates(r, c):
    """Top-left corners of the nine room placements that contain (r, c), row-major."""
    span = range(TREASURE_ROOM_SIZE - 1, -1, -1)
    return [(r - dr, c - dc) for dr in span for dc in span]


def find_treasure_room(board, r, c, relaxed=False):
    """
    Finds a treasure room for the chest at (r, c).

    :param bool relaxed: Use `maybe_treasure_room` instead of the exact test.
    :returns: The top-left corner of the first matching candidate, or None.
    """
    check = maybe_treasure_room if relaxed else is_treasure_room
    for corner in treasure_room_candidates(r, c):
        if check(board, *corner):
            return corner
    return None


# Offsets, relative to a room's top-left corner, of the cells exempt from the
# 2x2 rule: a 6x6 block around the room without its four corners.
#   . # # # # .
#   # # # # # #
#   # # # # # #
#   # # # # # #
#   # # # # # #
#   . # # # # .
_BUFFER_OFFSETS = (
    [(-2, dc) for dc in range(-1, 3)]
    + [(dr, dc) for dr in range(-1, 3) for dc in range(-2, 4)]
    + [(3, dc) for dc in range(-1, 3)]
)


def treasure_room_buffer(r, c):
    """On-board 2x2 top-left corners a room at (r, c) exempts from the 2x2 rule."""
    cells = [(r + dr, c + dc) for dr, dc in _BUFFER_OFFSETS]
    return [(br, bc) for br, bc in cells if is_in_bounds(br, bc)]


def is_empty_block(board, r, c):
    """True if the 2x2 block with top-left (r, c) consists of four empty cells."""
    block = [(r, c), (r, c + 1), (r + 1, c), (r + 1, c + 1)]
    return all(board.at(br, bc) == STATE_EMPTY for br, bc in block)


# --- CONNECTIVITY ---
def count_connected(board):
    """
    Flood fills the open cells starting from the first empty cell.

    Monsters and chests are open cells too; only walls stop the fill.

    :returns: (cells reached, total number of non-wall cells), or None when the
              board has no empty cell to start from.
    :rtype: tuple[int, int] | None
    """
    start = next((rc for rc in board.coordinates() if board.cells[rc[0]][rc[1]] == STATE_EMPTY), None)
    if start is None:
        return None

    seen = {start}
    q = deque([start])
    while q:
        r, c = q.popleft()
        for nr, nc in neighbors(r, c):
            if (nr, nc) not in seen and board.at(nr, nc) != STATE_WALL:
                seen.add((nr, nc))
                q.append((nr, nc))

    total = sum(1 for row in board.cells for cell in row if cell != STATE_WALL)
    return len(seen), total


def is_monster(board, r, c):
    return board.at(r, c) == STATE_MONSTER
