"""**********************************************************************************
 * Title: board.py
 * -------------------------------------------------------------------------------
 * Description:
 * The puzzle board: a fixed-size grid of cell states together with the wall
 * count every row and every column must reach. The board owns its grid; the
 * constructor copies whatever it is given so no caller can alias a row. The
 * accessor `at` is the single place that interprets coordinates outside the
 * board, which it treats as walls, so neighbour and room enumeration never has
 * to special-case the edges.
 **********************************************************************************"""

from dungeonlab.constants import (
    BOARD_SIZE, MAX_LINE_COUNT, CELL_STATES, STATE_UNKNOWN, STATE_WALL, STATE_TO_CHAR
)


def is_in_bounds(r, c):
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


class Board:
    def __init__(self, cells, row_counts, column_counts):
        """
        Creates a board from a grid of cell states and the two target sequences.

        :param list[list[int]] cells: BOARD_SIZE rows of BOARD_SIZE cell states.
        :param row_counts: Required number of walls for every row.
        :param column_counts: Required number of walls for every column.
        :raises ValueError: If a dimension is wrong, a state is not a cell state
                            or a target is outside [0, BOARD_SIZE].
        """
        if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
            raise ValueError(f"A board needs {BOARD_SIZE}x{BOARD_SIZE} cells.")
        if any(cell not in CELL_STATES for row in cells for cell in row):
            raise ValueError("The grid contains an unknown cell state.")
        for name, counts in (('row', row_counts), ('column', column_counts)):
            if len(counts) != BOARD_SIZE:
                raise ValueError(f"Expected {BOARD_SIZE} {name} counts, got {len(counts)}.")
            if any(not 0 <= n <= MAX_LINE_COUNT for n in counts):
                raise ValueError(f"Every {name} count must be between 0 and {MAX_LINE_COUNT}.")

        self.cells = [list(row) for row in cells]
        self.row_counts = tuple(row_counts)
        self.column_counts = tuple(column_counts)

    def is_in_bounds(self, r, c):
        return is_in_bounds(r, c)

    def at(self, r, c):
        """Returns the cell at (r, c); anything outside the board is a wall."""
        if self.is_in_bounds(r, c):
            return self.cells[r][c]
        return STATE_WALL

    def coordinates(self):
        """Yields every (row, col) of the board in row-major order."""
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                yield r, c

    def unknown_cells(self):
        return [(r, c) for r, c in self.coordinates() if self.cells[r][c] == STATE_UNKNOWN]

    def first_unknown(self):
        for r, c in self.coordinates():
            if self.cells[r][c] == STATE_UNKNOWN:
                return r, c
        return None

    def is_complete(self):
        return self.first_unknown() is None

    def column(self, c):
        return [row[c] for row in self.cells]

    def copy(self):
        return Board(self.cells, self.row_counts, self.column_counts)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.cells == other.cells and self.row_counts == other.row_counts
                and self.column_counts == other.column_counts)

    def __repr__(self):
        rows = "/".join("".join(STATE_TO_CHAR[cell] for cell in row) for row in self.cells)
        return f"Board(rows={self.row_counts}, columns={self.column_counts}, cells='{rows}')"
