"""**********************************************************************************
 * Title: solver.py
 * -------------------------------------------------------------------------------
 * Description:
 * Depth-first backtracking solver. Unknown cells are filled one at a time in
 * row-major order, trying a wall first and an empty cell second. After every
 * tentative assignment the partial board is pruned with `maybe_solvable`; once
 * no unknown cell remains the board is handed to `check_solved`. The board is
 * mutated in place: on success it holds the solution, on failure every cell
 * the search touched is back to unknown.
 **********************************************************************************"""

import logging
import time

from dungeonlab.constants import STATE_UNKNOWN, STATE_WALL, STATE_EMPTY
from dungeonlab.errors import Unsolvable
from dungeonlab.validator import check_solved, maybe_solvable
from dungeonlab.timing import format_duration

# Order in which the search tries values for an unknown cell.
ASSIGNMENT_ORDER = (STATE_WALL, STATE_EMPTY)


class DungeonSolver:
    def __init__(self, board):
        self.board = board
        self.nodes_explored = 0
        self.duration = 0.0

    def solve(self):
        """
        Public method to start the solving process.

        :returns: None if the board now holds a solution, otherwise Unsolvable().
        :rtype: BoardError | None
        """
        unknowns = len(self.board.unknown_cells())
        logging.info(f"Backtracking over {unknowns} unknown cells...")
        self.nodes_explored = 0
        start_time = time.monotonic()
        solved = self._backtrack()
        self.duration = time.monotonic() - start_time

        outcome = "solved" if solved else "unsolvable"
        logging.info(f"Search finished ({outcome}) after {self.nodes_explored} nodes "
                     f"in {format_duration(self.duration)}.")
        return None if solved else Unsolvable()

    def _backtrack(self):
        """Recursive backtracking step; True once the board holds a solution."""
        self.nodes_explored += 1
        cell = self.board.first_unknown()

        # Base case: every cell is decided, so only the full rule set remains.
        if cell is None:
            return check_solved(self.board) is None

        r, c = cell
        for state in ASSIGNMENT_ORDER:
            self.board.cells[r][c] = state
            if maybe_solvable(self.board) is None and self._backtrack():
                return True

        self.board.cells[r][c] = STATE_UNKNOWN
        return False


def solve(board):
    """Solves `board` in place; see `DungeonSolver.solve`."""
    return DungeonSolver(board).solve()
