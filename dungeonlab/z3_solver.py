"""**********************************************************************************
 * Title: z3_solver.py
 * -------------------------------------------------------------------------------
 * Description:
 * A second solving engine built on the Z3 SMT solver. Every unknown cell gets
 * one Boolean "is a wall" variable (unknown cells resolve to a wall or an
 * empty cell, exactly as in the backtracking search). The local rules are
 * encoded as constraints:
 *
 *   - wall counts of every row and column,
 *   - monsters sit in dead ends and no other open cell is a dead end,
 *   - every chest lies in one of its nine candidate treasure rooms,
 *   - no empty 2x2 block where no treasure room could ever exempt it.
 *
 * Connectivity and the exact room exemptions are global, so each model is
 * handed to `check_solved`; a model it rejects is blocked and Z3 is asked
 * again. Accepted models are blocked too, which lets the solver look for a
 * second solution to prove uniqueness.
 **********************************************************************************"""

import logging
import time

from z3 import Solver, Bool, BoolVal, PbEq, Not, And, Or, Implies, is_true, sat

from dungeonlab import rules
from dungeonlab.constants import (
    BOARD_SIZE, STATE_UNKNOWN, STATE_EMPTY, STATE_WALL, STATE_MONSTER, STATE_CHEST
)
from dungeonlab.errors import Unsolvable
from dungeonlab.timing import format_duration
from dungeonlab.validator import check_solved


class Z3DungeonSolver:
    def __init__(self, board):
        self.board = board
        self.wall_vars = {(r, c): Bool(f"w_{r}_{c}") for r, c in board.unknown_cells()}
        self.models_rejected = 0
        self.duration = 0.0

    # --- Expression helpers ---
    def _wall(self, r, c):
        if (r, c) in self.wall_vars:
            return self.wall_vars[(r, c)]
        return BoolVal(self.board.at(r, c) == STATE_WALL)

    def _empty(self, r, c):
        if (r, c) in self.wall_vars:
            return Not(self.wall_vars[(r, c)])
        return BoolVal(self.board.at(r, c) == STATE_EMPTY)

    def _walls_exactly(self, cells, n):
        return PbEq([(self._wall(r, c), 1) for r, c in cells], n)

    # --- Constraints ---
    def _add_line_counts(self, s):
        for i in range(BOARD_SIZE):
            s.add(self._walls_exactly([(i, c) for c in range(BOARD_SIZE)], self.board.row_counts[i]))
            s.add(self._walls_exactly([(r, i) for r in range(BOARD_SIZE)], self.board.column_counts[i]))

    def _add_dead_ends(self, s):
        for r, c in self.board.coordinates():
            cell = self.board.cells[r][c]
            dead_end = self._walls_exactly(rules.neighbors(r, c), 3)
            if cell == STATE_MONSTER:
                s.add(dead_end)
            elif cell in (STATE_EMPTY, STATE_CHEST):
                s.add(Not(dead_end))
            elif cell == STATE_UNKNOWN:
                s.add(Implies(Not(self.wall_vars[(r, c)]), Not(dead_end)))

    def _room_condition(self, r, c):
        """Constraint for a treasure room at (r, c), or None if the fixed cells rule it out."""
        conditions, chests = [], 0
        for ir, ic in rules.treasure_room_interior(r, c):
            cell = self.board.at(ir, ic)
            if cell == STATE_CHEST:
                chests += 1
            elif cell == STATE_UNKNOWN:
                conditions.append(Not(self.wall_vars[(ir, ic)]))
            elif cell != STATE_EMPTY:
                return None
        if chests > 1:
            return None
        conditions.append(self._walls_exactly(rules.treasure_room_boundary(r, c), rules.ROOM_BOUNDARY_WALLS))
        return And(conditions)

    def _add_treasure_rooms(self, s):
        for r, c in self.board.coordinates():
            if self.board.cells[r][c] != STATE_CHEST:
                continue
            options = [self._room_condition(*corner) for corner in rules.treasure_room_candidates(r, c)]
            options = [o for o in options if o is not None]
            s.add(Or(options) if options else BoolVal(False))

    def _add_narrow_corridors(self, s):
        # Only blocks that no candidate room of any chest could ever exempt.
        exemptable = set()
        for r, c in self.board.coordinates():
            if self.board.cells[r][c] == STATE_CHEST:
                for corner in rules.treasure_room_candidates(r, c):
                    exemptable.update(rules.treasure_room_buffer(*corner))

        for r in range(BOARD_SIZE - 1):
            for c in range(BOARD_SIZE - 1):
                if (r, c) in exemptable:
                    continue
                block = [(r, c), (r, c + 1), (r + 1, c), (r + 1, c + 1)]
                if any(self.board.cells[br][bc] not in (STATE_UNKNOWN, STATE_EMPTY) for br, bc in block):
                    continue
                s.add(Not(And([self._empty(br, bc) for br, bc in block])))

    def _build(self):
        s = Solver()
        self._add_line_counts(s)
        self._add_dead_ends(s)
        self._add_treasure_rooms(s)
        self._add_narrow_corridors(s)
        return s

    def _board_from_model(self, model):
        candidate = self.board.copy()
        for (r, c), var in self.wall_vars.items():
            is_wall = is_true(model.eval(var, model_completion=True))
            candidate.cells[r][c] = STATE_WALL if is_wall else STATE_EMPTY
        return candidate

    def _block(self, s, candidate):
        s.add(Or([Not(var) if candidate.cells[r][c] == STATE_WALL else var
                  for (r, c), var in self.wall_vars.items()]))

    # --- Public API ---
    def find_solutions(self, max_solutions=1):
        """
        Searches for up to `max_solutions` solutions without touching the board.

        :param int max_solutions: Stop after this many solutions (2 checks uniqueness).
        :returns: Solved copies of the board, in the order Z3 produced them.
        :rtype: list[Board]
        """
        start_time = time.monotonic()
        self.models_rejected = 0
        solutions = []

        if not self.wall_vars:
            if check_solved(self.board) is None:
                solutions.append(self.board.copy())
            self.duration = time.monotonic() - start_time
            return solutions

        s = self._build()
        while len(solutions) < max_solutions and s.check() == sat:
            candidate = self._board_from_model(s.model())
            self._block(s, candidate)
            error = check_solved(candidate)
            if error is None:
                solutions.append(candidate)
            else:
                self.models_rejected += 1
                logging.debug(f"Z3 model rejected: {error.describe()}")

        self.duration = time.monotonic() - start_time
        logging.info(f"Z3 solve time: {format_duration(self.duration)} "
                     f"({len(solutions)} solution(s), {self.models_rejected} model(s) rejected)")
        return solutions

    def solve(self):
        """Fills the board in place with the first solution found."""
        solutions = self.find_solutions(1)
        if not solutions:
            return Unsolvable()
        for r, c in self.wall_vars:
            self.board.cells[r][c] = solutions[0].cells[r][c]
        return None
