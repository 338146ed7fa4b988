"""Dungeon puzzle lab: board model, rule validator and solvers.

The Z3 engine lives in `dungeonlab.z3_solver` and is imported on demand.
"""

from dungeonlab.board import Board
from dungeonlab.errors import (
    BoardError, Unsolved, WrongRowCount, WrongColumnCount, MonsterNotInDeadEnd,
    DeadEndWithNoMonster, NoTreasureRoomForChest, CorridorsTooWide,
    UnconnectedCorridors, Unsolvable, ParseError, PuzzleNotFoundError
)
from dungeonlab.puzzle_handler import parse_board, format_board, load_puzzle
from dungeonlab.solver import DungeonSolver, solve
from dungeonlab.validator import check_solved, maybe_solvable

__all__ = [
    "Board",
    "BoardError",
    "Unsolved",
    "WrongRowCount",
    "WrongColumnCount",
    "MonsterNotInDeadEnd",
    "DeadEndWithNoMonster",
    "NoTreasureRoomForChest",
    "CorridorsTooWide",
    "UnconnectedCorridors",
    "Unsolvable",
    "ParseError",
    "PuzzleNotFoundError",
    "parse_board",
    "format_board",
    "load_puzzle",
    "DungeonSolver",
    "solve",
    "check_solved",
    "maybe_solvable",
]
