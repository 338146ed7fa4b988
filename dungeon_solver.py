# dungeon_solver.py

import sys
import logging
import argparse

from dungeonlab import puzzle_handler as pz
from dungeonlab import constants as const
from dungeonlab.errors import ParseError, PuzzleNotFoundError
from dungeonlab.solver import DungeonSolver
from dungeonlab.validator import check_solved
from dungeonlab.timing import format_duration
from dungeonlab.z3_solver import Z3DungeonSolver


def load_board(args):
    """Loads the board selected on the command line, or None after logging why not."""
    try:
        if args.puzzle:
            return pz.load_puzzle(args.puzzle)
        return pz.read_board_file(args.file)
    except PuzzleNotFoundError:
        logging.error(f"Unknown puzzle '{args.puzzle}'. Use --list to see the bundled puzzles.")
    except (OSError, ParseError) as e:
        logging.error(f"Could not read board: {e}")
    return None


def check_board(board):
    pz.display_board(board, "Board")
    error = check_solved(board)
    if error is None:
        print("RESULT: The board is a valid solution.")
        return 0
    print(f"RESULT: Invalid board. {error.describe()}")
    return 1


def solve_board(board, engine, unique=False):
    pz.display_board(board, "Puzzle")
    print(f"Solving {len(board.unknown_cells())} unknown cells with the {engine} engine...")

    if engine == const.ENGINE_Z3:
        solver = Z3DungeonSolver(board)
        solutions = solver.find_solutions(2 if unique else 1)
        duration = solver.duration
    else:
        solver = DungeonSolver(board)
        solutions = [board] if solver.solve() is None else []
        duration = solver.duration

    print("\n" + "=" * 40)
    print("              ANALYSIS COMPLETE")
    print("=" * 40)
    if not solutions:
        print("RESULT: No solution found.")
    elif unique and len(solutions) > 1:
        print("RESULT: Multiple solutions exist. Found at least 2.")
        pz.display_board(solutions[0], "Solution 1")
        pz.display_board(solutions[1], "Solution 2")
    else:
        print("RESULT: Found a solution." if not unique else "RESULT: Found 1 unique solution.")
        pz.display_board(solutions[0], "Solution")
    print(f"(Search completed in {format_duration(duration)})")
    print("=" * 40)
    return 0 if solutions else 1


def run_demo(engine):
    """Solves the default puzzle, then validates every other bundled board."""
    status = solve_board(pz.load_puzzle(const.DEFAULT_PUZZLE), engine)
    for name in pz.list_puzzles():
        if name == const.DEFAULT_PUZZLE:
            continue
        error = check_solved(pz.load_puzzle(name))
        print(f"{name}: {'valid' if error is None else error.describe()}")
    return status


def main(argv=None):
    parser = argparse.ArgumentParser(description="A command-line dungeon puzzle solver and validator.")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("-p", "--puzzle", type=str, help="Name of a bundled puzzle to load.")
    group.add_argument("-f", "--file", type=str, help="Path to a board in the text board format.")
    group.add_argument("--demo", action="store_true", help="Solve the sample puzzle and check every sample board.")
    group.add_argument("--list", action="store_true", help="List the bundled puzzles.")
    parser.add_argument("--check", action="store_true", help="Validate the board instead of solving it.")
    parser.add_argument("--engine", choices=const.SOLVER_ENGINES, default=const.ENGINE_BACKTRACKING,
                        help="Solving engine to use.")
    parser.add_argument("--unique", action="store_true", help="Look for a second solution (z3 engine only).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.unique and args.engine != const.ENGINE_Z3:
        parser.error("--unique requires --engine z3")

    if args.list:
        for name in pz.list_puzzles():
            print(name)
        return 0
    if args.demo:
        return run_demo(args.engine)

    board = load_board(args)
    if board is None:
        return 1
    if args.check:
        return check_board(board)
    return solve_board(board, args.engine, args.unique)


if __name__ == "__main__":
    sys.exit(main())
