"""**********************************************************************************
 * Title: puzzle_handler.py
 * -------------------------------------------------------------------------------
 * Description:
 * Handles dungeon puzzle data outside the solver: decoding and encoding the
 * text board format, rendering boards for the terminal and loading the sample
 * puzzles bundled in the 'puzzles' directory.
 *
 * Text board format (BOARD_SIZE + 1 lines):
 *
 *      35344253        <- one ignored character, then the column wall targets
 *     4M   M M         <- row wall target, then one character per cell
 *     ...
 *
 * Cell characters: ' ' unknown, '.' empty, '#' wall, 'M' monster, 'C' chest.
 **********************************************************************************"""

# --- IMPORTS ---
import os
import logging

from dungeonlab.board import Board
from dungeonlab.constants import (
    BOARD_SIZE, CHAR_TO_STATE, STATE_TO_CHAR, CELL_COLORS, DISPLAY_SYMBOLS, RESET,
    PUZZLE_DIR, PUZZLE_EXTENSION
)
from dungeonlab.errors import ParseError, PuzzleNotFoundError


# --- BOARD DECODING AND ENCODING ---
def _parse_count(char, what):
    if not char.isdigit() or not char.isascii():
        raise ParseError(f"Expected a digit for the {what}, got {char!r}.")
    if int(char) > BOARD_SIZE:
        raise ParseError(f"The {what} cannot exceed {BOARD_SIZE}.")
    return int(char)


def parse_board(board_string):
    """
    Decodes a board from the text board format.

    Line breaks at either end of the string are ignored; spaces are not, since
    a space is an unknown cell (and the first character of the header line).

    :param str board_string: The board in text form.
    :returns: The decoded board.
    :rtype: Board
    :raises ParseError: If the string does not follow the format.
    """
    lines = board_string.strip('\r\n').splitlines()
    if len(lines) != BOARD_SIZE + 1:
        raise ParseError(f"Expected {BOARD_SIZE + 1} lines, got {len(lines)}.")

    header, rows = lines[0], lines[1:]
    if len(header) != BOARD_SIZE + 1:
        raise ParseError(f"The header line must have {BOARD_SIZE + 1} characters.")
    column_counts = [_parse_count(ch, f"column {i} target") for i, ch in enumerate(header[1:])]

    row_counts, cells = [], []
    for r, line in enumerate(rows):
        if len(line) != BOARD_SIZE + 1:
            raise ParseError(f"Row {r} must have {BOARD_SIZE + 1} characters, got {len(line)}.")
        row_counts.append(_parse_count(line[0], f"row {r} target"))
        try:
            cells.append([CHAR_TO_STATE[ch] for ch in line[1:]])
        except KeyError as e:
            raise ParseError(f"Unknown cell character {e.args[0]!r} in row {r}.") from e

    return Board(cells, row_counts, column_counts)


def format_board(board):
    """Encodes a board into the text board format (inverse of `parse_board`)."""
    lines = [" " + "".join(str(n) for n in board.column_counts)]
    for count, row in zip(board.row_counts, board.cells):
        lines.append(str(count) + "".join(STATE_TO_CHAR[cell] for cell in row))
    return "\n".join(lines)


# --- DISPLAY FUNCTIONS ---
def render_board(board, title="Board"):
    """Renders the board with a coloured background per cell state."""
    out = [f"--- {title} ---", "   " + "".join(f" {n} " for n in board.column_counts)]
    for count, row in zip(board.row_counts, board.cells):
        colored_chars = [f"{CELL_COLORS[cell]} {DISPLAY_SYMBOLS[cell]} {RESET}" for cell in row]
        out.append(f" {count} " + "".join(colored_chars))
    out.append("-" * (len(title) + 8))
    return "\n".join(out)


def display_board(board, title="Board"):
    print("\n" + render_board(board, title) + "\n")


# --- PUZZLE LIBRARY ---
def list_puzzles(puzzle_dir=PUZZLE_DIR):
    """Names of the bundled puzzles, sorted."""
    if not os.path.isdir(puzzle_dir):
        logging.warning(f"Puzzle directory not found at {puzzle_dir}")
        return []
    return sorted(os.path.splitext(name)[0] for name in os.listdir(puzzle_dir)
                  if name.endswith(PUZZLE_EXTENSION))


def read_board_file(file_path):
    """Reads and decodes a board stored in a text file."""
    logging.info(f"Reading board from: {file_path}")
    with open(file_path, 'r', encoding='utf-8') as f:
        return parse_board(f.read())


def load_puzzle(name, puzzle_dir=PUZZLE_DIR):
    """
    Loads one of the bundled sample puzzles by name.

    :param str name: File name of the puzzle without the extension.
    :returns: The decoded board.
    :rtype: Board
    :raises PuzzleNotFoundError: If no such puzzle is bundled.
    """
    if name not in list_puzzles(puzzle_dir):
        logging.error(f"Puzzle '{name}' not found in {puzzle_dir}")
        raise PuzzleNotFoundError(name)
    return read_board_file(os.path.join(puzzle_dir, name + PUZZLE_EXTENSION))
