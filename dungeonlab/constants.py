"""**********************************************************************************
 * Title: constants.py
 * -------------------------------------------------------------------------------
 * Description:
 * This file contains all the static data and constants for the dungeon puzzle
 * lab. It centralizes configuration values and definitions, such as the board
 * dimension, cell state identifiers, the character mapping used by the text
 * board format, terminal colours, the location of the bundled puzzles and the
 * defaults used by the local web server.
 **********************************************************************************"""

import os

# Sizes in cells.
# Board dimension, line target limit and treasure room side.
BOARD_SIZE = 8
MAX_LINE_COUNT = BOARD_SIZE
TREASURE_ROOM_SIZE = 3

# --- CELL STATE CONSTANTS ---
# Defines the possible states for a single cell on the puzzle grid.
STATE_UNKNOWN = 0
STATE_EMPTY = 1
STATE_WALL = 2
STATE_MONSTER = 3
STATE_CHEST = 4
CELL_STATES = (STATE_UNKNOWN, STATE_EMPTY, STATE_WALL, STATE_MONSTER, STATE_CHEST)

# --- TEXT BOARD FORMAT ---
# One character per cell; the first line carries the column targets and every
# following line starts with its row target.
CHAR_TO_STATE = {
    ' ': STATE_UNKNOWN,
    '.': STATE_EMPTY,
    '#': STATE_WALL,
    'M': STATE_MONSTER,
    'C': STATE_CHEST,
}
STATE_TO_CHAR = {v: k for k, v in CHAR_TO_STATE.items()}

# --- TERMINAL DISPLAY ---
RESET = "\033[0m"
CELL_COLORS = {
    STATE_UNKNOWN: "\033[48;2;224;224;224m\033[38;2;0;0;0m",  # Light Gray
    STATE_EMPTY: "\033[48;2;255;255;204m\033[38;2;0;0;0m",    # Bright Yellow
    STATE_WALL: "\033[48;2;90;90;100m\033[38;2;255;255;255m",  # Slate
    STATE_MONSTER: "\033[48;2;255;204;204m\033[38;2;0;0;0m",  # Bright Red
    STATE_CHEST: "\033[48;2;210;240;210m\033[38;2;0;0;0m",    # Mint
}
DISPLAY_SYMBOLS = {
    STATE_UNKNOWN: '?',
    STATE_EMPTY: '.',
    STATE_WALL: '#',
    STATE_MONSTER: 'M',
    STATE_CHEST: 'C',
}

# --- PUZZLE LIBRARY ---
PUZZLE_DIR = os.path.join(os.path.dirname(__file__), 'puzzles')
PUZZLE_EXTENSION = '.txt'
DEFAULT_PUZZLE = 'puzzle_5_8'

# --- SOLVER ENGINES ---
ENGINE_BACKTRACKING = 'backtracking'
ENGINE_Z3 = 'z3'
SOLVER_ENGINES = (ENGINE_BACKTRACKING, ENGINE_Z3)

# --- WEB SERVER ---
SERVER_HOST = '0.0.0.0'
SERVER_PORT = 5001
