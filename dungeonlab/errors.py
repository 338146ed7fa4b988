"""Board errors reported by the validator and the solvers.

Rule violations are plain values: every check returns ``None`` when the board
passes and one of the instances below when it does not. Exceptions are kept for
malformed input (``ParseError``) and missing sample puzzles
(``PuzzleNotFoundError``).
"""

from dataclasses import asdict, dataclass


class ParseError(ValueError):
    """Raised when a board string does not follow the text board format."""


class PuzzleNotFoundError(LookupError):
    """Raised when a bundled puzzle name does not exist."""


@dataclass(frozen=True)
class BoardError:
    code = 'board_error'

    def describe(self):
        return self.code.replace('_', ' ')

    def to_dict(self):
        data = {'code': self.code, 'message': self.describe()}
        data.update(asdict(self))
        return data


@dataclass(frozen=True)
class Unsolved(BoardError):
    code = 'unsolved'

    def describe(self):
        return "The board still has unknown cells."


@dataclass(frozen=True)
class WrongRowCount(BoardError):
    index: int
    code = 'wrong_row_count'

    def describe(self):
        return f"Row {self.index} does not have the required number of walls."


@dataclass(frozen=True)
class WrongColumnCount(BoardError):
    index: int
    code = 'wrong_column_count'

    def describe(self):
        return f"Column {self.index} does not have the required number of walls."


@dataclass(frozen=True)
class MonsterNotInDeadEnd(BoardError):
    row: int
    col: int
    code = 'monster_not_in_dead_end'

    def describe(self):
        return f"The monster at ({self.row}, {self.col}) is not in a dead end."


@dataclass(frozen=True)
class DeadEndWithNoMonster(BoardError):
    row: int
    col: int
    code = 'dead_end_with_no_monster'

    def describe(self):
        return f"The dead end at ({self.row}, {self.col}) has no monster."


@dataclass(frozen=True)
class NoTreasureRoomForChest(BoardError):
    row: int
    col: int
    code = 'no_treasure_room_for_chest'

    def describe(self):
        return f"The chest at ({self.row}, {self.col}) is not inside a valid treasure room."


@dataclass(frozen=True)
class CorridorsTooWide(BoardError):
    row: int
    col: int
    code = 'corridors_too_wide'

    def describe(self):
        return f"The 2x2 block at ({self.row}, {self.col}) is entirely empty."


@dataclass(frozen=True)
class UnconnectedCorridors(BoardError):
    code = 'unconnected_corridors'

    def describe(self):
        return "Not every corridor is connected."


@dataclass(frozen=True)
class Unsolvable(BoardError):
    code = 'unsolvable'

    def describe(self):
        return "No assignment of the unknown cells satisfies every rule."
