import enum
import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

# --- Configuration ---
BOARD_SIZE = 3
EMPTY = 0
PLAYER_X = 1
PLAYER_O = 2

OUT_OF_BOUNDS_MESSAGE = "Invalid index, max range of x and y is 2"
ALREADY_OCCUPIED_MESSAGE = "You can't change your or a previous player's answer"
GAME_OVER_MESSAGE = "The game is already over"


class Cell(enum.IntEnum):
    """Contents of one grid position, stored as an int in the numpy grid."""
    EMPTY = EMPTY
    X = PLAYER_X
    O = PLAYER_O

    def __str__(self):
        return " " if self is Cell.EMPTY else self.name


class Mark(enum.Enum):
    """One of the two players. X moves first."""
    X = PLAYER_X
    O = PLAYER_O

    @property
    def cell(self):
        return Cell(self.value)

    @property
    def label(self):
        return "Player 1" if self is Mark.X else "Player 2"

    def other(self):
        return Mark.O if self is Mark.X else Mark.X


class Status(enum.Enum):
    IN_PROGRESS = "in_progress"
    ENDED = "ended"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a move or of a whole game.
    winner is only set for an ENDED game that somebody won; an ENDED
    game with no winner is a draw.
    """
    status: Status
    winner: "Mark | None" = None

    @classmethod
    def in_progress(cls):
        return cls(Status.IN_PROGRESS)

    @classmethod
    def won(cls, mark):
        return cls(Status.ENDED, mark)

    @classmethod
    def draw(cls):
        return cls(Status.ENDED)

    @classmethod
    def aborted(cls):
        return cls(Status.ABORTED)

    @property
    def is_over(self):
        return self.status is not Status.IN_PROGRESS

    @property
    def is_draw(self):
        return self.status is Status.ENDED and self.winner is None

    def __str__(self):
        if self.status is Status.IN_PROGRESS:
            return "In progress game state"
        if self.status is Status.ABORTED:
            return "The game was aborted"
        if self.winner is None:
            return "The game was a draw"
        return f"{self.winner.label} wins!"


class BoardError(ValueError):
    """Base class for rejected moves. The board is left unchanged."""


class OutOfBoundsError(BoardError):
    def __init__(self, column, row):
        super().__init__(OUT_OF_BOUNDS_MESSAGE)
        self.column = column
        self.row = row


class AlreadyOccupiedError(BoardError):
    def __init__(self, column, row, cell):
        super().__init__(ALREADY_OCCUPIED_MESSAGE)
        self.column = column
        self.row = row
        self.cell = cell


class GameOverError(BoardError):
    def __init__(self, outcome):
        super().__init__(GAME_OVER_MESSAGE)
        self.outcome = outcome


def create_initial_state():
    """Creates an empty Tic Tac Toe grid, indexed [row, column]."""
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)

def get_valid_actions(grid):
    """Returns a list of (column, row) tuples for empty cells."""
    actions = []
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if grid[r, c] == EMPTY:
                actions.append((c, r))
    return actions

def check_win_condition(grid, player, column=None, row=None):
    """
    Checks if the given player has a completed line.
    When the last move's column and row are given, only the lines through
    that column and row are scanned, followed by both diagonals, in that
    order: vertical, horizontal, main diagonal, anti-diagonal.
    """
    columns = range(BOARD_SIZE) if column is None else (column,)
    rows = range(BOARD_SIZE) if row is None else (row,)
    for c in columns:
        if np.all(grid[:, c] == player):
            return True
    for r in rows:
        if np.all(grid[r, :] == player):
            return True
    if np.all(np.diag(grid) == player):
        return True
    if np.all(np.diag(np.fliplr(grid)) == player): # (2,0)-(1,1)-(0,2)
        return True
    return False

def check_draw_condition(grid):
    """Checks if the board is full. Win condition must be checked first."""
    return bool(np.all(grid != EMPTY))

def get_next_player(current_player):
    """Switches the player."""
    return current_player.other()

def board_to_string(grid):
    """Renders the grid as c|c|c rows separated by -+-+- lines."""
    rows = ["|".join(str(Cell(int(cell))) for cell in grid[r]) for r in range(BOARD_SIZE)]
    return "\n-+-+-\n".join(rows) + "\n"


class Board:
    """
    The 3x3 board state machine.

    Cells only ever go from EMPTY to a mark. Each accepted move is checked
    for a finished line through the placed cell, then for a full board.
    Once a move ends the game the board refuses further moves.
    """

    def __init__(self):
        self._grid = create_initial_state()
        self._outcome = Outcome.in_progress()

    @property
    def outcome(self):
        return self._outcome

    @property
    def is_ended(self):
        return self._outcome.is_over

    @property
    def cells(self):
        """All nine cells in linear order (column + 3 * row)."""
        return tuple(Cell(int(v)) for v in self._grid.flatten())

    def cell(self, column, row):
        self._check_bounds(column, row)
        return Cell(int(self._grid[row, column]))

    def count(self, mark):
        """Number of cells holding mark."""
        return int(np.count_nonzero(self._grid == mark.value))

    def is_full(self):
        return check_draw_condition(self._grid)

    def valid_moves(self):
        if self.is_ended:
            return []
        return get_valid_actions(self._grid)

    def apply(self, mark, column, row):
        """
        Places mark at (column, row) and returns the resulting Outcome.
        Raises OutOfBoundsError, AlreadyOccupiedError or GameOverError
        without touching the board.
        """
        if self.is_ended:
            raise GameOverError(self._outcome)
        self._check_bounds(column, row)
        current = Cell(int(self._grid[row, column]))
        if current is not Cell.EMPTY:
            raise AlreadyOccupiedError(column, row, current)

        self._grid[row, column] = mark.value
        logger.debug(f"{mark.label} placed {mark.name} at ({column}, {row})")

        if check_win_condition(self._grid, mark.value, column=column, row=row):
            self._outcome = Outcome.won(mark)
        elif self.is_full():
            self._outcome = Outcome.draw()
        return self._outcome

    def render(self):
        return board_to_string(self._grid)

    def __str__(self):
        return self.render()

    def _check_bounds(self, column, row):
        if not (0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            raise OutOfBoundsError(column, row)
