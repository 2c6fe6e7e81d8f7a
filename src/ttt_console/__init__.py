"""ttt_console package.

Two-player tic-tac-toe on a text console: the board state machine and
the turn loop that drives it.
"""

from .board import (
    AlreadyOccupiedError,
    Board,
    BoardError,
    Cell,
    GameOverError,
    Mark,
    Outcome,
    OutOfBoundsError,
    Status,
)
from .game import ArgumentCountError, InputError, MoveParseError, TurnLoop, next_player, parse_move, play

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Cell",
    "Mark",
    "Outcome",
    "Status",
    "BoardError",
    "OutOfBoundsError",
    "AlreadyOccupiedError",
    "GameOverError",
    "TurnLoop",
    "play",
    "next_player",
    "parse_move",
    "InputError",
    "ArgumentCountError",
    "MoveParseError",
]
