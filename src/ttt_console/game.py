import logging
import re
import sys

from .board import Board, BoardError, Mark, Outcome

logger = logging.getLogger(__name__)

# --- Configuration ---
FIRST_PLAYER = Mark.X
ARGUMENT_COUNT_MESSAGE = "Incorrect number of arguments"
INVALID_DIGIT_MESSAGE = "invalid digit found in string"
TOO_LARGE_MESSAGE = "number too large to fit in target type"
INVALID_ENCODING_MESSAGE = "stream did not contain valid UTF-8"
MAX_COORDINATE = 2**64 - 1 # widest unsigned machine word

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


class InputError(ValueError):
    """A move line that could not be turned into a coordinate pair."""


class ArgumentCountError(InputError):
    def __init__(self, count):
        super().__init__(ARGUMENT_COUNT_MESSAGE)
        self.count = count


class MoveParseError(InputError):
    def __init__(self, errors):
        super().__init__(", ".join(errors))
        self.errors = errors


def _token_error(token):
    if not _UNSIGNED_INT.fullmatch(token):
        return INVALID_DIGIT_MESSAGE
    if int(token) > MAX_COORDINATE:
        return TOO_LARGE_MESSAGE
    return None

def parse_move(line):
    """
    Parses "column row" into a pair of non-negative ints.
    Every bad token is reported, not just the first one.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise ArgumentCountError(len(tokens))
    errors = [e for e in map(_token_error, tokens) if e is not None]
    if errors:
        raise MoveParseError(errors)
    column, row = (int(t) for t in tokens)
    return column, row


def next_player(board):
    """Whose turn it is on board, going by how many marks each side has."""
    if board.count(Mark.X) > board.count(Mark.O):
        return FIRST_PLAYER.other()
    return FIRST_PLAYER


class TurnLoop:
    """
    Alternates two players over one Board on a line-oriented console.

    Rejected input (bad line, undecodable bytes, out of bounds, occupied
    cell) is reported and the same player is asked again. End of input
    stops the game with an aborted outcome.
    """

    def __init__(self, board=None, stdin=None, stdout=None, first_player=None):
        self.board = board if board is not None else Board()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.current_player = first_player if first_player is not None else next_player(self.board)

    def _print(self, *args):
        print(*args, file=self.stdout)

    def _prompt(self):
        self._print(self.board)
        self._print(f"{self.current_player.label}: ")
        self.stdout.flush()
        return self.stdin.readline()

    def step(self, line):
        """Handles one input line. Returns the board outcome afterwards."""
        try:
            column, row = parse_move(line)
            outcome = self.board.apply(self.current_player, column, row)
        except (InputError, BoardError) as e:
            logger.debug(f"Rejected input {line.strip()!r} from {self.current_player.label}: {e}")
            self._print(e)
            return self.board.outcome

        if not outcome.is_over:
            self.current_player = self.current_player.other()
        return outcome

    def run(self):
        """Plays until the board ends the game or input runs out."""
        logger.info(f"Starting game, {self.current_player.label} moves first")
        outcome = self.board.outcome
        while not outcome.is_over:
            try:
                line = self._prompt()
            except UnicodeDecodeError as e:
                logger.debug(f"Undecodable input from {self.current_player.label}: {e}")
                self._print(INVALID_ENCODING_MESSAGE)
                continue
            if not line: # EOF
                logger.warning("Input ended before the game was over")
                outcome = Outcome.aborted()
                break
            outcome = self.step(line)

        self._print(outcome)
        logger.info(f"Game finished: {outcome}")
        return outcome


def play(stdin=None, stdout=None):
    """Runs one game on a fresh board."""
    return TurnLoop(stdin=stdin, stdout=stdout).run()
