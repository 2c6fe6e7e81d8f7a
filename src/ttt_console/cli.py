import argparse
import io
import logging
import os
import sys

from . import __version__
from .game import play

# --- Configuration ---
LOG_LEVEL_ENV = "TTT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser():
    p = argparse.ArgumentParser(prog="ttt-console", description="Two-player tic-tac-toe on the console")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"Logging level name (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def configure_logging(level_name, verbose=False):
    """Sets up root logging on stderr and returns the numeric level."""
    level = logging.DEBUG if verbose else logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    return level


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        print(__version__)
        return 0
    try:
        configure_logging(args.log_level, args.verbose)
    except ValueError as e:
        parser.error(str(e))

    # undecodable bytes reach the move parser as U+FFFD
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")

    try:
        play()
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
