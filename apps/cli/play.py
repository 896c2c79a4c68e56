# apps/cli/play.py
"""
Interactive Mastermind in the terminal.

Creates a secret code of colors (letters) that you should guess. You can pick
the length of the code, the number of available colors and the max number of
guesses. For each guess the program prints the result:

  - `X`: correct color and position
  - `O`: correct color, wrong position
  - `-`: color not in the code

Exit status: 0 on a win, 2 on a loss, an abandoned game or invalid options.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterator, List, Optional

from mastermind.engine import InvalidParameter, alphabet
from mastermind.engine.validation import MAX_ATTEMPTS, MAX_LENGTH, MAX_SYMBOLS, MIN_LENGTH, \
    MIN_SYMBOLS
from mastermind.harness import GameConfig, Session, run_game, format_outcome
from mastermind.harness.config import DEFAULT_ATTEMPTS, DEFAULT_LENGTH, DEFAULT_SYMBOLS
from mastermind.harness.io import QUIT_WORDS, format_board

EXIT_WIN = 0
EXIT_FAIL = 2

LOG_ENV = "MASTERMIND_LOG"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser(description: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=description)
    ap.add_argument("-n", "--ncolors", type=int, default=DEFAULT_SYMBOLS,
                    help=f"number of different colors to use ({MIN_SYMBOLS}-{MAX_SYMBOLS})")
    ap.add_argument("-l", "--length", type=int, default=DEFAULT_LENGTH,
                    help=f"length of the code to break ({MIN_LENGTH}-{MAX_LENGTH})")
    ap.add_argument("-g", "--guesses", type=int, default=DEFAULT_ATTEMPTS,
                    help=f"max number of guesses (1-{MAX_ATTEMPTS})")
    ap.add_argument("-u", "--unique", action="store_true",
                    help="do not allow repeated colors in the code")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducible secrets)")
    ap.add_argument("--no-reveal", action="store_true",
                    help="do not print the secret code after a loss")
    ap.add_argument("--log-level", default=os.environ.get(LOG_ENV, "WARNING"),
                    choices=LOG_LEVELS,
                    type=str.upper,
                    help=f"logging verbosity (default: ${LOG_ENV} or WARNING)")
    return ap


def parse_args(ap: argparse.ArgumentParser, argv: Optional[List[str]] = None):
    """parse_args plus the checks argparse skips for env-provided defaults."""
    args = ap.parse_args(argv)
    # choices are not applied to a default taken from the environment
    if args.log_level not in LOG_LEVELS:
        ap.error(f"invalid ${LOG_ENV} value {args.log_level!r} "
                 f"(choose from {', '.join(LOG_LEVELS)})")
    return args


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def start_session(args) -> Session:
    """Validate options and open a session; InvalidParameter propagates."""
    config = GameConfig.from_args(args)
    return Session.new(config)


def _prompt_guesses(session: Session) -> Iterator[str]:
    """Read guesses from the terminal until EOF or a quit word."""
    while not session.is_over:
        try:
            line = input(f"Guess ({session.remaining_attempts()} left): ")
        except EOFError:
            print()
            return
        if line.strip().lower() in QUIT_WORDS:
            return
        yield line


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser("Mastermind: break the secret color code")
    args = parse_args(ap, argv)
    setup_logging(args.log_level)
    logger = logging.getLogger("mastermind.cli")

    try:
        session = start_session(args)
    except InvalidParameter as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return EXIT_FAIL

    logger.info("Starting the game!")
    print(f"Code length: {session.length} | colors: {alphabet(args.ncolors)} "
          f"| guesses: {session.max_attempts}" + (" | unique" if args.unique else ""))
    print("Type 'exit' to quit.\n")

    def show(s: Session, guess: str, fb) -> None:
        print(format_board(s.history))

    def rejected(raw: str, err: Exception) -> None:
        print(f"Invalid input: {err}")

    result = run_game(session, _prompt_guesses(session), on_feedback=show, on_rejected=rejected)

    out = format_outcome(result, reveal=not args.no_reveal)
    if result["success"]:
        print(out)
        return EXIT_WIN
    print(out, file=sys.stderr)
    return EXIT_FAIL


if __name__ == "__main__":
    sys.exit(main())
