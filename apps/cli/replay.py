# apps/cli/replay.py
"""
Play one game from a scripted list of guesses (non-interactive).

Guesses are read from a text file, one per line ('-' reads stdin). Combined
with --seed this replays a game deterministically, e.g.:

    python -m apps.cli.replay --seed 7 -l 4 -n 6 -f moves.txt

Prints one board line per accepted guess and the final outcome.
Exit status follows play.py: 0 on a win, 2 otherwise.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from mastermind.engine import InvalidParameter
from mastermind.harness import run_game, format_outcome
from mastermind.harness.io import format_round, iter_guesses

from apps.cli.play import EXIT_FAIL, EXIT_WIN, build_parser, parse_args, setup_logging, \
    start_session


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser("Mastermind: replay a game from a file of guesses")
    ap.add_argument("--guesses-file", "-f", dest="guesses_file", required=True,
                    help="text file with one guess per line ('-' for stdin)")
    args = parse_args(ap, argv)
    setup_logging(args.log_level)

    try:
        session = start_session(args)
    except InvalidParameter as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return EXIT_FAIL

    def show(s, guess, fb) -> None:
        print(format_round(s.attempts_used, guess, fb))

    def rejected(raw: str, err: Exception) -> None:
        print(f"skipped {raw!r}: {err}", file=sys.stderr)

    if args.guesses_file == "-":
        result = run_game(session, iter_guesses(sys.stdin), on_feedback=show,
                          on_rejected=rejected)
    else:
        p = Path(args.guesses_file)
        if not p.exists():
            print(f"Guesses file not found: {p}", file=sys.stderr)
            return EXIT_FAIL
        with p.open("r", encoding="utf-8") as f:
            result = run_game(session, iter_guesses(f), on_feedback=show, on_rejected=rejected)

    print(format_outcome(result, reveal=not args.no_reveal))
    return EXIT_WIN if result["success"] else EXIT_FAIL


if __name__ == "__main__":
    sys.exit(main())
