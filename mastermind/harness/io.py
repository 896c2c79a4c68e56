"""
I/O helpers at the edge of the game loop.

Responsibilities:
- iter_guesses:    turn a text stream (stdin, a file) into a lazy guess source.
- render_feedback: feedback counts -> 'XXO-' string.
- format_round:    one board line (guess + feedback) for the console.
- format_board:    the whole in-memory history of a session.
- format_outcome:  final win/lose message, optionally revealing the secret.

Nothing here touches game state; the Session is driven only through run_game.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence, TextIO, Tuple

from mastermind.engine import Feedback

# Lines that end the guess stream early (case-insensitive).
QUIT_WORDS = frozenset({"exit", "quit"})


def iter_guesses(stream: TextIO | Iterable[str]) -> Iterator[str]:
    """
    Yield guesses from `stream`, one per non-blank line.

    Line terminators and surrounding whitespace are trimmed. A line reading
    'exit' or 'quit' stops the iteration.
    """
    for raw in stream:
        line = raw.rstrip("\r\n").strip()
        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            return
        yield line


def render_feedback(fb: Feedback) -> str:
    """
    Example: Feedback(exact=1, displaced=2, miss=1) -> "XOO-"
    """
    return fb.render()


def format_round(turn: int, guess: str, fb: Feedback | str) -> str:
    patt = fb if isinstance(fb, str) else render_feedback(fb)
    return f"{turn:>2}: {' '.join(guess)}  |  {' '.join(patt)}"


def format_board(history: Sequence[Tuple[str, Feedback | str]]) -> str:
    lines: List[str] = []
    for i, (g, fb) in enumerate(history, 1):
        lines.append(format_round(i, g, fb))
    return "\n".join(lines)


def format_outcome(result: Dict, reveal: bool = True) -> str:
    """
    Final message for a run_game result dict.
    """
    if result["success"]:
        msg = f"Congratulations, you won! ({result['attempts_used']} attempt(s))"
    elif result["outcome"] == "lost":
        msg = "Sorry, but you lost!"
    else:
        msg = "Game abandoned."
    if reveal and not result["success"]:
        msg += f"\nThe secret code was: {result['secret']}"
    return msg
