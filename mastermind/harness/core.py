"""
Game loop primitives.

- Session:  one game, from secret generation to a terminal outcome. Owns the
            secret and the attempt counter, and is the only place state changes.
- run_game: drive a Session from any iterable of guesses, one per round.

Both are UI-agnostic: they never read from a terminal or print, so they can be
reused by the interactive CLI, the scripted replay CLI or the tests.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Literal, Optional, Tuple

import numpy as np

from mastermind.engine import evaluate, Feedback, generate_secret, alphabet, make_rng
from mastermind.engine.errors import GameOverError, InvalidParameter, InvalidSymbol, LengthMismatch
from mastermind.engine.validation import validate_attempts, validate_guess
from .config import GameConfig

logger = logging.getLogger(__name__)

Outcome = Literal["in_progress", "won", "lost"]

IN_PROGRESS: Outcome = "in_progress"
WON: Outcome = "won"
LOST: Outcome = "lost"


class Session:
    """
    State machine for a single game.

    outcome is "in_progress" while awaiting a guess; "won" and "lost" are
    terminal. attempts_used counts evaluated guesses, the winning one included;
    rejected guesses (wrong length / unknown symbol) do not count.
    """

    def __init__(self, secret: str, max_attempts: int, *, symbols: Optional[str] = None):
        validate_attempts(max_attempts)
        # same normalization as guesses, so submitting the secret always wins
        secret = "".join(secret.split()).upper()
        if symbols is not None:
            bad = [ch for ch in secret if ch not in symbols]
            if bad:
                raise InvalidParameter(
                    "secret_symbols", f"secret uses symbols outside {symbols}: {''.join(bad)}")
        self._secret = secret
        self.max_attempts = max_attempts
        self.symbols = symbols
        self.attempts_used = 0
        self.outcome: Outcome = IN_PROGRESS
        self.history: List[Tuple[str, Feedback]] = []

    @classmethod
    def new(cls, config: GameConfig, rng: Optional[np.random.Generator] = None) -> "Session":
        """Validate `config`, generate a secret and open a session on it."""
        config.validate()
        if rng is None:
            rng = make_rng(config.seed)
        secret = generate_secret(config.length, config.n_symbols, rng, unique=config.unique)
        return cls(secret, config.max_attempts, symbols=alphabet(config.n_symbols))

    @property
    def length(self) -> int:
        return len(self._secret)

    @property
    def is_over(self) -> bool:
        return self.outcome != IN_PROGRESS

    def remaining_attempts(self) -> int:
        return self.max_attempts - self.attempts_used

    def reveal(self) -> str:
        """Return the secret (for the end-of-game reveal)."""
        return self._secret

    def submit(self, guess: str) -> Feedback:
        """
        Evaluate one guess and advance the state machine.

        Raises:
          GameOverError  if the session is already won or lost.
          LengthMismatch / InvalidSymbol if the guess does not fit the game;
          the round is rejected and no attempt is consumed.
        """
        if self.is_over:
            raise GameOverError(self.outcome)

        g = validate_guess(guess, self.length, self.symbols)
        fb = evaluate(self._secret, g)
        self.history.append((g, fb))
        self.attempts_used += 1
        logger.debug("Round %d: %s -> %s", self.attempts_used, g, fb.render())

        if fb.is_win:
            self.outcome = WON
            logger.info("Code broken in %d attempt(s)", self.attempts_used)
        elif self.attempts_used >= self.max_attempts:
            self.outcome = LOST
            logger.info("Out of attempts (%d)", self.max_attempts)
        return fb


def run_game(
        session: Session,
        guesses: Iterable[str],
        *,
        on_feedback: Optional[Callable[[Session, str, Feedback], None]] = None,
        on_rejected: Optional[Callable[[str, Exception], None]] = None,
) -> Dict:
    """
    Pull guesses from `guesses` until the session reaches a terminal state.

    Args:
        session:     a fresh (or in-progress) Session
        guesses:     any iterable of raw guess strings; consumed lazily, one
                     item per round, so a generator reading stdin works too
        on_feedback: called after every accepted guess
        on_rejected: called for guesses rejected as LengthMismatch/InvalidSymbol

    Returns:
        dict with keys:
            outcome, success (bool), attempts_used, max_attempts,
            history (list[(guess, rendered feedback)]), rejected (int), secret

    If the source runs dry before the game ends the outcome stays
    "in_progress" (the session was abandoned).
    """
    rejected = 0
    for raw in guesses:
        try:
            fb = session.submit(raw)
        except (LengthMismatch, InvalidSymbol) as e:
            rejected += 1
            logger.info("Rejected guess %r: %s", raw, e)
            if on_rejected is not None:
                on_rejected(raw, e)
            continue

        if on_feedback is not None:
            on_feedback(session, session.history[-1][0], fb)
        if session.is_over:
            break

    if not session.is_over:
        logger.info("Guess source exhausted; session abandoned after %d attempt(s)",
                    session.attempts_used)

    return {
        "outcome": session.outcome,
        "success": session.outcome == WON,
        "attempts_used": session.attempts_used,
        "max_attempts": session.max_attempts,
        "history": [(g, fb.render()) for g, fb in session.history],
        "rejected": rejected,
        "secret": session.reveal(),
    }
