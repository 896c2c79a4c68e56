"""
Error kinds raised by the engine and the game loop.

  - InvalidParameter : out-of-range game parameter (precondition, never retried)
  - LengthMismatch   : guess length differs from the secret (recoverable)
  - InvalidSymbol    : guess uses a symbol outside the alphabet (recoverable)
  - GameOverError    : guess submitted after the session ended (driver bug)

The value errors also subclass ValueError so callers that only know the
builtin hierarchy still catch them.
"""

from __future__ import annotations


class MastermindError(Exception):
    """Base class for everything the engine raises on purpose."""


class InvalidParameter(MastermindError, ValueError):
    """A game parameter violated one of the rule bounds.

    `rule` names the violated bound so tests and drivers can tell them apart
    without parsing the message.
    """

    def __init__(self, rule: str, message: str):
        super().__init__(message)
        self.rule = rule
        self.message = message

    def __str__(self) -> str:
        return f"Input does not respect the rule `{self.message}`"


class LengthMismatch(MastermindError, ValueError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Guess must have exactly {expected} symbols; got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidSymbol(MastermindError, ValueError):
    def __init__(self, symbol: str, allowed: str):
        super().__init__(f"Invalid symbol '{symbol}'. Allowed: {', '.join(allowed)}")
        self.symbol = symbol
        self.allowed = allowed


class GameOverError(MastermindError, RuntimeError):
    """Raised when a guess is submitted to a session that already ended."""

    def __init__(self, outcome: str):
        super().__init__(f"Game is already over ({outcome}); no more guesses accepted")
        self.outcome = outcome
