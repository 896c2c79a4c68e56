"""
Parameter and guess validation.

This module answers two questions:
  - "Are these game parameters inside the rule bounds?" (attempts, code
    length, number of symbols). Each check is total: it returns None or raises
    InvalidParameter, and never prompts or retries.
  - "Is this guess acceptable for the current game?" (length and, when the
    alphabet is known, the symbols used).
"""

from typing import Optional

from .errors import InvalidParameter, InvalidSymbol, LengthMismatch

# Rule bounds. Single source of truth for the CLI defaults and help text too.
MAX_ATTEMPTS = 20
MIN_LENGTH = 4
MAX_LENGTH = 10
MIN_SYMBOLS = 2
MAX_SYMBOLS = 20


def validate_attempts(n: int) -> None:
    """Max number of guesses must be in 1..MAX_ATTEMPTS."""
    if n > MAX_ATTEMPTS:
        raise InvalidParameter(
            "attempts_max", f"exceeded max attempts allowed ({MAX_ATTEMPTS})")
    if n <= 0:
        raise InvalidParameter("attempts_zero", "0 is not allowed")


def validate_length(n: int) -> None:
    """
    Code length must be in MIN_LENGTH..MAX_LENGTH (inclusive).

      validate_length(4)   -> None
      validate_length(11)  -> InvalidParameter(rule="length_range")
    """
    if n < MIN_LENGTH or n > MAX_LENGTH:
        raise InvalidParameter(
            "length_range", f"length must be between {MIN_LENGTH} and {MAX_LENGTH}")


def validate_symbol_count(n: int) -> None:
    if n < MIN_SYMBOLS or n > MAX_SYMBOLS:
        raise InvalidParameter(
            "symbol_count_range",
            f"symbol count must be between {MIN_SYMBOLS} and {MAX_SYMBOLS}")


def validate_unique(length: int, n_symbols: int) -> None:
    """A code without repeated symbols needs at least `length` symbols to draw from."""
    if n_symbols < length:
        raise InvalidParameter(
            "unique_infeasible",
            f"unique symbols need at least {length} symbols, got {n_symbols}")


def validate_guess(guess: str, length: int, symbols: Optional[str] = None) -> str:
    """
    Normalize a raw guess and check it against the game shape.

    Args:
      guess   : raw player input (may carry whitespace / line terminators)
      length  : required code length (the secret's length)
      symbols : allowed symbols; None skips the symbol check

    Returns:
      The normalized guess (whitespace stripped, upper-cased).

    Raises:
      LengthMismatch if the normalized guess has the wrong length,
      InvalidSymbol for the first symbol outside `symbols`.
    """
    g = "".join(guess.split()).upper()
    if len(g) != length:
        raise LengthMismatch(length, len(g))
    if symbols is not None:
        for ch in g:
            if ch not in symbols:
                raise InvalidSymbol(ch, symbols)
    return g
