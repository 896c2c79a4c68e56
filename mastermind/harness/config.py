"""
Game configuration.

A GameConfig is the validated bundle of parameters a session is created from.
Defaults mirror the classic command line: 4 colors, code length 4, 20 guesses.
"""

from __future__ import annotations

from dataclasses import dataclass

from mastermind.engine.validation import (
    MAX_ATTEMPTS,
    validate_attempts,
    validate_length,
    validate_symbol_count,
    validate_unique,
)

DEFAULT_SYMBOLS = 4
DEFAULT_LENGTH = 4
DEFAULT_ATTEMPTS = MAX_ATTEMPTS


@dataclass(frozen=True)
class GameConfig:
    max_attempts: int = DEFAULT_ATTEMPTS
    length: int = DEFAULT_LENGTH
    n_symbols: int = DEFAULT_SYMBOLS
    unique: bool = False
    seed: int | None = None

    def validate(self) -> "GameConfig":
        """Run every parameter check; raises InvalidParameter on the first failure."""
        validate_attempts(self.max_attempts)
        validate_length(self.length)
        validate_symbol_count(self.n_symbols)
        if self.unique:
            validate_unique(self.length, self.n_symbols)
        return self

    @classmethod
    def from_args(cls, args) -> "GameConfig":
        """Build from an argparse namespace (see apps/cli/play.py for the flags)."""
        return cls(
            max_attempts=args.guesses,
            length=args.length,
            n_symbols=args.ncolors,
            unique=bool(args.unique),
            seed=args.seed,
        )
