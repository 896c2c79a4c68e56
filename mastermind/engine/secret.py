"""
Secret code generation.

Symbols come from a fixed ordering (ALPHABET); a game with n_symbols colors
uses the first n_symbols of it. Randomness is always injected as a
numpy Generator so tests can pin the draw with a seed.
"""

from __future__ import annotations

import logging

import numpy as np

from .validation import validate_unique

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRST"


def alphabet(n_symbols: int) -> str:
    """First `n_symbols` symbols of the fixed ordering, e.g. alphabet(3) -> 'ABC'."""
    return ALPHABET[:n_symbols]


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def generate_secret(length: int, n_symbols: int, rng: np.random.Generator,
                    *, unique: bool = False) -> str:
    """
    Draw a secret code of exactly `length` symbols from alphabet(n_symbols).

    With unique=False every position is an independent uniform draw, so
    repeated and even constant codes are legal. With unique=True symbols are
    drawn without replacement, which requires n_symbols >= length.

    Raises:
      InvalidParameter(rule="unique_infeasible") in unique mode when there
      are fewer symbols than positions.
    """
    if unique:
        validate_unique(length, n_symbols)

    logger.info("Creating secret code (length=%d, symbols=%d, unique=%s)",
                length, n_symbols, unique)
    if unique:
        idx = rng.choice(n_symbols, size=length, replace=False)
    else:
        idx = rng.integers(0, n_symbols, size=length)

    symbols = alphabet(n_symbols)
    secret = "".join(symbols[int(i)] for i in idx)
    logger.debug("Secret code chosen: '%s'", secret)
    return secret
