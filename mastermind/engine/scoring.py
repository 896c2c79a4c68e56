"""
Mastermind-style scoring (feedback) for a single (secret, guess) pair.

Conventions for the rendered feedback:
  - 'X' : exact     = correct symbol in the correct position
  - 'O' : displaced = symbol present in the secret at another, unclaimed position
  - '-' : miss      = symbol not present (or present fewer times than guessed)

Unlike Wordle the feedback is NOT positional: it is reported as counts and
rendered in the fixed order exact, displaced, miss, so it never reveals which
positions matched.

Algorithm (two-pass, duplicate-safe):
  1) First pass counts exact matches and collects the remaining (unmatched)
     symbols of the secret.
  2) Second pass walks the unmatched guess symbols in order and counts a
     displaced match only if the symbol still has remaining count, consuming
     one instance each time.

A secret symbol therefore backs at most one feedback unit. Checking whether a
guess symbol appears "anywhere" in the secret overcounts: secret "ABCD"
against guess "BAAA" is 2 displaced + 2 misses, not 4 displaced.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Literal, Tuple

from .errors import LengthMismatch

Marker = Literal["X", "O", "-"]

EXACT: Marker = "X"
DISPLACED: Marker = "O"
MISS: Marker = "-"


@dataclass(frozen=True)
class Feedback:
    """Counts of exact / displaced / missed symbols for one guess."""
    exact: int
    displaced: int
    miss: int

    @property
    def length(self) -> int:
        return self.exact + self.displaced + self.miss

    @property
    def is_win(self) -> bool:
        return self.exact == self.length

    @property
    def markers(self) -> Tuple[Marker, ...]:
        """Ordered markers: all exact, then all displaced, then all misses."""
        return (EXACT,) * self.exact + (DISPLACED,) * self.displaced + (MISS,) * self.miss

    def render(self) -> str:
        return "".join(self.markers)


def evaluate(secret: str, guess: str) -> Feedback:
    """
    Compute feedback for `guess` against `secret`.

    Preconditions:
      - len(secret) == len(guess), else LengthMismatch

    Examples:
      evaluate("ABBA", "ACCA") -> Feedback(exact=2, displaced=0, miss=2)
      evaluate("AABB", "BBAA") -> Feedback(exact=0, displaced=4, miss=0)
    """
    if len(secret) != len(guess):
        raise LengthMismatch(len(secret), len(guess))

    # Pass 1: exact matches; everything else stays available for pass 2.
    exact = 0
    remaining = Counter()
    unmatched = []
    for s, g in zip(secret, guess):
        if s == g:
            exact += 1
        else:
            remaining[s] += 1
            unmatched.append(g)

    # Pass 2: displaced matches consume one remaining secret instance each.
    displaced = 0
    for g in unmatched:
        if remaining[g] > 0:
            displaced += 1
            remaining[g] -= 1

    return Feedback(exact=exact, displaced=displaced, miss=len(unmatched) - displaced)
