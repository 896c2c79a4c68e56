from .scoring import Feedback, evaluate
from .secret import ALPHABET, alphabet, generate_secret, make_rng
from .validation import validate_attempts, validate_length, validate_symbol_count, validate_guess
from .errors import MastermindError, InvalidParameter, LengthMismatch, InvalidSymbol, GameOverError

__all__ = [
    "Feedback", "evaluate",
    "ALPHABET", "alphabet", "generate_secret", "make_rng",
    "validate_attempts", "validate_length", "validate_symbol_count", "validate_guess",
    "MastermindError", "InvalidParameter", "LengthMismatch", "InvalidSymbol", "GameOverError",
]
