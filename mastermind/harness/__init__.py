from .core import Session, run_game
from .config import GameConfig
from .io import iter_guesses, render_feedback, format_outcome

__all__ = ["Session", "run_game", "GameConfig", "iter_guesses", "render_feedback",
           "format_outcome"]
