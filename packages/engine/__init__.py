from .errors import WordleError, TooShort, LengthMismatch, GameOver
from .scoring import Mark, Letter, assess, score, to_pattern
from .game import (
    MAX_TURNS, MIN_WORD_LENGTH, Status, Board, Wordle,
    new_game, play_turn, status, attempted_letters,
)
from .validation import is_valid_word

__all__ = [
    "WordleError", "TooShort", "LengthMismatch", "GameOver",
    "Mark", "Letter", "assess", "score", "to_pattern",
    "MAX_TURNS", "MIN_WORD_LENGTH", "Status", "Board", "Wordle",
    "new_game", "play_turn", "status", "attempted_letters",
    "is_valid_word",
]
