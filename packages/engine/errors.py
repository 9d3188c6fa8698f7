"""
Engine error kinds.

All of these are local validation failures raised BEFORE any state changes,
so a caller can catch them and carry on with the same game:

  - TooShort       : target word under MIN_WORD_LENGTH letters (construction)
  - LengthMismatch : guess length differs from the target length (user-correctable)
  - GameOver       : a turn submitted after the game was won or lost (start a new game)
"""

from __future__ import annotations


class WordleError(ValueError):
    """Base class for every engine validation failure."""


class TooShort(WordleError):
    def __init__(self, word: str, min_length: int):
        self.word = word
        self.min_length = min_length
        super().__init__(f"target word must be at least {min_length} letters long")


class LengthMismatch(WordleError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"word must be {expected} characters long (got {actual})")


class GameOver(WordleError):
    def __init__(self, status):
        self.status = status
        super().__init__("game is over")
