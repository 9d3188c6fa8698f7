"""
Lightweight guess validation.

Before a guess counts as a turn a front-end asks: is this a dictionary word?
An empty dictionary accepts anything, so a deployment without a word list
still plays.

Length against the target is NOT checked here; Wordle.play_turn owns that
rule and raises LengthMismatch.
"""

from typing import AbstractSet


def is_valid_word(word: str, valid_words: AbstractSet[str]) -> bool:
    """
    Return True if `word` is in `valid_words` (held lowercase).

    An empty `valid_words` disables the check.
    """
    if not valid_words:
        return True
    return word.strip().lower() in valid_words
