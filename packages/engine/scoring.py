"""
Wordle-style assessment of a single guess against the target word.

Conventions:
  - Mark.CORRECT : letter matches the target letter at the same position
  - Mark.PRESENT : letter exists in the target, but somewhere else
  - Mark.ABSENT  : letter is not in the target (or is guessed more times
                   than the target contains it)

Pattern strings (see `to_pattern`) keep the compact one-char-per-letter view:
  'G' = correct, 'Y' = present, '-' = absent

Algorithm (two-pass, duplicate-safe):
  1) First pass classifies each position: exact matches are CORRECT and claim
     one unit of their letter; any other letter found in the target is
     tentatively PRESENT.
  2) Second pass walks the tentative PRESENT entries left to right. Each one
     claims a unit of its letter while the target still has unclaimed
     occurrences; once the claims reach the letter's count in the target the
     rest are demoted to ABSENT. CORRECT entries are never demoted.

So a letter occurring k times in the target is marked CORRECT/PRESENT at most
k times in total, exact matches first, then leftmost misplaced ones.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from .errors import LengthMismatch


class Mark(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"


@dataclass(frozen=True)
class Letter:
    """One assessed position: the guessed character and how it scored."""
    mark: Mark
    char: str


def normalize(word: str) -> str:
    """Words are compared case-insensitively; canonical form is uppercase."""
    return word.strip().upper()


def assess(target_word: str, candidate: str) -> List[Letter]:
    """
    Compare `candidate` against `target_word`, one Letter per position.

    Raises:
      LengthMismatch if the two words differ in length.

    Examples:
      to_pattern(assess("hello", "bolle")) -> "-YGGY"
      to_pattern(assess("erase", "eerie")) -> "G-Y-G"
    """
    target = normalize(target_word)
    word = normalize(candidate)
    if len(word) != len(target):
        raise LengthMismatch(len(target), len(word))

    available = Counter(target)
    claimed: Counter = Counter()
    marks: List[Mark] = []

    # Pass 1: exact positions claim first; everything else in the target is tentative.
    for t, c in zip(target, word):
        if t == c:
            marks.append(Mark.CORRECT)
            claimed[c] += 1
        elif c in available:
            marks.append(Mark.PRESENT)
        else:
            marks.append(Mark.ABSENT)

    # Pass 2: tentative claims are honoured left to right until the budget runs out.
    for i, c in enumerate(word):
        if marks[i] is not Mark.PRESENT:
            continue
        if claimed[c] < available[c]:
            claimed[c] += 1
        else:
            marks[i] = Mark.ABSENT

    return [Letter(m, c) for m, c in zip(marks, word)]


def to_pattern(letters: Iterable[Letter]) -> str:
    """Collapse assessed letters into a 'G'/'Y'/'-' string."""
    return "".join(l.mark.value for l in letters)


def score(guess: str, answer: str) -> str:
    """
    Pattern string for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return to_pattern(assess(answer, guess))
