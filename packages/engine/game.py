"""
Game state machine for a single Wordle board.

A `Wordle` owns the target word and the ordered list of attempts; everything
else (status, evaluated history, attempted letters) is derived on demand by
re-scanning the attempts. That keeps the stored state minimal, so that a game
rebuilt from its plain record (`to_record` / `from_record`) always reports
exactly what the original reported.

States:
  PLAYING -> WON   (some attempt equals the target)
  PLAYING -> LOST  (MAX_TURNS attempts, none equal to the target)
WON and LOST are terminal; `play_turn` raises GameOver once either holds.

A Wordle instance is not safe for concurrent turns: callers holding several
players keep one Wordle per player and serialize turns per player.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from .errors import GameOver, LengthMismatch, TooShort
from .scoring import Letter, assess, normalize, to_pattern

log = logging.getLogger(__name__)

# Single source of truth for the rules.
MAX_TURNS = 6
MIN_WORD_LENGTH = 3


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_over(self) -> bool:
        return self is not Status.PLAYING


@dataclass(frozen=True)
class Board:
    """Evaluated view of a game: current status plus every assessed attempt."""
    status: Status
    attempts: Tuple[Tuple[Letter, ...], ...]

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    def attempted_letters(self) -> List[str]:
        """Sorted, deduplicated letters tried so far, whatever their mark."""
        return sorted({l.char for attempt in self.attempts for l in attempt})


class Wordle:
    """
    One game: a fixed target word and the attempts made against it.

    Args:
      target_word: the hidden word; stripped and uppercased.
      attempts:    prior attempts (used when restoring a saved game); each must
                   match the target length.

    Raises:
      TooShort        if the target has fewer than MIN_WORD_LENGTH letters
      LengthMismatch  if a prior attempt has the wrong length
    """

    def __init__(self, target_word: str, attempts: Sequence[str] = ()):
        target = normalize(target_word)
        if len(target) < MIN_WORD_LENGTH:
            raise TooShort(target, MIN_WORD_LENGTH)
        self._target_word = target
        self._attempts: List[str] = []
        for word in attempts:
            word = normalize(word)
            self._check_length(word)
            self._attempts.append(word)

    def __repr__(self) -> str:
        return f"Wordle(attempts={len(self._attempts)}, status={self.status().value})"

    @property
    def target_word(self) -> str:
        return self._target_word

    @property
    def attempts(self) -> Tuple[str, ...]:
        return tuple(self._attempts)

    def _check_length(self, word: str) -> None:
        if len(word) != len(self._target_word):
            raise LengthMismatch(len(self._target_word), len(word))

    def status(self) -> Status:
        if self._target_word in self._attempts:
            return Status.WON
        if len(self._attempts) >= MAX_TURNS:
            return Status.LOST
        return Status.PLAYING

    def turns_left(self) -> int:
        if self.status().is_over:
            return 0
        return MAX_TURNS - len(self._attempts)

    def assess(self, word: str) -> List[Letter]:
        return assess(self._target_word, word)

    def board(self) -> Board:
        return Board(
            status=self.status(),
            attempts=tuple(tuple(self.assess(a)) for a in self._attempts),
        )

    def attempted_letters(self) -> List[str]:
        return self.board().attempted_letters()

    def play_turn(self, word: str) -> Board:
        """
        Record one attempt and return the updated board.

        Validation happens before anything is stored, so on LengthMismatch or
        GameOver the attempt history is unchanged.
        """
        word = normalize(word)
        self._check_length(word)

        current = self.status()
        if current.is_over:
            raise GameOver(current)

        self._attempts.append(word)
        board = self.board()
        log.debug("turn %d: %s -> %s (%s)", len(self._attempts), word,
                  to_pattern(board.attempts[-1]), board.status.value)
        return board

    # ---- plain-record round trip (for an external persistence layer) ----

    def to_record(self) -> Dict:
        return {"target_word": self._target_word, "attempts": list(self._attempts)}

    @classmethod
    def from_record(cls, record: Dict) -> "Wordle":
        try:
            target_word = record["target_word"]
            attempts = record.get("attempts") or []
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"invalid game record: {record!r}") from e
        return cls(target_word, attempts)


# ---- functional facade ----

def new_game(target_word: str) -> Wordle:
    return Wordle(target_word)


def play_turn(game: Wordle, candidate: str) -> Board:
    return game.play_turn(candidate)


def status(game: Wordle) -> Status:
    return game.status()


def attempted_letters(game: Wordle) -> List[str]:
    return game.attempted_letters()
