"""
Per-player session layer around the engine.

The App holds what is shared by every player (game name, target pool,
dictionary) and one PlayerSession per player id. A PlayerSession owns that
player's current Wordle, the words they have played and won, and their score.

Concurrency:
  - the session registry is guarded by one lock (get-or-create is atomic)
  - each PlayerSession carries its own lock; start_game / play_turn / save
    for a player run under it, so one player's turns are serialized
    while different players proceed independently

Persistence is left to the caller: `save` returns a plain record and `load`
accepts one; nothing here touches the filesystem.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set

from packages.engine import Board, GameOver, Status, Wordle, is_valid_word
from packages.engine.scoring import normalize
from .score import Score

log = logging.getLogger(__name__)


class Move(Enum):
    VALID = "valid"
    INVALID_WORD = "invalid_word"
    INVALID_LENGTH = "invalid_length"
    WON = "won"
    LOST = "lost"


@dataclass
class PlayerSession:
    player_id: str
    wordle: Optional[Wordle] = None
    played_words: Set[str] = field(default_factory=set)
    won_words: Set[str] = field(default_factory=set)
    score: Score = field(default_factory=Score)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def is_playing(self) -> bool:
        return self.wordle is not None and not self.wordle.status().is_over

    def to_record(self) -> Dict:
        return {
            "player_id": self.player_id,
            "played_words": sorted(self.played_words),
            "won_words": sorted(self.won_words),
            "score": self.score.to_record(),
            "last_wordle": self.wordle.to_record() if self.wordle else None,
        }

    @classmethod
    def from_record(cls, record: Dict) -> "PlayerSession":
        try:
            player_id = str(record["player_id"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"invalid session record: {record!r}") from e
        won = {normalize(w) for w in record.get("won_words") or []}
        played = {normalize(w) for w in record.get("played_words") or []}
        # Older records only tracked won words.
        if len(played) < len(won):
            played = set(won)
        last = record.get("last_wordle")
        return cls(
            player_id=player_id,
            wordle=Wordle.from_record(last) if last else None,
            played_words=played,
            won_words=won,
            score=Score.from_record(record.get("score")),
        )


class App:
    """
    Shared game configuration plus the registry of player sessions.

    Args:
      game_name:    how the game presents itself
      target_words: pool of hidden words, in the order they are offered
      valid_words:  guess dictionary; empty disables the dictionary check
      seed:         RNG seed for the random fallback pick
    """

    def __init__(self, game_name: str, target_words: Iterable[str],
                 valid_words: Iterable[str] = (), seed: int | None = None):
        self.game_name = game_name
        self.target_words: List[str] = [normalize(w) for w in target_words]
        self.valid_words = frozenset(w.strip().lower() for w in valid_words)
        self.rng = random.Random(seed)
        self._sessions: Dict[str, PlayerSession] = {}
        self._lock = threading.Lock()

    # ---- registry ----

    def session(self, player_id: str) -> PlayerSession:
        with self._lock:
            s = self._sessions.get(player_id)
            if s is None:
                s = PlayerSession(player_id)
                self._sessions[player_id] = s
            return s

    # ---- queries ----

    def is_valid_word(self, word: str) -> bool:
        return is_valid_word(word, self.valid_words)

    def is_playing(self, player_id: str) -> bool:
        return self.session(player_id).is_playing()

    def score(self, player_id: str) -> Score:
        return self.session(player_id).score

    def board(self, player_id: str) -> Optional[Board]:
        wordle = self.session(player_id).wordle
        return wordle.board() if wordle else None

    # ---- transitions ----

    def _pick_target(self, played: Set[str]) -> str:
        for w in self.target_words:
            if w not in played:
                return w
        if not self.target_words:
            raise ValueError("no target words found")
        return self.rng.choice(self.target_words)

    def start_game(self, player_id: str) -> str:
        """
        Start a fresh game for `player_id` and return its target word.

        The first target the player has not played yet is chosen; once the
        pool is exhausted a random target is reused. Counts as a game played.
        """
        s = self.session(player_id)
        with s.lock:
            target = self._pick_target(s.played_words)
            s.wordle = Wordle(target)
            s.played_words.add(target)
            s.score.games += 1
        log.info("Starting new game with %s, target word: %s", player_id, target)
        return target

    def play_turn(self, player_id: str, word: str) -> Move:
        """
        Play one guess for `player_id`.

        Unknown words and wrong-length words are reported as moves and do not
        consume a turn. Raises GameOver if the player has no game, or if the
        current game is already finished.
        """
        s = self.session(player_id)
        with s.lock:
            if s.wordle is None:
                raise GameOver(None)
            current = s.wordle.status()
            if current.is_over:
                raise GameOver(current)

            if not self.is_valid_word(word):
                log.warning("%s guessed unknown word %r", player_id, word)
                return Move.INVALID_WORD

            if len(normalize(word)) != len(s.wordle.target_word):
                log.warning("%s guessed %r with the wrong length", player_id, word)
                return Move.INVALID_LENGTH

            board = s.wordle.play_turn(word)
            log.info("%s guessed %s", player_id, normalize(word))

            if board.status is Status.WON:
                s.score.wins += 1
                s.won_words.add(s.wordle.target_word)
                log.info("%s won with %s", player_id, normalize(word))
                return Move.WON
            if board.status is Status.LOST:
                log.info("%s lost with %s (target: %s)", player_id,
                         normalize(word), s.wordle.target_word)
                return Move.LOST
            return Move.VALID

    # ---- records ----

    def save(self, player_id: str) -> Dict:
        s = self.session(player_id)
        with s.lock:
            return s.to_record()

    def load(self, record: Dict) -> PlayerSession:
        """
        Replace (or create) a player's session from a saved record.

        Meant to run between turns, the way a caller restores state before
        handling the next message from that player.
        """
        restored = PlayerSession.from_record(record)
        with self._lock:
            self._sessions[restored.player_id] = restored
        return restored
