from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict


@dataclass
class Score:
    """A player's running tally: games started and games won."""
    games: int = 0
    wins: int = 0

    def __str__(self) -> str:
        pct = 100.0 * self.wins / self.games if self.games else 0.0
        return f"{pct:.0f}% ({self.wins}/{self.games})"

    def to_record(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_record(cls, record: Dict | None) -> "Score":
        record = record or {}
        return cls(games=int(record.get("games", 0)), wins=int(record.get("wins", 0)))
