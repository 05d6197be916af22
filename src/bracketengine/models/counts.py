"""Aggregate counters over players and matches."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class PlayerCounts:
    """Players bucketed by status; the three buckets sum to ``total``."""

    qualified: int
    eliminated: int
    active: int
    total: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "q": self.qualified,
            "e": self.eliminated,
            "a": self.active,
            "total": self.total,
        }


@dataclass(frozen=True)
class MatchCounts:
    """Matches bucketed by completion; the two buckets sum to ``total``."""

    completed: int
    to_play: int
    total: int

    def to_dict(self) -> Dict[str, int]:
        return {"t": self.completed, "aj": self.to_play, "total": self.total}
