"""Match data class."""

# Bracket Engine
# Copyright (C) 2025  Bracket Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

from dateutil.parser import isoparse

from bracketengine.constants import (
    MATCH_COMPLETED,
    MATCH_ID_MIN_DIGITS,
    MATCH_ID_PREFIX,
    MATCH_TO_PLAY,
)

Score = Union[int, float]

# (attribute, stored key) for every modelled field
_FIELDS = (
    ("id", "id"),
    ("round", "round"),
    ("a_id", "aId"),
    ("b_id", "bId"),
    ("status", "status"),
    ("score_a", "scoreA"),
    ("score_b", "scoreB"),
    ("proof_url", "proofUrl"),
    ("played_at", "playedAt"),
    ("validated_by", "validatedBy"),
    ("winner_id", "winnerId"),
    ("loser_id", "loserId"),
)
_KNOWN_KEYS = {key for _, key in _FIELDS}


def make_match_id(sequence_number: int) -> str:
    """Build an engine match id, e.g. ``make_match_id(7) == "m07"``."""
    return MATCH_ID_PREFIX + str(sequence_number).zfill(MATCH_ID_MIN_DIGITS)


@dataclass
class Match:
    """A single bracket match between two players.

    Attributes
    ----------
    id : str
        Unique match id (``m01``, ``m02``... when engine-generated).
    round : str
        Bracket stage code (``R32``, ``R16``, ``QF``, ``SF``, ``F``).
    a_id, b_id : str
        Ids of the two contestants.
    status : str
        ``A_JOUER`` until validated, then ``TERMINE``.
    score_a, score_b : int or float or None
        Final scores, set on validation.
    proof_url : str or None
        Direct image link proving the result.
    played_at : str or None
        ISO-8601 validation timestamp.
    validated_by : str or None
        Free-text label of whoever validated the result.
    winner_id, loser_id : str or None
        Outcome derived from the scores.
    """

    id: str
    round: str
    a_id: str
    b_id: str
    status: str = MATCH_TO_PLAY
    score_a: Optional[Score] = None
    score_b: Optional[Score] = None
    proof_url: Optional[str] = None
    played_at: Optional[str] = None
    validated_by: Optional[str] = None
    winner_id: Optional[str] = None
    loser_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_completed(self) -> bool:
        return self.status == MATCH_COMPLETED

    @property
    def played_at_datetime(self) -> Optional[datetime]:
        """``played_at`` parsed, or None when unset or unparseable."""
        if not self.played_at:
            return None
        try:
            return isoparse(self.played_at)
        except ValueError:
            return None

    def involves(self, player_id: str) -> bool:
        return player_id in (self.a_id, self.b_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary, omitting unset fields."""
        data = dict(self.extra)
        for attr, key in _FIELDS:
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        values = {attr: data.get(key) for attr, key in _FIELDS}
        if values["status"] is None:
            values["status"] = MATCH_TO_PLAY
        return cls(
            **values,
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )
