"""History entry data class."""

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

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil.parser import isoparse

from bracketengine.constants import DEFAULT_ACTOR
from bracketengine.utils import utc_now_iso


@dataclass(frozen=True)
class HistoryEntry:
    """One line of the tournament audit log.

    Entries are never edited once written, hence ``frozen``.

    Attributes
    ----------
    ts : str
        ISO-8601 timestamp of the event.
    type : str
        ``MATCH_VALIDATE``, ``ROUND_GENERATE`` or any other event type
        found in stored data.
    actor : str
        Free-text label of who performed the action.
    message : str
        Human-readable summary.
    """

    ts: str
    type: str
    actor: str
    message: str

    @classmethod
    def create(
        cls, entry_type: str, message: str, actor: Optional[str] = None
    ) -> "HistoryEntry":
        """Build an entry stamped with the current time."""
        return cls(
            ts=utc_now_iso(),
            type=entry_type,
            actor=actor or DEFAULT_ACTOR,
            message=message,
        )

    @property
    def timestamp(self) -> Optional[datetime]:
        """``ts`` parsed, or None when it is not valid ISO-8601."""
        try:
            return isoparse(self.ts)
        except (ValueError, TypeError):
            return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize history entry to dictionary."""
        return {
            "ts": self.ts,
            "type": self.type,
            "actor": self.actor,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        """Deserialize history entry from dictionary."""
        return cls(
            ts=data.get("ts", ""),
            type=data.get("type", ""),
            actor=data.get("actor") or DEFAULT_ACTOR,
            message=data.get("message", ""),
        )
