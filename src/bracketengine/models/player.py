"""Player data class."""

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
from typing import Any, Dict

from bracketengine.constants import (
    PLAYER_ELIMINATED,
    PLAYER_PENDING,
    PLAYER_QUALIFIED,
    PLAYER_STATUSES,
)

_KNOWN_KEYS = ("id", "name", "status")


@dataclass
class Player:
    """A tournament entrant.

    Players are created from seed data and only ever mutated by match
    validation, which flips ``status`` to qualified or eliminated.

    Attributes
    ----------
    id : str
        Stable identifier referenced by matches.
    name : str
        Display name.
    status : str
        One of ``EN_ATTENTE``, ``QUALIFIE`` or ``ELIMINE``.
    extra : dict
        Keys of the stored document this class does not model, kept so a
        load/save round-trip does not drop them.
    """

    id: str
    name: str
    status: str = PLAYER_PENDING
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_qualified(self) -> bool:
        return self.status == PLAYER_QUALIFIED

    @property
    def is_eliminated(self) -> bool:
        return self.status == PLAYER_ELIMINATED

    @property
    def is_active(self) -> bool:
        """Neither qualified nor eliminated yet."""
        return not (self.is_qualified or self.is_eliminated)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        data = dict(self.extra)
        data.update({"id": self.id, "name": self.name, "status": self.status})
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        Missing or unrecognized statuses fall back to ``EN_ATTENTE``.
        """
        status = data.get("status")
        if status not in PLAYER_STATUSES:
            status = PLAYER_PENDING
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            status=status,
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )
