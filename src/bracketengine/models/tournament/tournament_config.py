"""TournamentConfig data class."""

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
from typing import Any, Dict, List

from bracketengine.constants import (
    DEFAULT_MODE,
    DEFAULT_RULES,
    DEFAULT_TOURNAMENT_NAME,
)

_KNOWN_KEYS = ("tournamentName", "mode", "rules")


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    tournament_name : str
        Tournament name shown to players.
    mode : str
        Free-text description of the format.
    rules : list of str
        Ordered rule lines.
    extra : dict
        Stored keys this class does not model.
    """

    tournament_name: str = DEFAULT_TOURNAMENT_NAME
    mode: str = DEFAULT_MODE
    rules: List[str] = field(default_factory=lambda: list(DEFAULT_RULES))
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        data = dict(self.extra)
        data.update(
            {
                "tournamentName": self.tournament_name,
                "mode": self.mode,
                "rules": list(self.rules),
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            tournament_name=data.get("tournamentName", DEFAULT_TOURNAMENT_NAME),
            mode=data.get("mode", DEFAULT_MODE),
            rules=list(data.get("rules") or DEFAULT_RULES),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )
