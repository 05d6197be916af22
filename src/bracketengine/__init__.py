"""Bracket Engine: single-elimination tournament bracket state.

Typical session::

    store = JsonFileStore("tournament_data.json")
    tournament = load_data(store, RemoteSource("https://example.org/data.json"))
    tournament.validate_match("m01", "3", "1", actor="Alice")
    tournament.generate_next_round("R16", "QF")
    save_data(store, tournament)
"""

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

from bracketengine.models import (
    HistoryEntry,
    Match,
    MatchCounts,
    Player,
    PlayerCounts,
    RoundAdvance,
)
from bracketengine.models.tournament import (
    Tournament,
    TournamentConfig,
    normalize_data,
)
from bracketengine.storage import (
    JsonFileStore,
    RemoteSource,
    load_data,
    reset_data,
    save_data,
)

__version__ = "0.1.0"

__all__ = [
    "Tournament",
    "TournamentConfig",
    "Player",
    "Match",
    "HistoryEntry",
    "PlayerCounts",
    "MatchCounts",
    "RoundAdvance",
    "normalize_data",
    "JsonFileStore",
    "RemoteSource",
    "load_data",
    "save_data",
    "reset_data",
]
