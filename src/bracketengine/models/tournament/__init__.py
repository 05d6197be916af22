"""Tournament aggregate for Bracket Engine.

The ``Tournament`` class owns players, matches, history and configuration
and exposes the bracket operations.
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

from bracketengine.models.tournament.tournament_config import TournamentConfig
from bracketengine.models.tournament.tournament import (
    Tournament,
    default_config,
    normalize_data,
)

__all__ = [
    "Tournament",
    "TournamentConfig",
    "default_config",
    "normalize_data",
]
