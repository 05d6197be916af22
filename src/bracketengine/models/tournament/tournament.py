"""Tournament state and bracket operations."""

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

from typing import Any, Dict, List, Optional

from bracketengine.constants import (
    DEFAULT_MODE,
    DEFAULT_RULES,
    DEFAULT_TOURNAMENT_NAME,
    FINAL_ROUND,
    PLAYER_PENDING,
    PLAYER_STATUS_LABELS,
)
from bracketengine.controllers.tournament import ResultRecorder, RoundManager
from bracketengine.models.counts import MatchCounts, PlayerCounts
from bracketengine.models.history_entry import HistoryEntry
from bracketengine.models.match import Match
from bracketengine.models.player import Player
from bracketengine.models.round_advance import RoundAdvance
from bracketengine.type_hints import RawScore, RawState, RoundCodes
from bracketengine.utils import setup_logger

from .tournament_config import TournamentConfig

logger = setup_logger(__name__)


def default_config() -> Dict[str, Any]:
    """A fresh default ``config`` record."""
    return {
        "tournamentName": DEFAULT_TOURNAMENT_NAME,
        "mode": DEFAULT_MODE,
        "rules": list(DEFAULT_RULES),
    }


def normalize_data(data: Optional[RawState]) -> RawState:
    """Repair a raw tournament document in place and return it.

    Missing, empty or non-list ``players``, ``matches`` and ``history``
    become empty lists; a missing or non-object ``config`` becomes the
    default record and a partial one gets its missing keys filled in.
    Applying it twice changes nothing more.
    """
    if data is None:
        data = {}

    for key in ("players", "matches", "history"):
        if not data.get(key) or not isinstance(data[key], list):
            data[key] = []

    if not data.get("config") or not isinstance(data["config"], dict):
        data["config"] = default_config()
    else:
        for key, value in default_config().items():
            data["config"].setdefault(key, value)

    return data


class Tournament:
    """Single-elimination tournament state.

    This is the root aggregate and the single unit of persistence. Bracket
    operations are delegated to specialized controllers:
    - ResultRecorder: validates and records match results
    - RoundManager: derives the current stage and generates the next one

    Mutating operations change this object in place and either return the
    created/updated records or raise before touching anything. Saving is
    left to the caller.
    """

    def __init__(
        self,
        players: Optional[List[Player]] = None,
        matches: Optional[List[Match]] = None,
        history: Optional[List[HistoryEntry]] = None,
        config: Optional[TournamentConfig] = None,
    ) -> None:
        self.players: List[Player] = list(players or [])
        self.matches: List[Match] = list(matches or [])
        # Newest first
        self.history: List[HistoryEntry] = list(history or [])
        self.config = config or TournamentConfig()

        self.result_recorder = ResultRecorder()
        self.round_manager = RoundManager()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.tournament_name

    @name.setter
    def name(self, value: str) -> None:
        """Set tournament name."""
        self.config.tournament_name = value

    # ========== Lookups ==========

    def get_player(self, player_id: str) -> Optional[Player]:
        """Return the player with this id, or None."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_match(self, match_id: str) -> Optional[Match]:
        """Return the match with this id, or None."""
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def matches_in_round(self, round_code: str) -> List[Match]:
        """Matches of one stage, in creation order."""
        return [m for m in self.matches if m.round == round_code]

    def winners_of_round(self, round_code: str) -> List[str]:
        """Distinct ids of the winners of a stage, in match order."""
        return list(
            dict.fromkeys(
                m.winner_id for m in self.matches_in_round(round_code) if m.winner_id
            )
        )

    def champion(self) -> Optional[Player]:
        """Winner of the final once it has been played."""
        finals = self.matches_in_round(FINAL_ROUND)
        if len(finals) == 1 and finals[0].is_completed and finals[0].winner_id:
            return self.get_player(finals[0].winner_id)
        return None

    # ========== Round Management ==========

    def current_round(self) -> str:
        return self.round_manager.current_round(self)

    def rounds_present(self) -> RoundCodes:
        return self.round_manager.rounds_present(self)

    def generate_next_round(
        self, from_round: str, to_round: str, actor: Optional[str] = None
    ) -> List[Match]:
        """Generate ``to_round`` from the winners of ``from_round``.

        Returns:
            The newly created matches
        """
        return self.round_manager.generate_next_round(
            self, from_round, to_round, actor
        )

    def generate_next_round_from_current(
        self, actor: Optional[str] = None
    ) -> RoundAdvance:
        """Generate the stage following the auto-detected current one."""
        return self.round_manager.generate_next_round_from_current(self, actor)

    # ========== Result Management ==========

    def validate_match(
        self,
        match_id: str,
        score_a: RawScore,
        score_b: RawScore,
        proof_url: Optional[str] = "",
        actor: Optional[str] = None,
    ) -> Match:
        """Record the outcome of a match.

        Returns:
            The updated match
        """
        return self.result_recorder.validate_match(
            self, match_id, score_a, score_b, proof_url, actor
        )

    def add_history(self, entry: HistoryEntry) -> None:
        """Prepend an entry to the audit log."""
        self.history.insert(0, entry)

    # ========== Counters ==========

    def count_players(self) -> PlayerCounts:
        qualified = sum(1 for p in self.players if p.is_qualified)
        eliminated = sum(1 for p in self.players if p.is_eliminated)
        return PlayerCounts(
            qualified=qualified,
            eliminated=eliminated,
            active=len(self.players) - qualified - eliminated,
            total=len(self.players),
        )

    def count_matches(self) -> MatchCounts:
        completed = sum(1 for m in self.matches if m.is_completed)
        return MatchCounts(
            completed=completed,
            to_play=len(self.matches) - completed,
            total=len(self.matches),
        )

    @staticmethod
    def status_label(status: Optional[str]) -> str:
        """Display label for a player status; unknown statuses read as pending."""
        return PLAYER_STATUS_LABELS.get(status, PLAYER_STATUS_LABELS[PLAYER_PENDING])

    # ========== Serialization ==========

    def to_dict(self) -> RawState:
        """Serialize tournament to dictionary.

        Returns:
            The persisted JSON document
        """
        return {
            "players": [p.to_dict() for p in self.players],
            "matches": [m.to_dict() for m in self.matches],
            "history": [h.to_dict() for h in self.history],
            "config": self.config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[RawState]) -> "Tournament":
        """Deserialize tournament from a raw document, normalizing it first.

        Args:
            data: Raw tournament document, possibly partial

        Returns:
            Reconstructed Tournament object
        """
        data = normalize_data(data)
        tournament = cls(
            players=[Player.from_dict(p) for p in data["players"]],
            matches=[Match.from_dict(m) for m in data["matches"]],
            history=[HistoryEntry.from_dict(h) for h in data["history"]],
            config=TournamentConfig.from_dict(data["config"]),
        )
        logger.debug(
            f"Loaded tournament: {tournament.name} "
            f"({len(tournament.players)} players, {len(tournament.matches)} matches)"
        )
        return tournament
