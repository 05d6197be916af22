"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from typing import TYPE_CHECKING, Optional

from bracketengine.constants import (
    DEFAULT_ACTOR,
    HISTORY_MATCH_VALIDATE,
    MATCH_COMPLETED,
    PLAYER_ELIMINATED,
    PLAYER_QUALIFIED,
)
from bracketengine.exceptions import (
    MatchNotFoundException,
    PlayerNotFoundException,
    TiedScoreException,
)
from bracketengine.models.history_entry import HistoryEntry
from bracketengine.models.match import Match
from bracketengine.type_hints import RawScore
from bracketengine.utils import setup_logger, utc_now_iso
from bracketengine.utils.validation import (
    validate_proof_url_strict,
    validate_score_strict,
)

if TYPE_CHECKING:
    from bracketengine.models.tournament.tournament import Tournament

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Checking every precondition before touching the tournament
    - Recording scores and the derived winner/loser on the match
    - Updating both players' statuses
    - Writing the audit history entry

    It keeps no reference to the tournament between calls.
    """

    def validate_match(
        self,
        tournament: "Tournament",
        match_id: str,
        score_a: RawScore,
        score_b: RawScore,
        proof_url: Optional[str] = "",
        actor: Optional[str] = None,
    ) -> Match:
        """Record the outcome of a match.

        Args:
            tournament: Tournament to update in place
            match_id: Id of the match being validated
            score_a: Score of player A, as a number or numeric string
            score_b: Score of player B, as a number or numeric string
            proof_url: Optional direct image link proving the result
            actor: Label of whoever validates, defaults to "Admin"

        Returns:
            The updated match

        Raises:
            MatchNotFoundException: If no match has this id
            PlayerNotFoundException: If either contestant is unknown
            InvalidScoreException: If a score is not a finite number
            TiedScoreException: If both scores are equal
            InvalidProofUrlException: If the proof link is not a direct image link
        """
        match = tournament.get_match(match_id)
        if match is None:
            raise MatchNotFoundException(f"Match introuvable: {match_id}")

        player_a = tournament.get_player(match.a_id)
        player_b = tournament.get_player(match.b_id)
        if player_a is None or player_b is None:
            raise PlayerNotFoundException("Joueur introuvable (aId/bId).")

        sa = validate_score_strict(score_a)
        sb = validate_score_strict(score_b)
        if sa == sb:
            raise TiedScoreException("Égalité interdite en élimination directe.")

        proof = validate_proof_url_strict(proof_url)

        if match.is_completed:
            # Re-validation is allowed and overwrites the previous outcome
            logger.warning(
                f"Match {match.id} was already validated, overwriting result"
            )

        actor = actor or DEFAULT_ACTOR
        winner, loser = (player_a, player_b) if sa > sb else (player_b, player_a)

        match.score_a = sa
        match.score_b = sb
        match.status = MATCH_COMPLETED
        match.proof_url = proof or match.proof_url or ""
        match.played_at = utc_now_iso()
        match.validated_by = actor
        match.winner_id = winner.id
        match.loser_id = loser.id

        winner.status = PLAYER_QUALIFIED
        loser.status = PLAYER_ELIMINATED

        tournament.add_history(
            HistoryEntry.create(
                HISTORY_MATCH_VALIDATE,
                f"Match {match.id} validé: {player_a.name} {sa}-{sb} {player_b.name}.",
                actor=actor,
            )
        )

        logger.info(
            f"Validated {match.id} ({match.round}): {player_a.name} {sa}-{sb} "
            f"{player_b.name}, winner {winner.name}"
        )
        return match
