"""Round management for tournaments.

This module handles all round-related operations: deriving the current
stage, listing the stages in play, and generating the next stage of the
bracket from the winners of a completed one.
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

from typing import TYPE_CHECKING, List, Optional, Tuple

from bracketengine.constants import (
    DEFAULT_ACTOR,
    FINAL_ROUND,
    FIRST_ROUND,
    HISTORY_ROUND_GENERATE,
    MATCH_TO_PLAY,
    ROUND_ORDER,
    ROUND_RANK,
)
from bracketengine.exceptions import (
    EmptyRoundException,
    NoRoundFoundException,
    OddWinnerCountException,
    RoundAlreadyExistsException,
    RoundIncompleteException,
)
from bracketengine.models.history_entry import HistoryEntry
from bracketengine.models.match import Match, make_match_id
from bracketengine.models.round_advance import RoundAdvance
from bracketengine.type_hints import RoundCodes
from bracketengine.utils import setup_logger
from bracketengine.utils.validation import validate_round_code_strict

if TYPE_CHECKING:
    from bracketengine.models.tournament.tournament import Tournament

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression for a single-elimination bracket.

    This class is responsible for:
    - Deriving the current stage from match statuses
    - Checking a stage can be advanced
    - Pairing winners into the next stage's matches
    - Writing the audit history entry

    Stages always follow ``ROUND_ORDER``. The manager keeps no reference
    to the tournament between calls.
    """

    # ========== Queries ==========

    def current_round(self, tournament: "Tournament") -> str:
        """First stage that has matches, at least one of them still to play.

        Falls back to the final when every stage is empty or complete.
        """
        for round_code in ROUND_ORDER:
            matches = tournament.matches_in_round(round_code)
            if matches and any(not m.is_completed for m in matches):
                return round_code
        return FINAL_ROUND

    def rounds_present(self, tournament: "Tournament") -> RoundCodes:
        """Distinct stages found among the matches, in bracket order.

        Codes outside the bracket vocabulary are ignored. Returns the first
        stage alone when there are no matches at all.
        """
        present = {m.round for m in tournament.matches if m.round in ROUND_RANK}
        rounds = sorted(present, key=ROUND_RANK.__getitem__)
        return rounds or [FIRST_ROUND]

    def detect_advance(
        self, tournament: "Tournament"
    ) -> Tuple[str, Optional[str]]:
        """Find the stage to advance from and the stage that follows it.

        The current stage is the first one that has matches, finished or
        not. A final, played or not, has no next stage.

        Returns:
            Tuple of (current stage, next stage); next stage is None when
            the current stage is the final

        Raises:
            NoRoundFoundException: If no stage has any match
        """
        for rank, round_code in enumerate(ROUND_ORDER):
            if not tournament.matches_in_round(round_code):
                continue
            if rank == len(ROUND_ORDER) - 1:
                return round_code, None
            return round_code, ROUND_ORDER[rank + 1]
        raise NoRoundFoundException("Aucun round trouvé")

    # ========== Round Generation ==========

    def generate_next_round(
        self,
        tournament: "Tournament",
        from_round: str,
        to_round: str,
        actor: Optional[str] = None,
    ) -> List[Match]:
        """Generate ``to_round`` from the winners of ``from_round``.

        Raises:
            InvalidRoundException: If either code is not a bracket stage
            EmptyRoundException: If ``from_round`` has no matches
            RoundIncompleteException: If ``from_round`` still has matches to play
            OddWinnerCountException: If the winners cannot be paired
            RoundAlreadyExistsException: If ``to_round`` already has matches
        """
        validate_round_code_strict(from_round)
        validate_round_code_strict(to_round)
        return self.advance_round(tournament, from_round, to_round, actor)

    def generate_next_round_from_current(
        self, tournament: "Tournament", actor: Optional[str] = None
    ) -> RoundAdvance:
        """Advance the bracket from its auto-detected current stage.

        Returns:
            RoundAdvance describing the created matches, or flagged
            ``tournament_complete`` with nothing created when the current
            stage is the final

        Raises:
            NoRoundFoundException: If there are no matches at all
            RoundIncompleteException: If the current stage still has matches to play
            OddWinnerCountException: If the winners cannot be paired
            RoundAlreadyExistsException: If the next stage already has matches
        """
        current, next_round = self.detect_advance(tournament)
        if next_round is None:
            logger.info("Final reached, nothing left to generate")
            return RoundAdvance(
                message="Tournoi terminé !",
                current_round=current,
                tournament_complete=True,
            )

        created = self.advance_round(tournament, current, next_round, actor)
        return RoundAdvance(
            message=f"{len(created)} matchs générés pour le round {next_round}",
            created=created,
            current_round=current,
            next_round=next_round,
        )

    def advance_round(
        self,
        tournament: "Tournament",
        from_round: str,
        to_round: str,
        actor: Optional[str] = None,
    ) -> List[Match]:
        """Pair the winners of ``from_round`` into new ``to_round`` matches.

        Winners are paired in source-match order: first with second, third
        with fourth, and so on. New ids continue the global sequence from
        the current number of matches. Every check runs before anything is
        written.
        """
        source = tournament.matches_in_round(from_round)
        if not source:
            raise EmptyRoundException(f"Aucun match dans {from_round}")

        if any(not m.is_completed for m in source):
            raise RoundIncompleteException(
                f"Tous les matchs de {from_round} doivent être TERMINÉ."
            )

        # a player may only appear once in the next stage
        winners = list(dict.fromkeys(m.winner_id for m in source if m.winner_id))
        if len(winners) % 2 != 0:
            raise OddWinnerCountException(
                f"Nombre de gagnants impair ({len(winners)}), impossible de générer."
            )

        if tournament.matches_in_round(to_round):
            raise RoundAlreadyExistsException(
                f"Le round {to_round} existe déjà (évite doublons)."
            )

        next_number = len(tournament.matches) + 1
        created = [
            Match(
                id=make_match_id(next_number + i),
                round=to_round,
                a_id=winners[2 * i],
                b_id=winners[2 * i + 1],
                status=MATCH_TO_PLAY,
            )
            for i in range(len(winners) // 2)
        ]

        tournament.matches.extend(created)
        tournament.add_history(
            HistoryEntry.create(
                HISTORY_ROUND_GENERATE,
                f"Round {to_round} généré depuis {from_round} ({len(created)} matchs).",
                actor=actor or DEFAULT_ACTOR,
            )
        )

        logger.info(
            f"Generated {to_round} from {from_round}: {len(created)} matches "
            f"({', '.join(m.id for m in created)})"
        )
        return created
