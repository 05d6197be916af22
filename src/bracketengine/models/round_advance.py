"""Outcome of an automatic round advance."""

from dataclasses import dataclass, field
from typing import List, Optional

from bracketengine.models.match import Match


@dataclass(slots=True)
class RoundAdvance:
    """Result of advancing the bracket from its current round.

    ``tournament_complete`` is set, with nothing created, when the final
    has already been played.
    """

    message: str
    created: List[Match] = field(default_factory=list)
    current_round: Optional[str] = None
    next_round: Optional[str] = None
    tournament_complete: bool = False


#  LocalWords:  RoundAdvance
