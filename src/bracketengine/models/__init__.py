from bracketengine.models.counts import MatchCounts, PlayerCounts
from bracketengine.models.history_entry import HistoryEntry
from bracketengine.models.match import Match, make_match_id
from bracketengine.models.player import Player
from bracketengine.models.round_advance import RoundAdvance

__all__ = [
    "Player",
    "Match",
    "HistoryEntry",
    "PlayerCounts",
    "MatchCounts",
    "RoundAdvance",
    "make_match_id",
]
