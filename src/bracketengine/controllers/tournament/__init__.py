"""Controllers operating on a tournament in place."""

from bracketengine.controllers.tournament.result_recorder import ResultRecorder
from bracketengine.controllers.tournament.round_manager import RoundManager

__all__ = ["ResultRecorder", "RoundManager"]
