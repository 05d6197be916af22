"""Type hints used in Bracket Engine."""

from typing import Any, Dict, List, Union

# Raw score as entered by a user, before parsing
RawScore = Union[int, float, str, None]

# Raw JSON document as stored or fetched
RawState = Dict[str, Any]

# Bracket stage codes, e.g. ["R16", "QF"]
RoundCodes = List[str]
