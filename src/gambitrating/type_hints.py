"""Type hints used in Gambit Rating."""

from typing import Dict, List, Literal, Tuple

# Score of a single game for the rated player (1.0, 0.5 or 0.0)
Outcome = float

TrendDirection = Literal["up", "down", "stable"]

# (player change, opponent change) after one game
RatingChanges = Tuple[int, int]
# Plain-dict form of a ledger, ready for json.dump
LedgerDict = Dict[str, List[Dict[str, object]]]
