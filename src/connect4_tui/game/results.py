from __future__ import annotations
from typing import Literal

# What commit_turn() did. Only "placed" changes the game; the rest are no-ops.
TurnOutcome = Literal["placed", "unparsable", "out_of_range", "column_full"]

PLACED: TurnOutcome = "placed"
UNPARSABLE: TurnOutcome = "unparsable"
OUT_OF_RANGE: TurnOutcome = "out_of_range"
COLUMN_FULL: TurnOutcome = "column_full"
