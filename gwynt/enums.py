"""Side and match-state enums, kept apart from engine.py so card/player
modules can import them without pulling in the engine.
"""

from enum import Enum


class PlayerId(Enum):
    """One side of the table."""

    ONE = 1
    TWO = 2

    @property
    def other(self) -> "PlayerId":
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE

    @property
    def label(self) -> str:
        return f"P{self.value}"


class MatchResult(Enum):
    """Tri-state outcome of a match"""

    IN_PROGRESS = "in_progress"  # rounds still to play
    DECIDED = "decided"  # one side has more round wins
    TIED = "tied"  # finished with equal round wins
