"""Match outcome
Turns the raw round counts into a result that separates "still playing"
from "finished in a tie".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18n import t as _t

from .enums import MatchResult, PlayerId

if TYPE_CHECKING:
    from .engine import GameState


@dataclass(slots=True)
class MatchOutcome:
    """Outcome snapshot"""

    result: MatchResult
    winner: PlayerId | None
    rounds_won: tuple[int, int]
    message: str

    @property
    def is_over(self) -> bool:
        return self.result is not MatchResult.IN_PROGRESS


def check_outcome(state: GameState) -> MatchOutcome:
    """Compute the outcome of ``state``

    Args:
        state: match to inspect

    Returns:
        MatchOutcome: IN_PROGRESS until the match is finished, then DECIDED
        with the side holding more round wins, or TIED
    """
    one = state.rounds_won(PlayerId.ONE)
    two = state.rounds_won(PlayerId.TWO)

    if not state.finished:
        return MatchOutcome(
            result=MatchResult.IN_PROGRESS,
            winner=None,
            rounds_won=(one, two),
            message=_t("game.in_progress"),
        )

    if one == two:
        return MatchOutcome(
            result=MatchResult.TIED,
            winner=None,
            rounds_won=(one, two),
            message=_t("game.over_tie"),
        )

    winner = PlayerId.ONE if one > two else PlayerId.TWO
    return MatchOutcome(
        result=MatchResult.DECIDED,
        winner=winner,
        rounds_won=(one, two),
        message=_t("game.over_winner", player=winner.value),
    )
