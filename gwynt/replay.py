"""Replay and snapshots

A match is fully determined by its two starting decks, its rules and the
accepted actions in ``GameState.action_log``. ``replay`` rebuilds the state
from those; ``snapshot`` reduces a state to a JSON-serializable dict of card
ids for comparisons and debug dumps.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from .actions import Action, action_to_dict
from .card import Card
from .config import MatchRules
from .engine import GameState
from .enums import PlayerId
from .exceptions import raise_if_game_finished
from .player import PlayerState

logger = logging.getLogger(__name__)


def replay(
    deck_for_one: Sequence[Card],
    deck_for_two: Sequence[Card],
    actions: Iterable[Action],
    rules: MatchRules | None = None,
) -> GameState:
    """Rebuild a match by re-applying ``actions`` to a fresh state.

    Raises:
        GameAlreadyFinishedError: if the log continues past the end of the match
    """
    state = GameState.new_with_decks(deck_for_one, deck_for_two, rules=rules)
    for action in actions:
        raise_if_game_finished(state.finished)
        state.apply_action(action)
    logger.debug("Replayed %d actions", len(state.action_log))
    return state


def _player_to_dict(p: PlayerState) -> dict[str, Any]:
    return {
        "deck": [c.id for c in p.deck],
        "hand": [c.id for c in p.hand],
        "board": {
            "melee": [c.id for c in p.board.melee],
            "ranged": [c.id for c in p.board.ranged],
            "siege": [c.id for c in p.board.siege],
        },
        "passed": p.passed,
        "rounds_won": p.rounds_won,
    }


def snapshot(state: GameState) -> dict[str, Any]:
    """Canonical JSON-serializable view of ``state``"""
    return {
        "round": state.round,
        "current_player": state.current_player.value,
        "finished": state.finished,
        "players": [_player_to_dict(state.player(pid)) for pid in PlayerId],
        "discard": {pid.value: [c.id for c in state.discard[pid]] for pid in PlayerId},
        "action_log": [action_to_dict(a) for a in state.action_log],
    }
