"""Replay, snapshot and action serialization tests"""

import json

import pytest

from gwynt.actions import Pass, PlayCard, action_from_dict, action_to_dict
from gwynt.config import MatchRules
from gwynt.deck_loader import example_deck, shuffled
from gwynt.engine import GameState
from gwynt.enums import MatchResult, PlayerId
from gwynt.exceptions import GameAlreadyFinishedError
from gwynt.replay import replay, snapshot
from gwynt.win_checker import check_outcome


def _decks():
    return example_deck("A", 3, 0, count=12), example_deck("B", 4, 100, count=12)


def _play_first_or_pass(game: GameState, steps: int) -> None:
    for step in range(steps):
        if game.finished:
            return
        actions = game.legal_actions()
        game.apply_action(actions[0] if step % 3 else actions[-1])


class TestActionDicts:
    def test_play_card(self):
        assert action_to_dict(PlayCard(4)) == {"type": "play", "card_id": 4}
        assert action_from_dict({"type": "play", "card_id": "4"}) == PlayCard(4)

    def test_pass(self):
        assert action_from_dict(action_to_dict(Pass())) == Pass()

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            action_from_dict({"type": "mulligan"})

    def test_not_an_action(self):
        with pytest.raises(TypeError):
            action_to_dict("pass")

    def test_actions_hashable(self):
        assert len({PlayCard(1), PlayCard(1), Pass(), Pass()}) == 2


class TestReplay:
    def test_replay_reproduces_state(self):
        deck1, deck2 = _decks()
        game = GameState.new_with_decks(deck1, deck2)
        _play_first_or_pass(game, 20)

        rebuilt = replay(deck1, deck2, game.action_log)

        assert snapshot(rebuilt) == snapshot(game)

    def test_replay_through_json(self):
        deck1, deck2 = _decks()
        deck1 = shuffled(deck1, seed=3)
        game = GameState.new_with_decks(deck1, deck2)
        _play_first_or_pass(game, 15)

        encoded = json.dumps([action_to_dict(a) for a in game.action_log])
        actions = [action_from_dict(d) for d in json.loads(encoded)]

        assert snapshot(replay(deck1, deck2, actions)) == snapshot(game)

    def test_replay_past_end_raises(self):
        deck1, deck2 = _decks()
        actions = [Pass()] * 6 + [Pass()]
        with pytest.raises(GameAlreadyFinishedError):
            replay(deck1, deck2, actions)

    def test_replay_with_rules(self):
        deck1, deck2 = _decks()
        state = replay(deck1, deck2, [], rules=MatchRules(opening_hand_size=2))
        assert len(state.player1.hand) == 2


class TestSnapshot:
    def test_initial_snapshot(self):
        deck1, deck2 = _decks()
        snap = snapshot(GameState.new_with_decks(deck1, deck2))
        assert snap["round"] == 1
        assert snap["current_player"] == 1
        assert snap["finished"] is False
        assert snap["players"][0]["hand"] == list(range(7))
        assert snap["players"][1]["deck"] == list(range(107, 112))
        assert snap["action_log"] == []
        json.dumps(snap)

    def test_snapshot_is_json_serializable_mid_match(self):
        deck1, deck2 = _decks()
        game = GameState.new_with_decks(deck1, deck2)
        _play_first_or_pass(game, 9)
        json.dumps(snapshot(game))


class TestWinChecker:
    def test_in_progress(self):
        deck1, deck2 = _decks()
        outcome = check_outcome(GameState.new_with_decks(deck1, deck2))
        assert outcome.result is MatchResult.IN_PROGRESS
        assert outcome.winner is None
        assert not outcome.is_over

    def test_tied(self):
        deck1, deck2 = _decks()
        game = replay(deck1, deck2, [Pass()] * 6)
        outcome = game.outcome()
        assert outcome.result is MatchResult.TIED
        assert outcome.is_over
        assert outcome.rounds_won == (0, 0)

    def test_decided(self):
        deck1, deck2 = _decks()
        game = GameState.new_with_decks(deck1, deck2)
        game.player2.rounds_won = 2
        game.finished = True
        outcome = game.outcome()
        assert outcome.result is MatchResult.DECIDED
        assert outcome.winner is PlayerId.TWO
        assert "2" in outcome.message
