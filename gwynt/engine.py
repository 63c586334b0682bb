# -*- coding: utf-8 -*-
"""
Match engine
Best-of-three state machine: legal actions, action resolution, round-end
scoring and bonus draws.

The engine performs no I/O. It is fed decks at construction and actions one
at a time through ``apply_action``; everything observable leaves through
the query methods and the event bus.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .actions import Action, Pass, PlayCard
from .card import Card, CardKind
from .config import MatchRules
from .enums import PlayerId
from .events import EventBus, EventType
from .exceptions import ConfigurationError, InvalidActionError
from .player import PlayerState
from .win_checker import MatchOutcome, check_outcome

logger = logging.getLogger(__name__)


class GameState:
    """
    One match between two players.

    States are ``in progress`` (round 1..max_rounds, current player, passed
    flags) and ``finished``. The only transitions are ``apply_action`` calls;
    once ``finished`` is set no further action is offered or applied.
    """

    def __init__(
        self,
        player1: PlayerState,
        player2: PlayerState,
        rules: Optional[MatchRules] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.player1: PlayerState = player1
        self.player2: PlayerState = player2
        self.rules: MatchRules = rules if rules is not None else MatchRules()
        self.event_bus: EventBus = event_bus if event_bus is not None else EventBus()

        self.current_player: PlayerId = PlayerId.ONE
        self.round: int = 1
        self.finished: bool = False

        # accepted actions, in order; ignored ones are not recorded
        self.action_log: List[Action] = []
        # boards cleared at round end, keyed by board owner
        self.discard: Dict[PlayerId, List[Card]] = {PlayerId.ONE: [], PlayerId.TWO: []}

    @classmethod
    def new_with_decks(
        cls,
        deck_for_one: Sequence[Card],
        deck_for_two: Sequence[Card],
        rules: Optional[MatchRules] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "GameState":
        """
        Start a match from two already-loaded decks.

        Args:
            deck_for_one: cards of player one, drawn from the front
            deck_for_two: cards of player two
            rules: match rules (defaults: 7-card opening hand, best of three)
            event_bus: bus to publish to; a private one is created otherwise

        Raises:
            ConfigurationError: if ``rules`` fail validation
        """
        rules = rules if rules is not None else MatchRules()
        errors = rules.validate()
        if errors:
            raise ConfigurationError("; ".join(errors), config_key="rules")

        state = cls(
            PlayerState(deck=list(deck_for_one)),
            PlayerState(deck=list(deck_for_two)),
            rules=rules,
            event_bus=event_bus,
        )
        for pid in PlayerId:
            state._draw(pid, rules.opening_hand_size)

        logger.info(
            "Match started | deck1=%d deck2=%d opening_hand=%d",
            len(deck_for_one), len(deck_for_two), rules.opening_hand_size,
        )
        state.event_bus.emit(EventType.GAME_START, round=state.round)
        return state

    # ==================== Queries ====================

    def player(self, pid: PlayerId) -> PlayerState:
        if pid is PlayerId.ONE:
            return self.player1
        if pid is PlayerId.TWO:
            return self.player2
        raise ValueError(f"unknown player: {pid!r}")

    def opponent_of(self, pid: PlayerId) -> PlayerState:
        return self.player(pid.other)

    @property
    def current(self) -> PlayerState:
        return self.player(self.current_player)

    def is_finished(self) -> bool:
        return self.finished

    def total_power(self, pid: PlayerId) -> int:
        return self.player(pid).board.total_power

    def rounds_won(self, pid: PlayerId) -> int:
        return self.player(pid).rounds_won

    def winner(self) -> Optional[PlayerId]:
        """
        Side with strictly more round wins, once the match is finished.

        Returns None both while the match is in progress and after a tied
        finish; use ``outcome()`` to tell the two apart.
        """
        if not self.finished:
            return None
        one, two = self.player1.rounds_won, self.player2.rounds_won
        if one > two:
            return PlayerId.ONE
        if two > one:
            return PlayerId.TWO
        return None

    def outcome(self) -> MatchOutcome:
        return check_outcome(self)

    def legal_actions(self) -> List[Action]:
        """
        Actions open to the current player.

        Returns:
            empty when the match is finished or the current player has
            passed; otherwise one PlayCard per hand card (hand order)
            followed by a single Pass
        """
        if self.finished:
            return []

        player = self.current
        if player.passed:
            return []

        actions: List[Action] = [PlayCard(card.id) for card in player.hand]
        actions.append(Pass())
        return actions

    # ==================== Transitions ====================

    def apply_action(self, action: Action) -> None:
        """
        Apply one action for the current player.

        No-op once the match is finished. A PlayCard whose card is not in
        the current hand changes nothing (or raises InvalidActionError
        under ``rules.strict_actions``).

        Raises:
            TypeError: if ``action`` is not a PlayCard or Pass
        """
        if not isinstance(action, (PlayCard, Pass)):
            raise TypeError(f"not an action: {action!r}")

        if self.finished:
            logger.debug("Action %r after match end ignored", action)
            return

        pid = self.current_player
        player = self.current

        if isinstance(action, PlayCard):
            card = player.take_from_hand(action.card_id)
            if card is None:
                self._reject_play(pid, action)
                return
            self._resolve_play(pid, card)
        else:
            player.passed = True
            logger.debug("%s passes in round %d", pid.label, self.round)
            self.event_bus.emit(EventType.PLAYER_PASSED, player=pid, round=self.round)

        self.action_log.append(action)
        self._advance()

    def _reject_play(self, pid: PlayerId, action: PlayCard) -> None:
        if self.rules.strict_actions:
            raise InvalidActionError(
                action_type="play",
                card_id=action.card_id,
                player_id=pid.value,
            )
        logger.warning("%s tried to play card %s which is not in hand", pid.label, action.card_id)
        self.event_bus.emit(EventType.ACTION_IGNORED, player=pid, card_id=action.card_id)

    def _resolve_play(self, pid: PlayerId, card: Card) -> None:
        """Put a card that already left the hand onto the right board."""
        if card.kind is CardKind.SPY:
            self.opponent_of(pid).board.add(card)
            self.event_bus.emit(
                EventType.CARD_PLAYED, player=pid, card=card, board_owner=pid.other, round=self.round,
            )
            logger.debug("%s plays spy %s onto the opposing board", pid.label, card.id)
            self._draw(pid, self.rules.spy_draw_count)
        elif card.kind is CardKind.UNIT:
            self.player(pid).board.add(card)
            self.event_bus.emit(
                EventType.CARD_PLAYED, player=pid, card=card, board_owner=pid, round=self.round,
            )
            logger.debug("%s plays unit %s", pid.label, card.id)
        else:
            raise ValueError(f"unhandled card kind: {card.kind!r}")

    def _advance(self) -> None:
        """Close the round when both sides are done, else pass the turn."""
        if self.player1.is_done and self.player2.is_done:
            self._end_round()
            return

        # the other side keeps the turn away only while it can still act
        if not self.opponent_of(self.current_player).is_done:
            self.current_player = self.current_player.other

    def _draw(self, pid: PlayerId, count: int) -> List[Card]:
        drawn = self.player(pid).draw(count)
        if drawn:
            self.event_bus.emit(EventType.CARD_DRAWN, player=pid, cards=drawn, count=len(drawn))
        if len(drawn) < count:
            logger.debug("%s deck exhausted: drew %d of %d", pid.label, len(drawn), count)
        return drawn

    def _end_round(self) -> None:
        ended = self.round
        p1_score = self.player1.board.total_power
        p2_score = self.player2.board.total_power

        round_winner: Optional[PlayerId] = None
        if p1_score > p2_score:
            self.player1.rounds_won += 1
            round_winner = PlayerId.ONE
        elif p2_score > p1_score:
            self.player2.rounds_won += 1
            round_winner = PlayerId.TWO

        logger.info(
            "Round %d ended | P1=%d P2=%d winner=%s",
            ended, p1_score, p2_score, round_winner.label if round_winner else "tie",
        )

        bonus = self.rules.bonus_draws_after(ended)
        for pid in PlayerId:
            self._draw(pid, bonus)

        for pid in PlayerId:
            self.discard[pid].extend(self.player(pid).board.clear())
            self.player(pid).passed = False

        self.event_bus.emit(
            EventType.ROUND_END,
            round=ended,
            scores=(p1_score, p2_score),
            winner=round_winner,
            rounds_won=(self.player1.rounds_won, self.player2.rounds_won),
        )

        if (
            self.player1.rounds_won >= self.rules.rounds_to_win
            or self.player2.rounds_won >= self.rules.rounds_to_win
            or ended >= self.rules.max_rounds
        ):
            self.finished = True
            outcome = self.outcome()
            logger.info(
                "Match finished | result=%s rounds=%s", outcome.result.value, outcome.rounds_won,
            )
            self.event_bus.emit(EventType.GAME_END, outcome=outcome, round=ended)
        else:
            self.round += 1
            self.current_player = PlayerId.ONE

    def __repr__(self) -> str:
        return (
            f"GameState(round={self.round}, current={self.current_player.label}, "
            f"finished={self.finished}, rounds_won=({self.player1.rounds_won}, "
            f"{self.player2.rounds_won}))"
        )
