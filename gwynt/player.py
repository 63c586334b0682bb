# -*- coding: utf-8 -*-
"""
Player side of the table: the three-row board and the per-player zones
(deck, hand, board) plus round bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .card import Card, Row


@dataclass
class Board:
    """
    Three ordered rows of cards owned by one player.
    Cards are appended in play order within their row.
    """

    melee: List[Card] = field(default_factory=list)
    ranged: List[Card] = field(default_factory=list)
    siege: List[Card] = field(default_factory=list)

    def row(self, row: Row) -> List[Card]:
        """Return the list backing ``row``"""
        if row is Row.MELEE:
            return self.melee
        if row is Row.RANGED:
            return self.ranged
        if row is Row.SIEGE:
            return self.siege
        raise ValueError(f"unknown row: {row!r}")

    def add(self, card: Card) -> None:
        """Place a card at the end of its row."""
        self.row(card.row).append(card)

    def cards(self) -> Iterator[Card]:
        """Iterate every card, melee first, then ranged, then siege."""
        yield from self.melee
        yield from self.ranged
        yield from self.siege

    @property
    def total_power(self) -> int:
        return sum(card.power for card in self.cards())

    def clear(self) -> List[Card]:
        """
        Empty all three rows.

        Returns:
            the removed cards, in row order
        """
        removed = list(self.cards())
        self.melee.clear()
        self.ranged.clear()
        self.siege.clear()
        return removed

    def __len__(self) -> int:
        return len(self.melee) + len(self.ranged) + len(self.siege)

    def __contains__(self, card_id: object) -> bool:
        return any(card.id == card_id for card in self.cards())


@dataclass
class PlayerState:
    """
    One player's zones and round state.

    Attributes:
        deck: draw pile, drawn from the front
        hand: cards available to play
        board: cards played this round (including enemy spies)
        passed: set by a Pass action, cleared at every round boundary
        rounds_won: number of rounds this player has won
    """

    deck: List[Card] = field(default_factory=list)
    hand: List[Card] = field(default_factory=list)
    board: Board = field(default_factory=Board)
    passed: bool = False
    rounds_won: int = 0

    def draw(self, count: int) -> List[Card]:
        """
        Move up to ``count`` cards from the deck into the hand.

        Stops without error when the deck runs out.

        Args:
            count: number of cards wanted

        Returns:
            the cards actually drawn (possibly fewer than ``count``)
        """
        drawn: List[Card] = []
        for _ in range(max(0, count)):
            if not self.deck:
                break
            card = self.deck.pop(0)
            self.hand.append(card)
            drawn.append(card)
        return drawn

    def find_in_hand(self, card_id: int) -> Optional[Card]:
        for card in self.hand:
            if card.id == card_id:
                return card
        return None

    def take_from_hand(self, card_id: int) -> Optional[Card]:
        """Remove and return the hand card with ``card_id``, or None."""
        for pos, card in enumerate(self.hand):
            if card.id == card_id:
                return self.hand.pop(pos)
        return None

    @property
    def is_done(self) -> bool:
        """No further action this round: passed, or nothing left to play."""
        return self.passed or not self.hand

    @property
    def hand_count(self) -> int:
        return len(self.hand)

    @property
    def deck_count(self) -> int:
        return len(self.deck)
