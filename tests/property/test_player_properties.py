# -*- coding: utf-8 -*-
"""Property tests for PlayerState draws and Board totals.

Core invariants:
1. draw(n) returns at most n cards and at most the deck size
2. deck + hand is unchanged by drawing, and order is preserved
3. Board.total_power is the sum of its cards' power and clear() empties it
"""

from __future__ import annotations

import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parents[2])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from hypothesis import given
from hypothesis import strategies as st

from gwynt.card import Card, Row
from gwynt.player import Board, PlayerState


def _make_card(idx: int, power: int = 1, row: Row = Row.MELEE) -> Card:
    return Card(id=idx, name=f"Test {idx}", power=power, row=row)


@given(
    deck_size=st.integers(min_value=0, max_value=30),
    draws=st.lists(st.integers(min_value=0, max_value=10), max_size=8),
)
def test_draw_bounded_and_ordered(deck_size, draws):
    player = PlayerState(deck=[_make_card(i) for i in range(deck_size)])

    for n in draws:
        deck_before = player.deck_count
        drawn = player.draw(n)
        assert len(drawn) == min(n, deck_before)
        assert player.hand_count + player.deck_count == deck_size

    # drawing from the front keeps the original order across hand + deck
    assert [c.id for c in player.hand + player.deck] == list(range(deck_size))


@given(st.lists(st.tuples(st.integers(min_value=0, max_value=255), st.sampled_from(list(Row)))))
def test_board_total_power(specs):
    board = Board()
    for i, (power, row) in enumerate(specs):
        board.add(_make_card(i, power, row))

    assert board.total_power == sum(p for p, _ in specs)
    assert len(board) == len(specs)

    removed = board.clear()
    assert sorted(c.id for c in removed) == list(range(len(specs)))
    assert board.total_power == 0
    assert len(board) == 0
