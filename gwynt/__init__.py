# -*- coding: utf-8 -*-
"""
Gwynt core
Match engine, card model, deck loading and the event system.
Nothing in this package prints or prompts; see ``ui`` for that.
"""

from .actions import Action, Pass, PlayCard
from .card import Card, CardKind, Row
from .config import GameConfig, MatchRules
from .deck_loader import load_deck, load_faction_decks
from .engine import GameState
from .enums import MatchResult, PlayerId
from .events import EventBus, EventType, GameEvent
from .exceptions import DataLoadError, GameError, InvalidActionError
from .player import Board, PlayerState
from .win_checker import MatchOutcome

__all__ = [
    # cards
    'Card', 'CardKind', 'Row',
    # players
    'Board', 'PlayerState', 'PlayerId',
    # engine
    'GameState', 'MatchResult', 'MatchOutcome', 'MatchRules', 'GameConfig',
    # actions
    'Action', 'PlayCard', 'Pass',
    # events
    'EventBus', 'EventType', 'GameEvent',
    # loading
    'load_deck', 'load_faction_decks',
    # errors
    'GameError', 'InvalidActionError', 'DataLoadError',
]

__version__ = '0.1.0'
