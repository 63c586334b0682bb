# -*- coding: utf-8 -*-
"""
Event bus
Observer pattern used to keep the engine free of any presentation code:
the engine publishes, the terminal UI and tests subscribe.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from .card import Card
    from .enums import PlayerId

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Match event types"""

    GAME_START = auto()
    GAME_END = auto()

    ROUND_END = auto()

    CARD_PLAYED = auto()
    CARD_DRAWN = auto()
    PLAYER_PASSED = auto()
    ACTION_IGNORED = auto()  # PlayCard for a card not in hand


@dataclass
class GameEvent:
    """
    Event payload
    Everything beyond the type lives in ``data``.
    """

    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def player(self) -> Optional["PlayerId"]:
        return self.data.get("player")

    @property
    def card(self) -> Optional["Card"]:
        return self.data.get("card")

    @property
    def cards(self) -> List["Card"]:
        return self.data.get("cards", [])

    @property
    def round(self) -> int:
        return self.data.get("round", 0)


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    Event bus
    Handles subscription and publication
    """

    def __init__(self, max_history: int = 100):
        # event type -> [(priority, handler)]
        self._handlers: Dict[EventType, List[tuple[int, EventHandler]]] = defaultdict(list)
        self._global_handlers: List[tuple[int, EventHandler]] = []
        self._event_history: List[GameEvent] = []
        self._max_history: int = max_history

    def subscribe(self, event_type: EventType, handler: EventHandler,
                  priority: int = 0) -> None:
        """
        Subscribe to one event type

        Args:
            event_type: event type
            handler: callback
            priority: higher runs first
        """
        self._handlers[event_type].append((priority, handler))
        self._handlers[event_type].sort(key=lambda x: x[0], reverse=True)

    def subscribe_all(self, handler: EventHandler, priority: int = 0) -> None:
        """Subscribe to every event type"""
        self._global_handlers.append((priority, handler))
        self._global_handlers.sort(key=lambda x: x[0], reverse=True)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        self._handlers[event_type] = [
            (p, h) for p, h in self._handlers[event_type] if h != handler
        ]

    def publish(self, event: GameEvent) -> GameEvent:
        """
        Publish an event

        A failing handler is logged and skipped; it never breaks the
        engine transition that published the event.

        Args:
            event: the event

        Returns:
            the published event
        """
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history = self._event_history[-self._max_history:]

        handlers = list(self._global_handlers) + list(self._handlers.get(event.event_type, []))
        for _, handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed for %s", event.event_type.name)

        return event

    def emit(self, event_type: EventType, **kwargs) -> GameEvent:
        """Build and publish an event from keyword data"""
        return self.publish(GameEvent(event_type=event_type, data=kwargs))

    def clear(self) -> None:
        """Drop every subscription"""
        self._handlers.clear()
        self._global_handlers.clear()

    def get_history(self, count: int = 10) -> List[GameEvent]:
        """Most recent ``count`` events, oldest first"""
        return self._event_history[-count:]
