"""Player actions.

The only two moves are playing a card from hand and passing for the rest of
the round. ``Action`` is the union the engine dispatches on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class PlayCard:
    card_id: int


@dataclass(frozen=True)
class Pass:
    pass


Action = Union[PlayCard, Pass]


def action_to_dict(action: Action) -> dict[str, Any]:
    if isinstance(action, PlayCard):
        return {"type": "play", "card_id": action.card_id}
    if isinstance(action, Pass):
        return {"type": "pass"}
    raise TypeError(f"not an action: {action!r}")


def action_from_dict(data: dict[str, Any]) -> Action:
    kind = data.get("type")
    if kind == "play":
        return PlayCard(card_id=int(data["card_id"]))
    if kind == "pass":
        return Pass()
    raise ValueError(f"unknown action type: {kind!r}")
