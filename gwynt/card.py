"""Card model: kinds, rows and the card record itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CardKind(Enum):
    """Card kind

    New kinds (weather, hero, buff) are added here and handled in
    ``GameState._resolve_play``.
    """

    UNIT = "unit"  # played on the owner's board
    SPY = "spy"  # played on the opponent's board, owner draws


class Row(Enum):
    """Board lane. Cosmetic only, does not affect scoring."""

    MELEE = "melee"
    RANGED = "ranged"
    SIEGE = "siege"

    @property
    def symbol(self) -> str:
        symbols = {
            Row.MELEE: "⚔",
            Row.RANGED: "➶",
            Row.SIEGE: "⛫",
        }
        return symbols.get(self, "?")


@dataclass(slots=True)
class Card:
    """A single card.

    Attributes:
        id: unique identifier, assigned by the deck loader
        name: display name
        power: non-negative strength added to the board total
        kind: unit or spy
        row: lane the card is placed in
        faction: faction the card was loaded from (informational)
    """

    id: int
    name: str
    power: int
    kind: CardKind = CardKind.UNIT
    row: Row = Row.MELEE
    faction: str = ""

    def __post_init__(self):
        if isinstance(self.kind, str):
            self.kind = CardKind(self.kind)
        if isinstance(self.row, str):
            self.row = Row(self.row)
        if self.power < 0:
            raise ValueError(f"card power must be non-negative, got {self.power}")

    @property
    def is_spy(self) -> bool:
        return self.kind is CardKind.SPY

    @property
    def display_name(self) -> str:
        """Name, power and row symbol, e.g. ``Blue Stripes Commando (4 ⚔)``"""
        return f"{self.name} ({self.power} {self.row.symbol})"

    def __str__(self) -> str:
        return self.display_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "power": self.power,
            "kind": self.kind.value,
            "row": self.row.value,
            "faction": self.faction,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Card:
        return cls(
            id=data["id"],
            name=data["name"],
            power=data.get("power", 0),
            kind=CardKind(data.get("kind", CardKind.UNIT.value)),
            row=Row(data.get("row", Row.MELEE.value)),
            faction=data.get("faction", ""),
        )
