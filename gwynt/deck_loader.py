"""Deck loading
Builds faction decks from a shared CSV card pool.

One record per card: ``faction,name,power,kind,row``. A header line, blank
lines and ``#`` comments are skipped. Malformed fields fall back to
defaults (power 0, unit, melee) so one bad record never aborts a load; a
missing or unreadable file does.
"""

from __future__ import annotations

import csv
import logging
import random
from pathlib import Path
from typing import Iterable, Sequence

from .card import Card, CardKind, Row
from .exceptions import DataLoadError

logger = logging.getLogger(__name__)

# disjoint id ranges for the two sides
FACTION_ONE_ID_BASE = 0
FACTION_TWO_ID_BASE = 1000

MAX_POWER = 255

_FIELDS = ("faction", "name", "power", "kind", "row")


def parse_power(raw: str) -> int:
    """Small non-negative integer, 0 when it does not parse or is out of range"""
    try:
        value = int(raw.strip())
    except ValueError:
        return 0
    if value < 0 or value > MAX_POWER:
        return 0
    return value


def parse_kind(raw: str) -> CardKind:
    return CardKind.SPY if raw.strip().lower() == "spy" else CardKind.UNIT


def parse_row(raw: str) -> Row:
    value = raw.strip().lower()
    if value == "ranged":
        return Row.RANGED
    if value == "siege":
        return Row.SIEGE
    return Row.MELEE


def _same_faction(a: str, b: str) -> bool:
    return a.strip().casefold() == b.strip().casefold()


def _iter_records(lines: Iterable[str]) -> Iterable[list[str]]:
    reader = csv.reader(lines)
    header_possible = True
    for record in reader:
        if not record or not any(field.strip() for field in record):
            continue
        first = record[0].strip()
        if first.startswith("#"):
            continue
        # only the first data record may be a header
        if header_possible:
            header_possible = False
            if first.lower() == "faction":
                continue
        if len(record) < len(_FIELDS):
            logger.debug(
                "Line %d has %d fields, padding with defaults", reader.line_num, len(record)
            )
            record = record + [""] * (len(_FIELDS) - len(record))
        yield record


def load_deck(source: str | Path, faction_filter: str, starting_id: int) -> list[Card]:
    """
    Load every card of one faction.

    Args:
        source: path of the CSV card pool
        faction_filter: faction to keep (case-insensitive)
        starting_id: id of the first card; the rest follow sequentially

    Returns:
        the faction's cards in file order

    Raises:
        DataLoadError: if the file is missing or cannot be read
    """
    path = Path(source)
    if not path.is_file():
        raise DataLoadError(file_path=str(path), reason="file not found")

    try:
        with open(path, encoding="utf-8", newline="") as f:
            records = list(_iter_records(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DataLoadError(file_path=str(path), reason=str(e)) from e

    cards: list[Card] = []
    next_id = starting_id
    for faction, name, power, kind, row, *_ in records:
        if not _same_faction(faction, faction_filter):
            continue
        cards.append(
            Card(
                id=next_id,
                name=name.strip(),
                power=parse_power(power),
                kind=parse_kind(kind),
                row=parse_row(row),
                faction=faction.strip(),
            )
        )
        next_id += 1

    if not cards:
        logger.warning("No cards for faction %r in %s", faction_filter, path)
    logger.info("Loaded %d cards for %s from %s", len(cards), faction_filter, path)
    return cards


def load_faction_decks(
    source: str | Path, faction_one: str, faction_two: str
) -> tuple[list[Card], list[Card]]:
    """Both decks from one pool, with non-overlapping id ranges"""
    return (
        load_deck(source, faction_one, FACTION_ONE_ID_BASE),
        load_deck(source, faction_two, FACTION_TWO_ID_BASE),
    )


def example_deck(prefix: str, power: int, start_id: int, count: int = 10) -> list[Card]:
    """Fixed deck of identical units, for demos and tests"""
    return [
        Card(id=start_id + i, name=f"{prefix}{start_id + i}", power=power)
        for i in range(count)
    ]


def shuffled(cards: Sequence[Card], seed: int | None = None) -> list[Card]:
    """Shuffled copy of ``cards``; the same seed gives the same order"""
    result = list(cards)
    random.Random(seed).shuffle(result)
    return result
