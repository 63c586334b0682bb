"""Configuration

Two layers:

- ``MatchRules``: game-design constants handed to the engine. Plain values,
  never read from the environment.
- ``GameConfig``: CLI/application settings with ``GWYNT_*`` environment
  overrides. Only ``main.py`` reads it; it produces the ``MatchRules``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _get_env_int(key: str, default: int | None) -> int | None:
    """Integer from the environment, ``default`` when unset or malformed"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


def _default_bonus_draws() -> Mapping[int, int]:
    return MappingProxyType({1: 2, 2: 1})


@dataclass(frozen=True)
class MatchRules:
    """Rules of one match (immutable)

    Attributes:
        opening_hand_size: cards drawn into each hand at construction
        spy_draw_count: cards the player draws after playing a spy
        round_bonus_draws: cards both players draw after round N ends;
            rounds not listed draw nothing
        rounds_to_win: round wins that end the match early
        max_rounds: last round of the match
        strict_actions: raise InvalidActionError for a card id not in hand
            instead of ignoring it
    """

    opening_hand_size: int = 7
    spy_draw_count: int = 2
    round_bonus_draws: Mapping[int, int] = field(default_factory=_default_bonus_draws)
    rounds_to_win: int = 2
    max_rounds: int = 3
    strict_actions: bool = False

    def bonus_draws_after(self, round_number: int) -> int:
        return self.round_bonus_draws.get(round_number, 0)

    def validate(self) -> list[str]:
        """Return a list of problems, empty when the rules are usable"""
        errors: list[str] = []
        if self.opening_hand_size < 0:
            errors.append(f"opening_hand_size must be >= 0, got {self.opening_hand_size}")
        if self.spy_draw_count < 0:
            errors.append(f"spy_draw_count must be >= 0, got {self.spy_draw_count}")
        if self.max_rounds < 1:
            errors.append(f"max_rounds must be >= 1, got {self.max_rounds}")
        if self.rounds_to_win < 1:
            errors.append(f"rounds_to_win must be >= 1, got {self.rounds_to_win}")
        elif self.rounds_to_win > self.max_rounds:
            errors.append(
                f"rounds_to_win ({self.rounds_to_win}) cannot exceed "
                f"max_rounds ({self.max_rounds})"
            )
        for round_number, count in self.round_bonus_draws.items():
            if count < 0:
                errors.append(f"round_bonus_draws[{round_number}] must be >= 0, got {count}")
        return errors


@dataclass(frozen=True)
class GameConfig:
    """Application configuration (immutable)

    Every field can be overridden from the environment:
    - GWYNT_CARDS_PATH: card pool CSV
    - GWYNT_FACTION_ONE / GWYNT_FACTION_TWO: faction of each side
    - GWYNT_LOCALE: UI language (en_US, fr_FR)
    - GWYNT_LOG_LEVEL: log level for the log file
    - GWYNT_LOG_FILE: log file path
    - GWYNT_COLOR: colored output on/off
    - GWYNT_STRICT: reject unknown card ids with an error
    - GWYNT_SEED: shuffle both decks with this seed
    - GWYNT_OPENING_HAND: opening hand size
    """

    cards_path: str = field(
        default_factory=lambda: os.environ.get("GWYNT_CARDS_PATH", "data/cards.csv")
    )
    faction_one: str = field(
        default_factory=lambda: os.environ.get("GWYNT_FACTION_ONE", "Northern Realms")
    )
    faction_two: str = field(
        default_factory=lambda: os.environ.get("GWYNT_FACTION_TWO", "Nilfgaard")
    )
    locale: str = field(default_factory=lambda: os.environ.get("GWYNT_LOCALE", "en_US"))
    log_level: str = field(
        default_factory=lambda: os.environ.get("GWYNT_LOG_LEVEL", "INFO")
    )
    log_file: str = field(
        default_factory=lambda: os.environ.get("GWYNT_LOG_FILE", "logs/gwynt.log")
    )
    use_color: bool = field(default_factory=lambda: _get_env_bool("GWYNT_COLOR", True))
    strict_actions: bool = field(
        default_factory=lambda: _get_env_bool("GWYNT_STRICT", False)
    )
    seed: int | None = field(default_factory=lambda: _get_env_int("GWYNT_SEED", None))
    opening_hand_size: int = field(
        default_factory=lambda: _get_env_int("GWYNT_OPENING_HAND", 7)
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        return cls()

    def to_rules(self) -> MatchRules:
        """Rules for the engine, derived from this configuration"""
        return MatchRules(
            opening_hand_size=self.opening_hand_size,
            strict_actions=self.strict_actions,
        )

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.cards_path:
            errors.append("cards_path must not be empty")
        if not self.faction_one.strip():
            errors.append("faction_one must not be empty")
        if not self.faction_two.strip():
            errors.append("faction_two must not be empty")
        errors.extend(self.to_rules().validate())
        return errors


_config: GameConfig | None = None


def get_config() -> GameConfig:
    """Lazily built process-wide configuration"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration (tests)"""
    global _config
    _config = None
