# -*- coding: utf-8 -*-
"""
Gwynt - terminal edition
Program entry point

Usage:
    python main.py
    python main.py --cards data/cards.csv --faction-one "Northern Realms" --faction-two Nilfgaard
    python main.py --demo --locale fr_FR

Both players share the terminal; the board is always drawn from the seat
of the player whose turn it is.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from logging_config import setup_logging

from gwynt.card import Card
from gwynt.config import GameConfig, get_config
from gwynt.deck_loader import (
    FACTION_ONE_ID_BASE,
    example_deck,
    load_faction_decks,
    shuffled,
)
from gwynt.engine import GameState
from gwynt.events import EventBus
from gwynt.exceptions import ConfigurationError, GameError
from gwynt.win_checker import MatchOutcome
from i18n import set_locale, t
from ui.rich_ui import RichTerminalUI

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent

# ids of the second demo deck start here, as in the shipped example decks
DEMO_DECK_TWO_ID_BASE = 100


class GwyntGame:
    """
    Gwynt main class
    Loads the decks, builds the match and drives it from terminal input.
    """

    def __init__(self, config: GameConfig, ui: Optional[RichTerminalUI] = None, demo: bool = False):
        self.config = config
        self.ui = ui or RichTerminalUI(use_color=config.use_color)
        self.demo = demo
        self.game: Optional[GameState] = None

    def resolve_cards_path(self) -> Path:
        """CSV path as given, or relative to the project when not found from cwd"""
        path = Path(self.config.cards_path)
        if not path.is_absolute() and not path.exists():
            candidate = PROJECT_ROOT / path
            if candidate.exists():
                return candidate
        return path

    def load_decks(self) -> Tuple[List[Card], List[Card]]:
        if self.demo:
            deck1 = example_deck("Soldier A", 3, FACTION_ONE_ID_BASE)
            deck2 = example_deck("Soldier B", 4, DEMO_DECK_TWO_ID_BASE)
        else:
            deck1, deck2 = load_faction_decks(
                self.resolve_cards_path(), self.config.faction_one, self.config.faction_two
            )

        if self.config.seed is not None:
            deck1 = shuffled(deck1, self.config.seed)
            deck2 = shuffled(deck2, self.config.seed + 1)
        return deck1, deck2

    def start(self) -> GameState:
        """Build the match and hook the UI log onto its event bus"""
        errors = self.config.validate()
        if errors:
            raise ConfigurationError(t("main.config_invalid", errors="; ".join(errors)))

        deck1, deck2 = self.load_decks()
        event_bus = EventBus()
        self.ui.attach(event_bus)
        self.game = GameState.new_with_decks(
            deck1, deck2, rules=self.config.to_rules(), event_bus=event_bus
        )
        return self.game

    def run(self) -> MatchOutcome:
        game = self.start()
        self.ui.show_title()
        self._game_loop(game)

        outcome = game.outcome()
        if outcome.is_over:
            self.ui.show_game_over(outcome)
        else:
            self.ui.show_message(t("main.unfinished", round=game.round))
        return outcome

    def _game_loop(self, game: GameState) -> None:
        while not game.is_finished():
            self.ui.show_game_state(game)

            actions = game.legal_actions()
            if not actions:
                self.ui.show_message(t("ui.no_actions"))
                break

            self.ui.show_actions(game, actions)
            action = self.ui.choose_action(actions)
            if action is None:
                logger.info("Input closed, leaving the match in round %d", game.round)
                break
            game.apply_action(action)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gwynt - terminal card battle")
    parser.add_argument("--cards", dest="cards_path", help="card pool CSV (faction,name,power,kind,row)")
    parser.add_argument("--faction-one", help="faction of player 1")
    parser.add_argument("--faction-two", help="faction of player 2")
    parser.add_argument("--seed", type=int, help="shuffle both decks with this seed")
    parser.add_argument("--demo", action="store_true", help="use the built-in example decks")
    parser.add_argument("--locale", help="UI language (en_US, fr_FR)")
    parser.add_argument("--log-level", help="log file level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", help="log file path (default logs/gwynt.log)")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument(
        "--strict", action="store_true", help="fail on card ids that are not in hand"
    )
    return parser


def config_from_args(args: argparse.Namespace, base: Optional[GameConfig] = None) -> GameConfig:
    """Environment-derived config with command-line flags layered on top"""
    base = base or get_config()
    overrides = {
        key: value
        for key, value in (
            ("cards_path", args.cards_path),
            ("faction_one", args.faction_one),
            ("faction_two", args.faction_two),
            ("seed", args.seed),
            ("locale", args.locale),
            ("log_level", args.log_level),
            ("log_file", args.log_file),
        )
        if value is not None
    }
    if args.no_color:
        overrides["use_color"] = False
    if args.strict:
        overrides["strict_actions"] = True
    return dataclasses.replace(base, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Program entry point"""
    args = build_arg_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(config.log_level, config.log_file)

    try:
        set_locale(config.locale)
    except ValueError:
        logger.warning("Unsupported locale %r, keeping default", config.locale)

    try:
        game = GwyntGame(config, demo=args.demo)
        game.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        print(t("main.interrupted"))
        return 0
    except GameError as e:
        logger.exception("Match aborted")
        print(t("main.error", error=e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
