"""CLI tests: argument handling and full scripted matches"""

import io
import logging

import pytest
from rich.console import Console

import main as gwynt_main
from gwynt.config import GameConfig, reset_config
from gwynt.enums import MatchResult, PlayerId
from gwynt.exceptions import ConfigurationError
from i18n import get_locale, set_locale
from logging_config import FILE_HANDLER
from ui.rich_ui import RichTerminalUI


def _drop_gwynt_handlers():
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() and handler.get_name().startswith("gwynt_"):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    original = get_locale()
    monkeypatch.setenv("GWYNT_LOG_FILE", str(tmp_path / "gwynt.log"))
    for key in ("GWYNT_LOCALE", "GWYNT_SEED", "GWYNT_CARDS_PATH", "GWYNT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    set_locale("en_US")
    reset_config()
    yield
    reset_config()
    _drop_gwynt_handlers()
    set_locale(original)


def _scripted_ui(inputs):
    feed = iter(inputs)
    console = Console(file=io.StringIO(), width=120, no_color=True)
    return RichTerminalUI(console=console, input_func=lambda prompt, default: next(feed, default))


class TestArgs:
    def test_flags_override_base(self):
        args = gwynt_main.build_arg_parser().parse_args(
            ["--cards", "pool.csv", "--seed", "5", "--no-color", "--strict", "--locale", "fr_FR"]
        )
        cfg = gwynt_main.config_from_args(args, base=GameConfig())
        assert cfg.cards_path == "pool.csv"
        assert cfg.seed == 5
        assert cfg.use_color is False
        assert cfg.strict_actions is True
        assert cfg.locale == "fr_FR"
        assert cfg.faction_one == "Northern Realms"

    def test_no_flags_keep_base(self):
        args = gwynt_main.build_arg_parser().parse_args([])
        base = GameConfig(faction_two="Monsters", seed=9)
        assert gwynt_main.config_from_args(args, base=base) == base

    def test_faction_flags(self):
        args = gwynt_main.build_arg_parser().parse_args(
            ["--faction-one", "Monsters", "--faction-two", "Skellige"]
        )
        cfg = gwynt_main.config_from_args(args, base=GameConfig())
        assert (cfg.faction_one, cfg.faction_two) == ("Monsters", "Skellige")

    def test_base_defaults_to_environment(self, monkeypatch):
        monkeypatch.setenv("GWYNT_SEED", "21")
        args = gwynt_main.build_arg_parser().parse_args(["--log-level", "DEBUG"])
        cfg = gwynt_main.config_from_args(args)
        assert cfg.seed == 21
        assert cfg.log_level == "DEBUG"

    def test_log_flags(self, tmp_path):
        args = gwynt_main.build_arg_parser().parse_args(
            ["--log-level", "ERROR", "--log-file", str(tmp_path / "match.log")]
        )
        cfg = gwynt_main.config_from_args(args, base=GameConfig())
        assert cfg.log_level == "ERROR"
        assert cfg.log_file == str(tmp_path / "match.log")


class TestGwyntGame:
    def test_demo_always_first_card(self):
        """Both sides play their first card until their hands run out."""
        app = gwynt_main.GwyntGame(GameConfig(), ui=_scripted_ui(["0"] * 50), demo=True)
        outcome = app.run()

        assert outcome.result is MatchResult.DECIDED
        assert outcome.winner is PlayerId.TWO
        assert outcome.rounds_won == (0, 2)
        assert app.game.round == 2

    def test_demo_always_pass(self):
        # Pass is the last entry: hands hold 7, then 9, then 10 cards
        app = gwynt_main.GwyntGame(GameConfig(), ui=_scripted_ui(["7", "7", "9", "9", "10", "10"]), demo=True)
        outcome = app.run()
        assert outcome.result is MatchResult.TIED
        assert app.game.round == 3

    def test_closed_input_stops_match(self):
        ui = _scripted_ui(["0", "0"])
        app = gwynt_main.GwyntGame(GameConfig(), ui=ui, demo=True)
        outcome = app.run()
        assert outcome.result is MatchResult.IN_PROGRESS
        assert len(app.game.action_log) == 2

        out = ui.console.file.getvalue()
        assert "Match left unfinished in round 1." in out
        assert "End of the match" not in out

    def test_finished_match_shows_game_over(self):
        ui = _scripted_ui(["0"] * 50)
        gwynt_main.GwyntGame(GameConfig(), ui=ui, demo=True).run()
        out = ui.console.file.getvalue()
        assert "End of the match" in out
        assert "left unfinished" not in out

    def test_log_panel_fed_from_events(self):
        ui = _scripted_ui(["7", "7"])
        gwynt_main.GwyntGame(GameConfig(), ui=ui, demo=True).run()
        assert "The match begins." in ui.log_messages
        assert "Player 1 passes." in ui.log_messages

    def test_bundled_pool(self):
        app = gwynt_main.GwyntGame(GameConfig(seed=1), ui=_scripted_ui([]))
        game = app.start()
        assert len(game.player1.hand) == 7
        assert len(game.player2.hand) == 7
        assert all(c.faction == "Northern Realms" for c in game.player1.hand)
        assert all(c.faction == "Nilfgaard" for c in game.player2.hand)

    def test_seed_is_reproducible(self):
        a = gwynt_main.GwyntGame(GameConfig(seed=4), ui=_scripted_ui([])).start()
        b = gwynt_main.GwyntGame(GameConfig(seed=4), ui=_scripted_ui([])).start()
        assert [c.id for c in a.player1.hand] == [c.id for c in b.player1.hand]

    def test_invalid_config(self):
        app = gwynt_main.GwyntGame(GameConfig(faction_one=""), ui=_scripted_ui([]))
        with pytest.raises(ConfigurationError):
            app.start()


def _closed_stdin(prompt=""):
    raise EOFError


class TestMain:
    def test_demo_with_closed_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", _closed_stdin)
        assert gwynt_main.main(["--demo", "--no-color"]) == 0
        assert "Gwynt" in capsys.readouterr().out

    def test_missing_cards_file(self, tmp_path, capsys):
        code = gwynt_main.main(["--cards", str(tmp_path / "missing.csv"), "--no-color"])
        assert code == 1
        assert "Error" in capsys.readouterr().out

    def test_log_level_flag_beats_environment(self, monkeypatch):
        monkeypatch.setenv("GWYNT_LOG_LEVEL", "WARNING")
        monkeypatch.setattr(gwynt_main.GwyntGame, "run", lambda self: None)

        assert gwynt_main.main(["--demo", "--log-level", "DEBUG"]) == 0

        handler = next(h for h in logging.getLogger().handlers if h.get_name() == FILE_HANDLER)
        assert handler.level == logging.DEBUG

    def test_environment_level_without_flag(self, monkeypatch):
        monkeypatch.setenv("GWYNT_LOG_LEVEL", "WARNING")
        monkeypatch.setattr(gwynt_main.GwyntGame, "run", lambda self: None)

        assert gwynt_main.main(["--demo"]) == 0

        handler = next(h for h in logging.getLogger().handlers if h.get_name() == FILE_HANDLER)
        assert handler.level == logging.WARNING

    def test_log_file_flag(self, monkeypatch, tmp_path):
        monkeypatch.setattr(gwynt_main.GwyntGame, "run", lambda self: None)
        log_path = tmp_path / "logs" / "match.log"

        assert gwynt_main.main(["--demo", "--log-file", str(log_path)]) == 0

        assert log_path.exists()

    def test_unknown_locale_falls_back(self, monkeypatch):
        monkeypatch.setattr("builtins.input", _closed_stdin)
        assert gwynt_main.main(["--demo", "--locale", "xx_XX", "--no-color"]) == 0
        assert get_locale() == "en_US"
