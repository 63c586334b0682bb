"""Tests for gwynt.exceptions: exception classes and helpers."""

import pytest

from gwynt.exceptions import (
    ConfigurationError,
    DataLoadError,
    GameAlreadyFinishedError,
    GameError,
    GameStateError,
    InvalidActionError,
    raise_if_game_finished,
)
from i18n import get_locale, set_locale


@pytest.fixture(autouse=True)
def _english():
    original = get_locale()
    set_locale("en_US")
    yield
    set_locale(original)


# ==================== GameError base ====================

class TestGameError:
    def test_basic(self):
        e = GameError("test")
        assert e.message == "test"
        assert e.details == {}
        assert str(e) == "test"

    def test_with_details(self):
        e = GameError("err", details={"key": "val"})
        assert e.details == {"key": "val"}
        assert "Details:" in str(e)

    def test_is_exception(self):
        with pytest.raises(GameError):
            raise GameError("boom")


# ==================== Action errors ====================

class TestInvalidActionError:
    def test_defaults(self):
        e = InvalidActionError()
        assert e.message == "Invalid action"
        assert e.action_type is None
        assert e.player_id is None
        assert e.details == {}

    def test_with_params(self):
        e = InvalidActionError(action_type="play", card_id=12, player_id=2)
        assert e.details == {"action_type": "play", "card_id": 12, "player_id": 2}
        assert isinstance(e, GameError)

    def test_card_id_zero_kept(self):
        e = InvalidActionError(card_id=0)
        assert e.details == {"card_id": 0}


# ==================== Match state ====================

class TestGameStateErrors:
    def test_state_error(self):
        e = GameStateError(current_state="finished", expected_state="in_progress")
        assert e.details == {"current_state": "finished", "expected_state": "in_progress"}

    def test_already_finished(self):
        e = GameAlreadyFinishedError()
        assert e.message == "The match is already finished"
        assert e.current_state == "finished"
        assert isinstance(e, GameStateError)

    def test_raise_if_game_finished(self):
        raise_if_game_finished(False)
        with pytest.raises(GameAlreadyFinishedError):
            raise_if_game_finished(True)


# ==================== Configuration / data ====================

class TestConfigAndData:
    def test_configuration_error(self):
        e = ConfigurationError(config_key="rules")
        assert e.message == "Invalid configuration"
        assert e.config_key == "rules"

    def test_data_load_error(self):
        e = DataLoadError(file_path="cards.csv", reason="file not found")
        assert e.message == "Could not load card data"
        assert "cards.csv" in str(e)
        assert e.reason == "file not found"

    def test_localized_default(self):
        set_locale("fr_FR")
        e = DataLoadError()
        assert e.message != "Could not load card data"
