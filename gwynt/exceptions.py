"""Game exceptions
Error types raised by the engine, the deck loader and the configuration layer.
"""

from i18n import t as _t


class GameError(Exception):
    """Base class for every Gwynt error

    Carries a human-readable message plus a ``details`` dict for logging.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Build the error

        Args:
            message: error message
            details: extra context (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== Actions ====================


class InvalidActionError(GameError):
    """Raised in strict mode for an action the current player cannot take"""

    def __init__(
        self,
        message: str | None = None,
        action_type: str | None = None,
        card_id: int | None = None,
        player_id: int | None = None,
    ):
        if message is None:
            message = _t("exc.invalid_action")
        details = {}
        if action_type:
            details["action_type"] = action_type
        if card_id is not None:
            details["card_id"] = card_id
        if player_id is not None:
            details["player_id"] = player_id
        super().__init__(message, details)
        self.action_type = action_type
        self.card_id = card_id
        self.player_id = player_id


# ==================== Match state ====================


class GameStateError(GameError):
    """Operation not allowed in the current match state"""

    def __init__(
        self,
        message: str | None = None,
        current_state: str | None = None,
        expected_state: str | None = None,
    ):
        if message is None:
            message = _t("exc.game_state")
        details = {}
        if current_state:
            details["current_state"] = current_state
        if expected_state:
            details["expected_state"] = expected_state
        super().__init__(message, details)
        self.current_state = current_state
        self.expected_state = expected_state


class GameAlreadyFinishedError(GameStateError):
    def __init__(self, message: str | None = None):
        if message is None:
            message = _t("exc.game_finished")
        super().__init__(message, current_state="finished")


# ==================== Configuration / data ====================


class ConfigurationError(GameError):
    """Invalid rules or CLI configuration"""

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.config_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class DataLoadError(GameError):
    """Deck source missing or unreadable

    Individual malformed rows never raise this; they are defaulted.
    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.data_load_error")
        details = {}
        if file_path:
            details["file_path"] = file_path
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason


def raise_if_game_finished(finished: bool) -> None:
    """Raise GameAlreadyFinishedError when ``finished`` is set

    Raises:
        GameAlreadyFinishedError: if the match is over
    """
    if finished:
        raise GameAlreadyFinishedError()
