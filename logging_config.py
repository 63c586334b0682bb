"""Log file setup for the gwynt CLI.

The match is drawn on the terminal, so records go to a rotating UTF-8 file
and reach stderr only with ``console=True``. Calling ``setup_logging`` again
reconfigures the same named handlers instead of stacking new ones; asking
for a different ``log_file`` swaps the file handler.

Arguments win over the environment: ``GWYNT_LOG_LEVEL`` and
``GWYNT_LOG_FILE`` only fill in arguments left as None.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

FILE_HANDLER = "gwynt_file"
CONSOLE_HANDLER = "gwynt_console"

DEFAULT_LEVEL = "INFO"
DEFAULT_LOG_FILE = Path("logs") / "gwynt.log"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# one match writes a few hundred lines at DEBUG
_MAX_BYTES = 1024 * 1024
_BACKUP_COUNT = 3


def resolve_level(level: str | int | None) -> int:
    """Numeric level for a name such as ``"debug"``; blank or unknown gives INFO"""
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    if not name:
        return logging.INFO
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def _named_handler(root: logging.Logger, name: str) -> logging.Handler | None:
    for handler in root.handlers:
        if handler.get_name() == name:
            return handler
    return None


def _file_handler(root: logging.Logger, log_file: Path) -> logging.Handler:
    handler = _named_handler(root, FILE_HANDLER)
    if handler is not None and handler.baseFilename != os.path.abspath(log_file):
        root.removeHandler(handler)
        handler.close()
        handler = None

    if handler is None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
        )
        handler.set_name(FILE_HANDLER)
        root.addHandler(handler)
    return handler


def setup_logging(
    level: str | int | None = None,
    log_file: str | Path | None = None,
    *,
    console: bool = False,
    console_level: str | int = "WARNING",
) -> logging.Logger:
    """Route log records to the gwynt log file, and to stderr when asked.

    Args:
        level: file level; GWYNT_LOG_LEVEL, then INFO, when None
        log_file: log path; GWYNT_LOG_FILE, then logs/gwynt.log, when None
        console: also log to stderr
        console_level: level of the stderr handler

    Returns:
        the root logger
    """
    if level is None:
        level = os.environ.get("GWYNT_LOG_LEVEL") or DEFAULT_LEVEL
    if log_file is None:
        log_file = os.environ.get("GWYNT_LOG_FILE") or DEFAULT_LOG_FILE

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # handlers filter
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    file_handler = _file_handler(root, Path(log_file))
    file_handler.setLevel(resolve_level(level))
    file_handler.setFormatter(formatter)

    stream_handler = _named_handler(root, CONSOLE_HANDLER)
    if console:
        if stream_handler is None:
            stream_handler = logging.StreamHandler()
            stream_handler.set_name(CONSOLE_HANDLER)
            root.addHandler(stream_handler)
        stream_handler.setLevel(resolve_level(console_level))
        stream_handler.setFormatter(formatter)
    elif stream_handler is not None:
        root.removeHandler(stream_handler)
        stream_handler.close()

    logging.getLogger(__name__).info(
        "Logging to %s at %s",
        file_handler.baseFilename,
        logging.getLevelName(file_handler.level),
    )
    return root
