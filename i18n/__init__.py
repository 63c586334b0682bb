"""Lightweight i18n, no external dependencies.

Usage::

    from i18n import t, set_locale

    set_locale("fr_FR")
    print(t("ui.round_header", round=2))

    # short alias
    from i18n import _
    print(_("row.siege"))  # → "Siege" (en_US) / "Siège" (fr_FR)

    # domain helpers
    from i18n import row_name, kind_name
    print(row_name("ranged"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_LOCALE_DIR = Path(__file__).parent

DEFAULT_LOCALE = "en_US"

_locale: str = DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """Load a table on demand. A JSON file wins over the bundled .py module."""
    json_path = _LOCALE_DIR / f"{locale}.json"
    if json_path.exists():
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
        # drop __meta__ and other non-translation keys
        return {k: v for k, v in data.items() if not k.startswith("__")}

    if locale == "en_US":
        from .en_US import STRINGS
    elif locale == "fr_FR":
        from .fr_FR import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return STRINGS


def set_locale(locale: str) -> None:
    """Switch the current language."""
    global _locale
    # load now so an invalid locale fails here
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    _locale = locale


def get_locale() -> str:
    return _locale


def get_available_locales() -> list[str]:
    return ["en_US", "fr_FR"]


def t(key: str, **kwargs: object) -> str:
    """Translate ``key``.

    Looks the key up in the current locale and formats it with ``kwargs``.
    Falls back to en_US, then to ``[key]``.

    Args:
        key: translation key, e.g. ``"ui.round_header"``.
        **kwargs: format arguments, e.g. ``round=2``.
    """
    if _locale not in _tables:
        _tables[_locale] = _load_table(_locale)

    template = _tables[_locale].get(key)

    if template is None and _locale != DEFAULT_LOCALE:
        if DEFAULT_LOCALE not in _tables:
            _tables[DEFAULT_LOCALE] = _load_table(DEFAULT_LOCALE)
        template = _tables[DEFAULT_LOCALE].get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using %s", key, _locale, DEFAULT_LOCALE)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


_ = t


def _is_missing(key: str, result: str) -> bool:
    return result == f"[{key}]"


def row_name(value: str) -> str:
    """Display name of a board row (``"melee"``, ``"ranged"``, ``"siege"``)."""
    key = f"row.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value


def kind_name(value: str) -> str:
    """Display name of a card kind (``"unit"``, ``"spy"``)."""
    key = f"kind.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value
