"""Central configuration for the settings editor.

Runtime switches are read from the environment (a local ``.env`` file is loaded
first). ``SETTINGS_EDITOR_LANG`` selects the default UI language (``de`` |
``en``), ``SETTINGS_EDITOR_LOG_LEVEL`` the root log level and
``SETTINGS_EDITOR_DEBUG`` enables payload dumps from
:func:`infra.logging.log_event`.
"""

import logging
import os
from typing import Final

from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)


_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")
_SUPPORTED_LANGS: tuple[str, ...] = ("de", "en")

PASSWORD_MASK: Final[str] = "••••••••"
SUMMARY_VALUE_LIMIT: Final[int] = 50
SUMMARY_EMPTY_MARKER: Final[str] = "-"
DEFAULT_COLOR: Final[str] = "#0d6efd"
KEY_MAX_LENGTH: Final[int] = 100
DESCRIPTION_MAX_LENGTH: Final[int] = 500
CHAR_COUNTER_WARNING_RATIO: Final[float] = 0.9
LIST_SEPARATOR: Final[str] = ","


def _is_truthy_flag(value: str | None) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _resolve_lang(value: str | None) -> str:
    """Return a supported language code, falling back to English."""

    candidate = (value or "").strip().lower()
    if candidate in _SUPPORTED_LANGS:
        return candidate
    if candidate:
        logger.warning("Unsupported SETTINGS_EDITOR_LANG '%s'; using 'en'", candidate)
    return "en"


def _resolve_log_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to the ``logging`` constant."""

    level = logging.getLevelName((value or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


DEFAULT_LANG: str = _resolve_lang(os.getenv("SETTINGS_EDITOR_LANG"))
LOG_LEVEL: int = _resolve_log_level(os.getenv("SETTINGS_EDITOR_LOG_LEVEL"))


def debug_dumps_enabled() -> bool:
    """Return ``True`` when payload dumps are switched on for this process."""

    return _is_truthy_flag(os.getenv("SETTINGS_EDITOR_DEBUG"))


__all__ = [
    "CHAR_COUNTER_WARNING_RATIO",
    "DEFAULT_COLOR",
    "DEFAULT_LANG",
    "DESCRIPTION_MAX_LENGTH",
    "KEY_MAX_LENGTH",
    "LIST_SEPARATOR",
    "LOG_LEVEL",
    "PASSWORD_MASK",
    "SUMMARY_EMPTY_MARKER",
    "SUMMARY_VALUE_LIMIT",
    "debug_dumps_enabled",
]
