"""Simple i18n helper utilities."""

from __future__ import annotations

from typing import Final, Tuple

import streamlit as st

import config
from constants.keys import StateKeys

LocalizedText = Tuple[str, str]

PREVIEW_INVALID_JSON: Final[LocalizedText] = ("Ungültiges JSON: {message}", "Invalid JSON: {message}")
BOOLEAN_ENABLED: Final[LocalizedText] = ("Aktiviert", "Enabled")
BOOLEAN_DISABLED: Final[LocalizedText] = ("Deaktiviert", "Disabled")
BOOLEAN_TOGGLE_HINT: Final[LocalizedText] = ("Zum Umschalten klicken", "Click to toggle")
FORM_RESET_NOTICE: Final[LocalizedText] = ("Formular zurückgesetzt", "Form reset")
FORM_SAVED_NOTICE: Final[LocalizedText] = ("Einstellung „{key}“ gespeichert", "Setting “{key}” saved")
FORM_INVALID_NOTICE: Final[LocalizedText] = (
    "Bitte {count} Fehler vor dem Speichern beheben.",
    "Please fix {count} error(s) before saving.",
)
FIELD_VALID_FEEDBACK: Final[LocalizedText] = ("Gültig", "Valid")


def tr(de: str, en: str, lang: str | None = None) -> str:
    """Return the string matching the current language.

    Args:
        de: German text.
        en: English text.
        lang: Optional language override (``"de"`` or ``"en"``).

    Returns:
        The localized string for the requested language.
    """
    code = lang or st.session_state.get(StateKeys.LANG, config.DEFAULT_LANG)
    return de if code == "de" else en


def tr_pair(text: LocalizedText, lang: str | None = None, **fields: object) -> str:
    """Translate a ``(de, en)`` pair and format it with ``fields``."""

    resolved = tr(text[0], text[1], lang)
    return resolved.format(**fields) if fields else resolved


__all__ = ["LocalizedText", "tr", "tr_pair"]
