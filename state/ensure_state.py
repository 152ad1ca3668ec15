"""Session bootstrap for the settings editor."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import streamlit as st

import config
from constants.keys import StateKeys
from models.setting import SettingRecord
from wizard.controller import NotificationLevel, SettingsFormController

logger = logging.getLogger(__name__)

_DEFAULT_STATE_FACTORIES: dict[str, Callable[[], Any]] = {
    StateKeys.LANG: lambda: config.DEFAULT_LANG,
    StateKeys.SUBMITTED_RECORDS: list,
}

_NOTIFY_ICONS: dict[str, str] = {
    "info": "ℹ️",
    "success": "✅",
    "warning": "⚠️",
    "error": "❌",
}


def ensure_state() -> None:
    """Initialize ``st.session_state`` with required keys.

    Existing keys are preserved to respect user interactions or URL params.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()


def toast_notification(message: str, level: NotificationLevel) -> None:
    st.toast(message, icon=_NOTIFY_ICONS.get(level))


def store_submitted_record(record: SettingRecord) -> None:
    """Keep the submitted record for the saved-settings list and drop the draft."""

    records = st.session_state.setdefault(StateKeys.SUBMITTED_RECORDS, [])
    records.append(record)
    logger.info("Stored setting '%s' (%s)", record.key, record.value_type.value)
    reset_state()


def get_form_controller(initial: SettingRecord | Mapping[str, Any] | None = None) -> SettingsFormController:
    """Return the session's form controller, creating it on first access.

    ``initial`` only seeds a newly created controller.
    """

    controller = st.session_state.get(StateKeys.FORM_CONTROLLER)
    if isinstance(controller, SettingsFormController):
        return controller
    controller = SettingsFormController(
        initial=initial,
        submit_sink=store_submitted_record,
        notify=toast_notification,
    )
    st.session_state[StateKeys.FORM_CONTROLLER] = controller
    return controller


def reset_state() -> None:
    """Reset ``st.session_state`` while keeping the language and saved records."""

    preserve = {StateKeys.LANG, StateKeys.SUBMITTED_RECORDS}
    for key in list(st.session_state.keys()):
        if key not in preserve:
            del st.session_state[key]
    ensure_state()


__all__ = [
    "ensure_state",
    "get_form_controller",
    "reset_state",
    "store_submitted_record",
    "toast_notification",
]
