# app.py: Settings Editor entrypoint
from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import Any

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config  # noqa: E402
from components.settings_form import render_settings_form  # noqa: E402
from constants.keys import FieldNames, StateKeys, UIKeys  # noqa: E402
from state import ensure_state, get_form_controller, reset_state  # noqa: E402
from utils.i18n import tr, tr_pair  # noqa: E402

APP_VERSION = "1.0.0"

logging.basicConfig(level=config.LOG_LEVEL)

st.set_page_config(
    page_title="Settings Editor",
    page_icon="⚙️",
    layout="centered",
)

ensure_state()


def _initial_values_from_query() -> dict[str, Any]:
    """Seed an edit session from URL parameters such as ``?key=app.name``."""

    params = st.query_params
    return {name: params[name] for name in FieldNames.ALL if name in params}


def _on_lang_change() -> None:
    st.session_state[StateKeys.LANG] = st.session_state[UIKeys.LANG_SELECT]
    get_form_controller().relabel()


def _render_sidebar() -> None:
    with st.sidebar:
        st.selectbox(
            tr("Sprache", "Language"),
            ("de", "en"),
            index=0 if st.session_state[StateKeys.LANG] == "de" else 1,
            key=UIKeys.LANG_SELECT,
            on_change=_on_lang_change,
        )
        st.button(tr("Neue Einstellung", "New setting"), on_click=reset_state)
        st.caption(f"v{APP_VERSION}")


def _render_saved_records() -> None:
    records = st.session_state.get(StateKeys.SUBMITTED_RECORDS) or []
    if not records:
        return
    st.divider()
    st.subheader(tr("Gespeicherte Einstellungen", "Saved settings"))
    for record in records:
        st.markdown(
            f"{record.category.icon} `{record.key}` · {tr_pair(record.value_type.label)} · "
            f"{record.display_value() or config.SUMMARY_EMPTY_MARKER}"
        )


_render_sidebar()
st.title(tr("Einstellung bearbeiten", "Edit setting"))
controller = get_form_controller(_initial_values_from_query())
render_settings_form(controller)
_render_saved_records()
