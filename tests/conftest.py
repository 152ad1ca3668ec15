from pathlib import Path
import sys
from dataclasses import dataclass

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from constants.keys import StateKeys  # noqa: E402


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> _SessionDict:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    session_state[StateKeys.LANG] = "en"
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    return session_state


@pytest.fixture(autouse=True)
def _no_debug_dumps(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep payload dumps out of the temp directory unless a test opts in."""

    monkeypatch.delenv("SETTINGS_EDITOR_DEBUG", raising=False)


@pytest.fixture
def session_state() -> dict[str, object]:
    return st.session_state  # type: ignore[return-value]
