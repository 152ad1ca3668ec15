"""Session state utilities."""

from .ensure_state import ensure_state, get_form_controller, reset_state

__all__ = ["ensure_state", "get_form_controller", "reset_state"]
