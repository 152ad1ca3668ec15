"""Recoverable failure records of the settings form engine.

The form engine never raises these; they travel as return values so every
failure ends up as a visible, correctable UI state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldValidationError:
    """One rule failed for one field."""

    field: str
    label: str
    rule: str
    message: str

    def as_pair(self) -> tuple[str, str]:
        return self.label, self.message


@dataclass(frozen=True)
class MalformedPreviewInput:
    """The preview could not interpret the raw value (e.g. broken JSON)."""

    value_type: str
    message: str


@dataclass(frozen=True)
class NavigationBlocked:
    """A step transition was rejected because an earlier step is invalid."""

    target: int
    failed_step: int | None = None
    out_of_range: bool = False


__all__ = ["FieldValidationError", "MalformedPreviewInput", "NavigationBlocked"]
