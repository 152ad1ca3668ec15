"""Bindings between logical form fields, the draft and widget state.

A binding owns the widget key(s) of one field. Reads come from the draft,
writes go to the draft and the widget state together, and ``pull`` copies a
widget change (already stored by Streamlit under the widget key) back into the
draft. Paired bindings keep a secondary control (toggle or colour wheel) in
sync with the canonical string in both directions.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Literal

import config
from constants.keys import StateKeys, value_widget_key
from core.value_types import ValueTypeTag, WidgetDescriptor, WidgetKind, coerce_tag, is_hex_color

FieldMarkStatus = Literal["valid", "invalid"]


@dataclass(frozen=True)
class FieldMark:
    """Inline validation feedback shown next to a field."""

    status: FieldMarkStatus
    message: str = ""


class FieldBinding:
    """Bind one draft field to its widget key in the host state."""

    def __init__(
        self,
        name: str,
        label: str,
        *,
        widget_key: str,
        draft: MutableMapping[str, str],
        state: MutableMapping[str, object],
    ) -> None:
        self.name = name
        self.label = label
        self.widget_key = widget_key
        self._draft = draft
        self._state = state

    @property
    def widget_keys(self) -> tuple[str, ...]:
        return (self.widget_key,)

    def _to_widget(self, text: str) -> object:
        return text

    def _from_widget(self, value: object) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    def read(self) -> str:
        return self._draft.get(self.name, "")

    def write(self, value: str) -> None:
        text = value or ""
        self._draft[self.name] = text
        self._state[self.widget_key] = self._to_widget(text)

    def pull(self) -> str:
        """Copy the widget's current value into the draft and return it."""

        if self.widget_key not in self._state:
            return self.read()
        text = self._from_widget(self._state[self.widget_key])
        self._draft[self.name] = text
        return text

    def ensure_widget_state(self) -> None:
        """Re-seed the widget key from the draft when Streamlit dropped it."""

        if self.widget_key not in self._state:
            self._state[self.widget_key] = self._to_widget(self.read())

    def detach(self) -> None:
        """Drop the widget state owned by this binding."""

        for key in self.widget_keys:
            self._state.pop(key, None)
        self.clear_mark()

    def _feedback(self) -> dict[str, FieldMark]:
        feedback = self._state.get(StateKeys.FIELD_FEEDBACK)
        if not isinstance(feedback, dict):
            feedback = {}
            self._state[StateKeys.FIELD_FEEDBACK] = feedback
        return feedback

    @property
    def mark(self) -> FieldMark | None:
        return self._feedback().get(self.name)

    def mark_valid(self) -> None:
        self._feedback()[self.name] = FieldMark(status="valid")

    def mark_invalid(self, message: str) -> None:
        self._feedback()[self.name] = FieldMark(status="invalid", message=message)

    def clear_mark(self) -> None:
        self._feedback().pop(self.name, None)


class CheckboxBinding(FieldBinding):
    """Checkbox field stored canonically as ``"true"``/``"false"``."""

    def _to_widget(self, text: str) -> object:
        return text.strip().lower() == "true"

    def _from_widget(self, value: object) -> str:
        return "true" if value is True else "false"


class PairedBinding(FieldBinding):
    """Canonical text value mirrored by a secondary control."""

    def __init__(
        self,
        name: str,
        label: str,
        *,
        widget_key: str,
        secondary_key: str,
        draft: MutableMapping[str, str],
        state: MutableMapping[str, object],
    ) -> None:
        super().__init__(name, label, widget_key=widget_key, draft=draft, state=state)
        self.secondary_key = secondary_key

    @property
    def widget_keys(self) -> tuple[str, ...]:
        return (self.widget_key, self.secondary_key)

    def _to_secondary(self, text: str) -> object | None:
        raise NotImplementedError

    def _from_secondary(self, value: object) -> str:
        raise NotImplementedError

    def _sync_secondary(self, text: str) -> None:
        mirrored = self._to_secondary(text)
        if mirrored is not None:
            self._state[self.secondary_key] = mirrored

    def write(self, value: str) -> None:
        super().write(value)
        self._sync_secondary(self.read())

    def pull(self) -> str:
        text = super().pull()
        self._sync_secondary(text)
        return text

    def ensure_widget_state(self) -> None:
        super().ensure_widget_state()
        if self.secondary_key not in self._state:
            self._sync_secondary(self.read())

    def pull_secondary(self) -> str:
        """Copy the secondary control's value into the canonical value."""

        text = self._from_secondary(self._state.get(self.secondary_key))
        FieldBinding.write(self, text)
        return text


class BooleanBinding(PairedBinding):
    """Boolean value edited through a toggle; canonical ``"true"``/``"false"``."""

    def _to_secondary(self, text: str) -> object | None:
        return text.strip().lower() == "true"

    def _from_secondary(self, value: object) -> str:
        return "true" if value is True else "false"


class ColorBinding(PairedBinding):
    """Hex colour typed as text or picked on a colour wheel.

    Typed text only moves the colour wheel once it is a valid ``#RRGGBB``.
    """

    def _to_secondary(self, text: str) -> object | None:
        if is_hex_color(text):
            return text
        if self.secondary_key not in self._state:
            return config.DEFAULT_COLOR
        return None

    def _from_secondary(self, value: object) -> str:
        if not isinstance(value, str):
            return config.DEFAULT_COLOR
        return value


def build_binding(
    name: str,
    label: str,
    *,
    widget_key: str,
    checkbox: bool,
    draft: MutableMapping[str, str],
    state: MutableMapping[str, object],
) -> FieldBinding:
    """Return the binding for a static (non-value) form field."""

    factory = CheckboxBinding if checkbox else FieldBinding
    return factory(name, label, widget_key=widget_key, draft=draft, state=state)


def build_value_binding(
    name: str,
    label: str,
    *,
    value_type: ValueTypeTag | str | None,
    descriptor: WidgetDescriptor,
    draft: MutableMapping[str, str],
    state: MutableMapping[str, object],
) -> FieldBinding:
    """Return the binding for the value widget described by ``descriptor``.

    Widget keys are namespaced by value type so a rebuilt widget never inherits
    the state of a control of another kind.
    """

    tag = coerce_tag(value_type)
    namespace = tag.value if tag is not None else "fallback"
    widget_key = value_widget_key(namespace)
    if descriptor.kind is WidgetKind.BOOLEAN_TOGGLE:
        return BooleanBinding(
            name,
            label,
            widget_key=widget_key,
            secondary_key=value_widget_key(namespace, "toggle"),
            draft=draft,
            state=state,
        )
    if descriptor.kind is WidgetKind.COLOR_PICKER:
        return ColorBinding(
            name,
            label,
            widget_key=widget_key,
            secondary_key=value_widget_key(namespace, "picker"),
            draft=draft,
            state=state,
        )
    return FieldBinding(name, label, widget_key=widget_key, draft=draft, state=state)


__all__ = [
    "BooleanBinding",
    "CheckboxBinding",
    "ColorBinding",
    "FieldBinding",
    "FieldMark",
    "PairedBinding",
    "build_binding",
    "build_value_binding",
]
