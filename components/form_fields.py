"""Reusable form field helpers for Streamlit widgets."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import streamlit as st

import config
from constants.keys import FieldNames
from core.value_types import ValueTypeTag
from models.setting import SettingCategory, coerce_category
from utils.i18n import FIELD_VALID_FEEDBACK, tr, tr_pair
from wizard.bindings import FieldMark
from wizard.controller import SettingsFormController
from wizard.step_registry import FIELDS

WidgetFactory = Callable[..., Any]

__all__ = [
    "format_char_counter",
    "render_checkbox_field",
    "render_field_feedback",
    "render_select_field",
    "render_text_field",
]

_EMPTY_OPTION = ""


def format_char_counter(length: int, max_length: int) -> tuple[str, bool]:
    """Return the ``"n / max"`` counter text and whether it should warn.

    The counter warns once more than ``CHAR_COUNTER_WARNING_RATIO`` of the limit
    is used.
    """

    warn = max_length > 0 and length > max_length * config.CHAR_COUNTER_WARNING_RATIO
    return f"{length} / {max_length}", warn


def render_field_feedback(mark: FieldMark | None) -> None:
    """Render the inline valid/invalid feedback of a field."""

    if mark is None:
        return
    if mark.status == "invalid":
        st.caption(f":red[{mark.message}]")
    else:
        st.caption(f":green[✓ {tr_pair(FIELD_VALID_FEEDBACK)}]")


def _render_char_counter(length: int, max_length: int | None) -> None:
    if not max_length:
        return
    text, warn = format_char_counter(length, max_length)
    st.caption(f":orange[{text}]" if warn else text)


def render_text_field(
    controller: SettingsFormController,
    name: str,
    *,
    multiline: bool = False,
    placeholder: str | None = None,
    widget_factory: WidgetFactory | None = None,
    **kwargs: Any,
) -> str:
    """Render a text input bound to ``name`` with feedback and counter."""

    if "on_change" in kwargs:
        raise ValueError("render_text_field manages on_change internally")
    if "value" in kwargs:
        raise ValueError("render_text_field derives value from the draft")

    binding = controller.binding(name)
    binding.ensure_widget_state()
    definition = FIELDS[name]
    factory = widget_factory or (st.text_area if multiline else st.text_input)
    if placeholder is not None:
        kwargs.setdefault("placeholder", placeholder)
    if definition.max_length and not multiline:
        kwargs.setdefault("max_chars", definition.max_length)

    value = factory(
        binding.label,
        key=binding.widget_key,
        on_change=controller.handle_input,
        args=(name,),
        **kwargs,
    )
    render_field_feedback(binding.mark)
    _render_char_counter(len(binding.read()), definition.max_length)
    return value


def _format_category(option: str) -> str:
    category = coerce_category(option)
    if category is None:
        return tr("Bitte wählen …", "Please choose …")
    return f"{category.icon} {tr_pair(category.label)}"


def _format_value_type(option: str) -> str:
    return tr_pair(ValueTypeTag(option).label)


def render_select_field(controller: SettingsFormController, name: str, **kwargs: Any) -> str:
    """Render the category or value-type select bound to ``name``."""

    if name == FieldNames.CATEGORY:
        options = [_EMPTY_OPTION, *(category.value for category in SettingCategory)]
        format_func = _format_category
        on_change, args = controller.handle_input, (name,)
    else:
        options = [tag.value for tag in ValueTypeTag]
        format_func = _format_value_type
        on_change, args = controller.handle_type_change, ()

    binding = controller.binding(name)
    binding.ensure_widget_state()
    value = st.selectbox(
        binding.label,
        options,
        key=binding.widget_key,
        format_func=format_func,
        on_change=on_change,
        args=args,
        **kwargs,
    )
    render_field_feedback(binding.mark)
    return value


def render_checkbox_field(controller: SettingsFormController, name: str, **kwargs: Any) -> bool:
    binding = controller.binding(name)
    binding.ensure_widget_state()
    return st.checkbox(
        binding.label,
        key=binding.widget_key,
        on_change=controller.handle_input,
        args=(name,),
        **kwargs,
    )
