"""Render the value control described by the active widget descriptor."""

from __future__ import annotations

import streamlit as st

from components.form_fields import render_field_feedback
from components.preview import render_value_preview
from constants.keys import FieldNames
from core.value_types import WidgetKind
from utils.i18n import BOOLEAN_TOGGLE_HINT, tr_pair
from wizard.bindings import PairedBinding
from wizard.controller import SettingsFormController

# Streamlit sizes text areas in pixels.
_ROW_HEIGHT_PX = 34
_MIN_TEXT_AREA_HEIGHT_PX = 68


def _text_area_height(rows: int | None) -> int:
    return max(_MIN_TEXT_AREA_HEIGHT_PX, (rows or 3) * _ROW_HEIGHT_PX)


def render_value_widget(controller: SettingsFormController) -> None:
    """Render the value widget, its inline feedback and the live preview.

    Numeric, date and time values stay text inputs so the draft keeps the
    exact string the user typed. Toggle and colour wheel are bound to the
    secondary key of their paired binding.
    """

    descriptor = controller.descriptor
    binding = controller.binding(FieldNames.VALUE)
    binding.ensure_widget_state()
    help_text = tr_pair(descriptor.help_text)
    on_input = {"on_change": controller.handle_input, "args": (FieldNames.VALUE,)}
    on_secondary = {"on_change": controller.handle_secondary_input, "args": (FieldNames.VALUE,)}

    if descriptor.kind is WidgetKind.BOOLEAN_TOGGLE and isinstance(binding, PairedBinding):
        st.toggle(binding.label, key=binding.secondary_key, help=help_text, **on_secondary)
        st.caption(tr_pair(BOOLEAN_TOGGLE_HINT))
    elif descriptor.kind is WidgetKind.COLOR_PICKER and isinstance(binding, PairedBinding):
        picker_col, text_col = st.columns([1, 4])
        picker_col.color_picker(binding.label, key=binding.secondary_key, help=help_text, **on_secondary)
        text_col.text_input(
            binding.label,
            key=binding.widget_key,
            placeholder=descriptor.placeholder,
            label_visibility="hidden",
            **on_input,
        )
    elif descriptor.kind is WidgetKind.MULTI_LINE:
        st.text_area(
            binding.label,
            key=binding.widget_key,
            placeholder=descriptor.placeholder,
            help=help_text,
            height=_text_area_height(descriptor.rows),
            **on_input,
        )
    else:
        st.text_input(
            binding.label,
            key=binding.widget_key,
            placeholder=descriptor.placeholder,
            help=help_text,
            type="password" if descriptor.kind is WidgetKind.PASSWORD else "default",
            **on_input,
        )

    render_field_feedback(binding.mark)
    render_value_preview(controller.preview)


__all__ = ["render_value_widget"]
