"""Three-step settings form rendered from a :class:`SettingsFormController`."""

from __future__ import annotations

import html

import streamlit as st

from components.form_fields import render_checkbox_field, render_select_field, render_text_field
from components.stepper import render_step_summary
from components.value_widget import render_value_widget
from constants.keys import FieldNames
from utils.i18n import tr, tr_pair
from wizard.controller import SettingsFormController
from wizard.summary import SettingsSummary


def _render_identity_step(controller: SettingsFormController) -> None:
    render_text_field(controller, FieldNames.KEY, placeholder="app.feature.enabled")
    render_select_field(controller, FieldNames.CATEGORY)
    render_text_field(controller, FieldNames.DESCRIPTION, multiline=True)


def _render_value_step(controller: SettingsFormController) -> None:
    render_select_field(controller, FieldNames.VALUE_TYPE)
    render_value_widget(controller)
    render_text_field(controller, FieldNames.SORT_ORDER, placeholder="0")


def summary_table_html(summary: SettingsSummary) -> str:
    rows = "".join(
        f"<tr><th style='text-align:left;padding-right:1rem'>{html.escape(label)}</th>"
        f"<td>{html.escape(value)}</td></tr>"
        for label, value in summary.rows()
    )
    return f"<table class='settings-summary'>{rows}</table>"


def _render_review_step(controller: SettingsFormController) -> None:
    st.markdown(summary_table_html(controller.summary), unsafe_allow_html=True)
    render_checkbox_field(controller, FieldNames.IS_SYSTEM)
    render_checkbox_field(controller, FieldNames.IS_ENCRYPTED)


_STEP_RENDERERS = {
    1: _render_identity_step,
    2: _render_value_step,
    3: _render_review_step,
}


def render_validation_errors(errors: list[tuple[str, str]]) -> None:
    """Render the ``label: message`` list collected by the last submission."""

    if not errors:
        return
    lines = "\n".join(f"- **{label}**: {message}" for label, message in errors)
    st.error(f"{tr('Bitte korrigieren:', 'Please correct:')}\n\n{lines}")


def _render_navigation(controller: SettingsFormController) -> None:
    machine = controller.state_machine
    current = controller.current_step
    back_col, reset_col, forward_col = st.columns(3)
    back_col.button(
        tr("Zurück", "Back"),
        on_click=controller.previous_step,
        disabled=current <= 1,
        width="stretch",
    )
    reset_col.button(tr("Zurücksetzen", "Reset"), on_click=controller.reset_form, width="stretch")
    if current < machine.total_steps:
        forward_col.button(
            tr("Weiter", "Next"),
            on_click=controller.next_step,
            type="primary",
            width="stretch",
        )
    else:
        forward_col.button(
            tr("Speichern", "Save"),
            on_click=controller.handle_submit,
            type="primary",
            width="stretch",
        )


def render_settings_form(controller: SettingsFormController) -> None:
    """Render the active step, the navigation buttons and submission errors."""

    machine = controller.state_machine
    render_step_summary(controller)

    step = machine.steps[controller.current_step - 1]
    st.subheader(tr_pair(step.label))
    _STEP_RENDERERS.get(step.number, _render_review_step)(controller)

    render_validation_errors(controller.validation_errors)
    _render_navigation(controller)


__all__ = ["render_settings_form", "render_validation_errors", "summary_table_html"]
