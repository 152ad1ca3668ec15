"""Controller orchestrating the settings form.

One :class:`SettingsFormController` exists per form instance. It owns the
draft, the field bindings and the wizard state machine, and reacts to widget
callbacks: a value-type change rebuilds the value binding, any input
re-validates the field and refreshes the preview and the review summary.
Every public operation runs to completion inside the triggering callback.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import Literal

import streamlit as st
from pydantic import ValidationError

from constants.keys import FieldNames
from core import validators
from core.errors import FieldValidationError
from core.value_types import (
    PreviewFragment,
    ValueTypeTag,
    WidgetDescriptor,
    coerce_tag,
    describe,
    format_preview,
    rules_for,
    seed_value,
)
from infra.logging import log_event
from models.setting import SettingCategory, SettingRecord, coerce_category
from utils.i18n import FORM_INVALID_NOTICE, FORM_RESET_NOTICE, FORM_SAVED_NOTICE, tr_pair
from wizard.bindings import FieldBinding, PairedBinding, build_binding, build_value_binding
from wizard.state_machine import NavigationResult, SubmitResult, WizardStateMachine
from wizard.step_registry import FIELDS, WIZARD_STEPS, StepDefinition
from wizard.summary import SettingsSummary, build_summary

logger = logging.getLogger(__name__)

NotificationLevel = Literal["info", "success", "warning", "error"]
NotificationSink = Callable[[str, NotificationLevel], None]
RecordSink = Callable[[SettingRecord], None]

DEFAULT_FORM_VALUES: Mapping[str, str] = {
    FieldNames.KEY: "",
    FieldNames.CATEGORY: SettingCategory.GENERAL.value,
    FieldNames.VALUE_TYPE: ValueTypeTag.STRING.value,
    FieldNames.VALUE: "",
    FieldNames.DESCRIPTION: "",
    FieldNames.SORT_ORDER: "0",
    FieldNames.IS_SYSTEM: "false",
    FieldNames.IS_ENCRYPTED: "false",
}


# Record attribute names that differ from the form field names.
_RECORD_FIELD_NAMES: Mapping[str, str] = {
    "value_type": FieldNames.VALUE_TYPE,
    "raw_value": FieldNames.VALUE,
    "sort_order": FieldNames.SORT_ORDER,
    "is_system": FieldNames.IS_SYSTEM,
    "is_encrypted": FieldNames.IS_ENCRYPTED,
}


def _as_form_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def initial_form_values(initial: SettingRecord | Mapping[str, object] | None) -> dict[str, str]:
    """Return the canonical draft seeded from ``initial`` or the defaults.

    Unknown categories are cleared and unknown value types fall back to
    ``STRING``.
    """

    values = dict(DEFAULT_FORM_VALUES)
    if isinstance(initial, SettingRecord):
        values.update(initial.to_form_values())
        return values
    if not initial:
        return values
    for name in FieldNames.ALL:
        if name in initial:
            values[name] = _as_form_text(initial[name])

    category = coerce_category(values[FieldNames.CATEGORY])
    values[FieldNames.CATEGORY] = category.value if category is not None else ""
    tag = coerce_tag(values[FieldNames.VALUE_TYPE])
    if tag is None:
        logger.warning("Unknown value type '%s'; using STRING", values[FieldNames.VALUE_TYPE])
        tag = ValueTypeTag.STRING
    values[FieldNames.VALUE_TYPE] = tag.value
    return values


class SettingsFormController:
    """Create or edit one :class:`SettingRecord` through the three-step wizard."""

    def __init__(
        self,
        *,
        submit_sink: RecordSink,
        notify: NotificationSink,
        initial: SettingRecord | Mapping[str, object] | None = None,
        state: MutableMapping[str, object] | None = None,
        steps: Sequence[StepDefinition] = WIZARD_STEPS,
        lang: str | None = None,
    ) -> None:
        self._state: MutableMapping[str, object] = state if state is not None else st.session_state
        self._submit_sink = submit_sink
        self._notify = notify
        self._lang = lang
        self._draft: dict[str, str] = {}
        self._bindings: dict[str, FieldBinding] = {}
        self._descriptor: WidgetDescriptor = describe(None)
        self._record_errors: tuple[FieldValidationError, ...] = ()
        self.preview: PreviewFragment | None = None
        self.summary: SettingsSummary = build_summary({}, lang=lang)

        seed = initial_form_values(initial)
        for name, definition in FIELDS.items():
            if name == FieldNames.VALUE:
                continue
            binding = build_binding(
                name,
                tr_pair(definition.label, lang),
                widget_key=definition.widget_key,
                checkbox=definition.checkbox,
                draft=self._draft,
                state=self._state,
            )
            binding.write(seed[name])
            self._bindings[name] = binding
        self._draft[FieldNames.VALUE] = seed[FieldNames.VALUE]
        self._machine = WizardStateMachine(steps, self.check_field)
        self.update_value_input()
        self._original: dict[str, str] = dict(self._draft)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def draft(self) -> Mapping[str, str]:
        return dict(self._draft)

    @property
    def original_values(self) -> Mapping[str, str]:
        return dict(self._original)

    @property
    def state_machine(self) -> WizardStateMachine:
        return self._machine

    @property
    def current_step(self) -> int:
        return self._machine.current_step

    @property
    def descriptor(self) -> WidgetDescriptor:
        return self._descriptor

    @property
    def value_type(self) -> ValueTypeTag | None:
        return coerce_tag(self._draft.get(FieldNames.VALUE_TYPE))

    @property
    def validation_errors(self) -> list[tuple[str, str]]:
        errors = self._machine.errors or self._record_errors
        return [error.as_pair() for error in errors]

    def binding(self, name: str) -> FieldBinding:
        return self._bindings[name]

    def rules_for_field(self, name: str) -> tuple[str, ...]:
        if name == FieldNames.VALUE:
            return rules_for(self._draft.get(FieldNames.VALUE_TYPE))
        definition = FIELDS.get(name)
        return definition.rules if definition is not None else ()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def check_field(self, name: str) -> FieldValidationError | None:
        """Validate ``name`` against its rules and update its inline mark."""

        binding = self._bindings.get(name)
        if binding is None:
            return None
        rules = self.rules_for_field(name)
        if not rules:
            return None
        result = validators.check(rules, binding.read(), label=binding.label, lang=self._lang)
        if result.passed:
            binding.mark_valid()
            return None
        binding.mark_invalid(result.message)
        return FieldValidationError(
            field=name,
            label=binding.label,
            rule=result.rule_name,
            message=result.message,
        )

    # ------------------------------------------------------------------
    # Widget callbacks
    # ------------------------------------------------------------------
    def handle_input(self, name: str) -> None:
        """React to a change of the widget bound to ``name``."""

        binding = self._bindings.get(name)
        if binding is None:
            logger.debug("Ignoring input for unbound field '%s'", name)
            return
        binding.pull()
        if name == FieldNames.VALUE_TYPE:
            self.update_value_input()
            return
        self.check_field(name)
        self._refresh()

    def handle_secondary_input(self, name: str = FieldNames.VALUE) -> None:
        """React to a change of a paired control (toggle or colour wheel)."""

        binding = self._bindings.get(name)
        if not isinstance(binding, PairedBinding):
            self.handle_input(name)
            return
        binding.pull_secondary()
        self.check_field(name)
        self._refresh()

    def handle_type_change(self) -> None:
        """React to a new value type by rebuilding the value widget."""

        self.handle_input(FieldNames.VALUE_TYPE)

    def update_value_input(self) -> WidgetDescriptor:
        """Rebuild the value binding for the current value type.

        The new widget is seeded with the current raw value before preview and
        summary are refreshed.
        """

        started = time.perf_counter()
        value_type = self._draft.get(FieldNames.VALUE_TYPE)
        descriptor = describe(value_type)
        current = self._draft.get(FieldNames.VALUE, "")

        previous = self._bindings.get(FieldNames.VALUE)
        if previous is not None:
            previous.detach()
        binding = build_value_binding(
            FieldNames.VALUE,
            tr_pair(FIELDS[FieldNames.VALUE].label, self._lang),
            value_type=value_type,
            descriptor=descriptor,
            draft=self._draft,
            state=self._state,
        )
        binding.write(seed_value(value_type, current))
        self._bindings[FieldNames.VALUE] = binding
        self._descriptor = descriptor
        self._refresh()
        log_event(
            "debug",
            event="value_widget.rebuilt",
            field=FieldNames.VALUE,
            value_type=value_type,
            duration=time.perf_counter() - started,
        )
        return descriptor

    def relabel(self) -> None:
        """Re-translate field labels and derived views after a language switch."""

        for name, binding in self._bindings.items():
            binding.label = tr_pair(FIELDS[name].label, self._lang)
        self._refresh()

    def _refresh(self) -> None:
        raw_value = self._draft.get(FieldNames.VALUE, "")
        value_type = self._draft.get(FieldNames.VALUE_TYPE)
        self.preview = format_preview(value_type, raw_value, lang=self._lang) if raw_value else None
        self.summary = build_summary(self._draft, lang=self._lang)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _after_navigation(self, result: NavigationResult) -> bool:
        if result.accepted:
            if result.step == self._machine.total_steps:
                self._refresh()
            log_event("info", event="navigation.step", step=result.step)
        else:
            log_event("info", event="navigation.blocked", step=result.step)
        return result.accepted

    def next_step(self) -> bool:
        return self._after_navigation(self._machine.next())

    def previous_step(self) -> bool:
        return self._after_navigation(self._machine.previous())

    def go_to_step(self, number: int) -> bool:
        return self._after_navigation(self._machine.go_to(number))

    # ------------------------------------------------------------------
    # Reset & submit
    # ------------------------------------------------------------------
    def reset_form(self) -> None:
        """Restore the values captured at load time and return to step 1."""

        for name, binding in self._bindings.items():
            binding.write(self._original.get(name, ""))
        self.update_value_input()
        for binding in self._bindings.values():
            binding.clear_mark()
        self._machine.reset()
        self._record_errors = ()
        self._notify(tr_pair(FORM_RESET_NOTICE, self._lang), "info")
        log_event("info", event="form.reset", step=self._machine.current_step)

    def handle_submit(self) -> SubmitResult:
        """Validate every step and pass the record to the submit sink."""

        self._record_errors = ()
        result = self._machine.submit(self._draft, self._deliver)
        if not result.accepted:
            self._reject(result.errors)
            return result
        if self._record_errors:
            self._reject(self._record_errors)
            return SubmitResult(accepted=False, errors=self._record_errors)
        return result

    def _reject(self, errors: Sequence[FieldValidationError]) -> None:
        self._notify(tr_pair(FORM_INVALID_NOTICE, self._lang, count=len(errors)), "error")
        log_event(
            "warning",
            event="form.submit_rejected",
            step=self._machine.current_step,
            field=",".join(error.field for error in errors),
        )

    def _deliver(self, payload: Mapping[str, str]) -> None:
        try:
            record = SettingRecord.model_validate(payload)
        except ValidationError as error:
            logger.warning("Settings draft failed record validation: %s", error)
            self._record_errors = tuple(self._record_errors_from(error))
            return
        self._submit_sink(record)
        self._notify(tr_pair(FORM_SAVED_NOTICE, self._lang, key=record.key), "success")
        log_event(
            "info",
            event="form.submitted",
            value_type=record.value_type.value,
            payload=payload,
        )

    def _record_errors_from(self, error: ValidationError) -> list[FieldValidationError]:
        errors: list[FieldValidationError] = []
        for detail in error.errors():
            location = detail.get("loc") or (FieldNames.VALUE,)
            field = _RECORD_FIELD_NAMES.get(str(location[0]), str(location[0]))
            binding = self._bindings.get(field)
            label = binding.label if binding is not None else field
            message = str(detail.get("msg", ""))
            if binding is not None:
                binding.mark_invalid(message)
            errors.append(
                FieldValidationError(field=field, label=label, rule=str(detail.get("type", "")), message=message)
            )
        return errors


__all__ = [
    "DEFAULT_FORM_VALUES",
    "NotificationLevel",
    "NotificationSink",
    "RecordSink",
    "SettingsFormController",
    "initial_form_values",
]
