"""Settings wizard package: step registry, bindings, navigation and controller."""

from __future__ import annotations

from .controller import SettingsFormController, initial_form_values
from .state_machine import NavigationResult, SubmitResult, WizardStateMachine
from .step_registry import FIELDS, WIZARD_STEPS, FieldDefinition, StepDefinition
from .summary import SettingsSummary, build_summary

__all__ = [
    "FIELDS",
    "FieldDefinition",
    "NavigationResult",
    "SettingsFormController",
    "SettingsSummary",
    "StepDefinition",
    "SubmitResult",
    "WIZARD_STEPS",
    "WizardStateMachine",
    "build_summary",
    "initial_form_values",
]
