"""Step indicator shown above the settings form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

import streamlit as st

from utils.i18n import LocalizedText, tr_pair
from wizard.controller import SettingsFormController

StepStatus = Literal["done", "current", "pending"]

STEP_POSITION: Final[LocalizedText] = ("Schritt {number} von {total}", "Step {number} of {total}")

_SEPARATOR = "  ›  "


@dataclass(frozen=True)
class StepBadge:
    """Navigation state of one step as shown in the indicator."""

    number: int
    label: str
    status: StepStatus
    invalid_fields: int = 0

    def markdown(self) -> str:
        text = f"{self.number} · {self.label}"
        if self.status == "done":
            text = f":green[✓ {text}]"
        elif self.status == "current":
            text = f"**:blue[{text}]**"
        else:
            text = f":gray[{text}]"
        if self.invalid_fields:
            text += f" :red[({self.invalid_fields})]"
        return text


def build_step_badges(controller: SettingsFormController) -> list[StepBadge]:
    """Describe every step relative to the controller's current step.

    Fields currently marked invalid are counted against the step that renders
    them, so a visited step with errors stays visible in the indicator.
    """

    current = controller.current_step
    badges: list[StepBadge] = []
    for step in controller.state_machine.steps:
        if step.number < current:
            status: StepStatus = "done"
        elif step.number == current:
            status = "current"
        else:
            status = "pending"
        invalid = 0
        for name in step.fields:
            mark = controller.binding(name).mark
            if mark is not None and mark.status == "invalid":
                invalid += 1
        badges.append(StepBadge(step.number, tr_pair(step.label), status, invalid))
    return badges


def render_step_summary(controller: SettingsFormController) -> None:
    badges = build_step_badges(controller)
    if not badges:
        return
    st.markdown(_SEPARATOR.join(badge.markdown() for badge in badges))
    st.caption(tr_pair(STEP_POSITION, number=controller.current_step, total=len(badges)))


__all__ = ["StepBadge", "build_step_badges", "render_step_summary"]
