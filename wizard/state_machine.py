"""Step-gated navigation and submission for the settings wizard."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from core.errors import FieldValidationError, NavigationBlocked
from wizard.step_registry import StepDefinition

logger = logging.getLogger(__name__)

FieldChecker = Callable[[str], FieldValidationError | None]
SubmitSink = Callable[[Mapping[str, str]], None]


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a step transition; ``step`` is the step active afterwards."""

    accepted: bool
    step: int
    blocked: NavigationBlocked | None = None


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of a submission attempt."""

    accepted: bool
    errors: tuple[FieldValidationError, ...] = ()

    @property
    def error_pairs(self) -> list[tuple[str, str]]:
        return [error.as_pair() for error in self.errors]


class WizardStateMachine:
    """Track the active step and gate transitions on step validation.

    ``check_field`` validates one field by name and returns the first failing
    rule as a :class:`FieldValidationError` (or ``None``). Every field of a step
    is checked so each one receives its inline feedback.
    """

    def __init__(self, steps: Sequence[StepDefinition], check_field: FieldChecker) -> None:
        if not steps:
            raise ValueError("WizardStateMachine requires at least one step")
        self._steps: tuple[StepDefinition, ...] = tuple(sorted(steps, key=lambda step: step.number))
        self._check_field = check_field
        self._current = 1
        self._errors: tuple[FieldValidationError, ...] = ()

    @property
    def steps(self) -> tuple[StepDefinition, ...]:
        return self._steps

    @property
    def current_step(self) -> int:
        return self._current

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def errors(self) -> tuple[FieldValidationError, ...]:
        return self._errors

    @property
    def error_pairs(self) -> list[tuple[str, str]]:
        return [error.as_pair() for error in self._errors]

    def completed_steps(self) -> tuple[int, ...]:
        return tuple(range(1, self._current))

    def step_errors(self, number: int) -> list[FieldValidationError]:
        """Check every field of step ``number`` and return the failures in order."""

        if not 1 <= number <= self.total_steps:
            return []
        step = self._steps[number - 1]
        errors: list[FieldValidationError] = []
        for field in step.fields:
            error = self._check_field(field)
            if error is not None:
                errors.append(error)
        return errors

    def validate_step(self, number: int) -> bool:
        return not self.step_errors(number)

    def _first_invalid_step(self, last: int) -> int | None:
        for number in range(1, last + 1):
            if not self.validate_step(number):
                return number
        return None

    def _blocked(self, target: int, *, failed_step: int | None = None) -> NavigationResult:
        blocked = NavigationBlocked(
            target=target,
            failed_step=failed_step,
            out_of_range=failed_step is None,
        )
        logger.debug("Navigation to step %s blocked (failed step: %s)", target, failed_step)
        return NavigationResult(accepted=False, step=self._current, blocked=blocked)

    def go_to(self, target: int) -> NavigationResult:
        """Move to ``target`` when steps ``1..target-1`` all validate."""

        if not 1 <= target <= self.total_steps:
            return self._blocked(target)
        failed = self._first_invalid_step(target - 1)
        if failed is not None:
            return self._blocked(target, failed_step=failed)
        self._current = target
        return NavigationResult(accepted=True, step=target)

    def next(self) -> NavigationResult:
        target = self._current + 1
        if target > self.total_steps:
            return self._blocked(target)
        if not self.validate_step(self._current):
            return self._blocked(target, failed_step=self._current)
        return self.go_to(target)

    def previous(self) -> NavigationResult:
        """Move one step back; never requires validation."""

        target = self._current - 1
        if target < 1:
            return self._blocked(target)
        self._current = target
        return NavigationResult(accepted=True, step=target)

    def submit(self, draft: Mapping[str, str], sink: SubmitSink) -> SubmitResult:
        """Validate all steps and hand a copy of ``draft`` to ``sink`` once.

        On failure the ordered list of field errors is kept for display and
        ``sink`` is not called.
        """

        errors: list[FieldValidationError] = []
        for step in self._steps:
            errors.extend(self.step_errors(step.number))
        if errors:
            self._errors = tuple(errors)
            return SubmitResult(accepted=False, errors=self._errors)
        self._errors = ()
        sink(dict(draft))
        return SubmitResult(accepted=True)

    def reset(self) -> None:
        self._current = 1
        self._errors = ()


__all__ = ["FieldChecker", "NavigationResult", "SubmitResult", "SubmitSink", "WizardStateMachine"]
