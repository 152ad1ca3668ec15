from __future__ import annotations

from collections.abc import Mapping

import pytest

from core.errors import FieldValidationError
from wizard.state_machine import WizardStateMachine
from wizard.step_registry import WIZARD_STEPS, StepDefinition

STEPS = (
    StepDefinition(number=1, key="one", label=("Eins", "One"), fields=("a", "b")),
    StepDefinition(number=2, key="two", label=("Zwei", "Two"), fields=("c",)),
    StepDefinition(number=3, key="three", label=("Drei", "Three"), fields=("d",)),
)


class FakeChecker:
    """Field checker failing for every field listed in ``invalid``."""

    def __init__(self, *invalid: str) -> None:
        self.invalid = set(invalid)
        self.calls: list[str] = []

    def __call__(self, name: str) -> FieldValidationError | None:
        self.calls.append(name)
        if name in self.invalid:
            return FieldValidationError(field=name, label=name.upper(), rule="required", message=f"{name} missing")
        return None


def test_starts_on_first_step() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker())
    assert machine.current_step == 1
    assert machine.total_steps == 3
    assert machine.completed_steps() == ()


def test_requires_steps() -> None:
    with pytest.raises(ValueError):
        WizardStateMachine((), FakeChecker())


def test_next_is_blocked_by_invalid_current_step() -> None:
    checker = FakeChecker("b")
    machine = WizardStateMachine(STEPS, checker)

    result = machine.next()

    assert not result.accepted
    assert machine.current_step == 1
    assert result.blocked is not None
    assert result.blocked.failed_step == 1
    assert checker.calls == ["a", "b"]


def test_next_advances_when_valid() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker())
    assert machine.next().accepted
    assert machine.next().accepted
    assert machine.current_step == 3
    assert machine.completed_steps() == (1, 2)


def test_next_past_last_step_is_rejected() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker())
    machine.go_to(3)

    result = machine.next()

    assert not result.accepted
    assert result.blocked is not None and result.blocked.out_of_range
    assert machine.current_step == 3


def test_go_to_validates_all_preceding_steps() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker("a"))

    result = machine.go_to(3)

    assert not result.accepted
    assert result.blocked is not None
    assert result.blocked.failed_step == 1
    assert machine.current_step == 1


def test_go_to_reports_first_invalid_step() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker("c"))
    result = machine.go_to(3)
    assert result.blocked is not None and result.blocked.failed_step == 2
    assert machine.go_to(2).accepted


@pytest.mark.parametrize("target", [0, 4, -1])
def test_go_to_out_of_range(target: int) -> None:
    machine = WizardStateMachine(STEPS, FakeChecker())
    result = machine.go_to(target)
    assert not result.accepted
    assert machine.current_step == 1


def test_go_to_first_step_always_allowed() -> None:
    checker = FakeChecker("a", "b", "c", "d")
    machine = WizardStateMachine(STEPS, checker)
    assert machine.go_to(1).accepted
    assert checker.calls == []


def test_previous_never_validates() -> None:
    checker = FakeChecker()
    machine = WizardStateMachine(STEPS, checker)
    machine.go_to(3)
    checker.invalid.update({"a", "c"})
    checker.calls.clear()

    assert machine.previous().accepted
    assert machine.current_step == 2
    assert checker.calls == []
    assert machine.previous().accepted
    assert not machine.previous().accepted
    assert machine.current_step == 1


def test_submit_collects_errors_in_order_and_skips_sink() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker("d", "a"))
    delivered: list[Mapping[str, str]] = []

    result = machine.submit({"a": ""}, delivered.append)

    assert not result.accepted
    assert [error.field for error in result.errors] == ["a", "d"]
    assert result.error_pairs == [("A", "a missing"), ("D", "d missing")]
    assert machine.error_pairs == result.error_pairs
    assert delivered == []


def test_submit_calls_sink_once_with_copy() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker())
    draft = {"a": "1"}
    delivered: list[Mapping[str, str]] = []

    result = machine.submit(draft, delivered.append)

    assert result.accepted
    assert delivered == [{"a": "1"}]
    assert delivered[0] is not draft
    assert machine.errors == ()


def test_reset_returns_to_first_step_and_clears_errors() -> None:
    machine = WizardStateMachine(STEPS, FakeChecker("d"))
    machine.go_to(3)
    machine.submit({}, lambda payload: None)
    assert machine.errors

    machine.reset()

    assert machine.current_step == 1
    assert machine.errors == ()


def test_default_steps_cover_all_form_fields() -> None:
    fields = [field for step in WIZARD_STEPS for field in step.fields]
    assert fields == [
        "key",
        "category",
        "description",
        "valueType",
        "value",
        "sortOrder",
        "isSystem",
        "isEncrypted",
    ]
