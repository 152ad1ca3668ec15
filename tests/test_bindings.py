from __future__ import annotations

import config
from constants.keys import StateKeys, value_widget_key
from core.value_types import ValueTypeTag, describe
from wizard.bindings import (
    BooleanBinding,
    CheckboxBinding,
    ColorBinding,
    FieldBinding,
    build_binding,
    build_value_binding,
)


def _value_binding(tag: ValueTypeTag | str, draft: dict[str, str], state: dict[str, object]):
    return build_value_binding(
        "value",
        "Value",
        value_type=tag,
        descriptor=describe(tag),
        draft=draft,
        state=state,
    )


def test_write_updates_draft_and_widget() -> None:
    draft: dict[str, str] = {}
    state: dict[str, object] = {}
    binding = FieldBinding("key", "Key", widget_key="w.key", draft=draft, state=state)

    binding.write("app.name")

    assert binding.read() == "app.name"
    assert draft["key"] == "app.name"
    assert state["w.key"] == "app.name"


def test_pull_copies_widget_change_into_draft() -> None:
    draft = {"key": "old"}
    state: dict[str, object] = {"w.key": "new"}
    binding = FieldBinding("key", "Key", widget_key="w.key", draft=draft, state=state)

    assert binding.pull() == "new"
    assert draft["key"] == "new"


def test_ensure_widget_state_restores_dropped_key() -> None:
    draft = {"key": "kept"}
    state: dict[str, object] = {}
    binding = FieldBinding("key", "Key", widget_key="w.key", draft=draft, state=state)

    binding.ensure_widget_state()

    assert state["w.key"] == "kept"


def test_checkbox_binding_uses_canonical_strings() -> None:
    draft: dict[str, str] = {}
    state: dict[str, object] = {}
    binding = build_binding("isSystem", "System", widget_key="w.sys", checkbox=True, draft=draft, state=state)
    assert isinstance(binding, CheckboxBinding)

    binding.write("true")
    assert state["w.sys"] is True

    state["w.sys"] = False
    assert binding.pull() == "false"


def test_marks_live_in_feedback_state() -> None:
    state: dict[str, object] = {}
    binding = FieldBinding("key", "Key", widget_key="w.key", draft={}, state=state)

    binding.mark_invalid("Key is required")
    assert binding.mark is not None
    assert binding.mark.status == "invalid"
    assert state[StateKeys.FIELD_FEEDBACK]["key"].message == "Key is required"

    binding.mark_valid()
    assert binding.mark.status == "valid"

    binding.clear_mark()
    assert binding.mark is None


def test_boolean_binding_mirrors_toggle() -> None:
    draft: dict[str, str] = {}
    state: dict[str, object] = {}
    binding = _value_binding(ValueTypeTag.BOOLEAN, draft, state)
    assert isinstance(binding, BooleanBinding)

    binding.write("true")
    assert state[binding.secondary_key] is True

    state[binding.secondary_key] = False
    assert binding.pull_secondary() == "false"
    assert draft["value"] == "false"
    assert state[binding.widget_key] == "false"


def test_color_binding_syncs_picker_only_for_valid_hex() -> None:
    draft: dict[str, str] = {}
    state: dict[str, object] = {}
    binding = _value_binding(ValueTypeTag.COLOR, draft, state)
    assert isinstance(binding, ColorBinding)

    binding.write("#112233")
    assert state[binding.secondary_key] == "#112233"

    state[binding.widget_key] = "#11"
    binding.pull()
    assert draft["value"] == "#11"
    assert state[binding.secondary_key] == "#112233"

    state[binding.secondary_key] = "#abcdef"
    binding.pull_secondary()
    assert draft["value"] == "#abcdef"
    assert state[binding.widget_key] == "#abcdef"


def test_color_binding_seeds_default_picker() -> None:
    state: dict[str, object] = {}
    binding = _value_binding(ValueTypeTag.COLOR, {}, state)

    binding.write("not a colour")

    assert state[binding.secondary_key] == config.DEFAULT_COLOR


def test_value_keys_are_namespaced_per_type() -> None:
    state: dict[str, object] = {}
    string_binding = _value_binding(ValueTypeTag.STRING, {}, state)
    json_binding = _value_binding(ValueTypeTag.JSON, {}, state)
    fallback = _value_binding("MYSTERY", {}, state)

    assert string_binding.widget_key == value_widget_key("STRING")
    assert json_binding.widget_key != string_binding.widget_key
    assert fallback.widget_key == value_widget_key("fallback")


def test_detach_drops_widget_state_and_mark() -> None:
    draft: dict[str, str] = {}
    state: dict[str, object] = {}
    binding = _value_binding(ValueTypeTag.BOOLEAN, draft, state)
    binding.write("true")
    binding.mark_invalid("nope")

    binding.detach()

    assert binding.widget_key not in state
    assert binding.secondary_key not in state
    assert binding.mark is None
    assert draft["value"] == "true"
