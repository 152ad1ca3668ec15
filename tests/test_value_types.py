from __future__ import annotations

import pytest

import config
from core.value_types import (
    PreviewKind,
    ValueTypeTag,
    WidgetKind,
    coerce_tag,
    decode_json,
    describe,
    format_preview,
    rules_for,
    seed_value,
    split_list,
)


def test_every_tag_has_a_descriptor() -> None:
    for tag in ValueTypeTag:
        descriptor = describe(tag)
        assert descriptor.kind in WidgetKind
        assert descriptor.help_text[0] and descriptor.help_text[1]


@pytest.mark.parametrize(
    ("tag", "kind", "rules"),
    [
        (ValueTypeTag.STRING, WidgetKind.SINGLE_LINE, ()),
        (ValueTypeTag.TEXT, WidgetKind.MULTI_LINE, ()),
        (ValueTypeTag.INTEGER, WidgetKind.NUMBER, ("integer",)),
        (ValueTypeTag.DECIMAL, WidgetKind.NUMBER, ("decimal",)),
        (ValueTypeTag.BOOLEAN, WidgetKind.BOOLEAN_TOGGLE, ()),
        (ValueTypeTag.EMAIL, WidgetKind.SINGLE_LINE, ("email",)),
        (ValueTypeTag.URL, WidgetKind.SINGLE_LINE, ("url",)),
        (ValueTypeTag.PASSWORD, WidgetKind.PASSWORD, ()),
        (ValueTypeTag.COLOR, WidgetKind.COLOR_PICKER, ("color",)),
        (ValueTypeTag.DATE, WidgetKind.DATE, ()),
        (ValueTypeTag.TIME, WidgetKind.TIME, ()),
        (ValueTypeTag.JSON, WidgetKind.MULTI_LINE, ("json",)),
        (ValueTypeTag.FILE_PATH, WidgetKind.SINGLE_LINE, ()),
        (ValueTypeTag.LIST, WidgetKind.MULTI_LINE, ()),
    ],
)
def test_registry_table(tag: ValueTypeTag, kind: WidgetKind, rules: tuple[str, ...]) -> None:
    descriptor = describe(tag)
    assert descriptor.kind is kind
    assert descriptor.rules == rules
    assert rules_for(tag.value) == rules


def test_numeric_step_constraints() -> None:
    assert describe(ValueTypeTag.INTEGER).constraint("step") == "1"
    assert describe(ValueTypeTag.DECIMAL).constraint("step") == "0.01"
    assert describe(ValueTypeTag.STRING).constraint("step") is None


def test_unknown_tag_falls_back_to_plain_text() -> None:
    descriptor = describe("SOMETHING_ELSE")
    assert descriptor.kind is WidgetKind.SINGLE_LINE
    assert descriptor.rules == ()
    assert coerce_tag("SOMETHING_ELSE") is None
    assert coerce_tag(" integer ") is ValueTypeTag.INTEGER
    assert describe(None).kind is WidgetKind.SINGLE_LINE


def test_secondary_controls() -> None:
    assert describe(ValueTypeTag.BOOLEAN).has_secondary_control
    assert describe(ValueTypeTag.COLOR).has_secondary_control
    assert not describe(ValueTypeTag.STRING).has_secondary_control


def test_password_preview_is_always_masked() -> None:
    fragment = format_preview(ValueTypeTag.PASSWORD, "hunter2")
    assert fragment.kind is PreviewKind.MASKED
    assert fragment.text == config.PASSWORD_MASK
    assert "hunter2" not in fragment.text


def test_boolean_preview_badge() -> None:
    enabled = format_preview(ValueTypeTag.BOOLEAN, "true")
    disabled = format_preview(ValueTypeTag.BOOLEAN, "TRUE")
    assert enabled.kind is PreviewKind.BOOLEAN_BADGE
    assert enabled.active is True
    assert enabled.text == "Enabled"
    assert disabled.active is False
    assert format_preview(ValueTypeTag.BOOLEAN, "true", lang="de").text == "Aktiviert"


def test_color_preview_only_sets_swatch_for_valid_hex() -> None:
    assert format_preview(ValueTypeTag.COLOR, "#A1b2C3").color == "#A1b2C3"
    invalid = format_preview(ValueTypeTag.COLOR, "red")
    assert invalid.kind is PreviewKind.COLOR_SWATCH
    assert invalid.color is None
    assert invalid.text == "red"


def test_link_previews() -> None:
    email = format_preview(ValueTypeTag.EMAIL, "ops@example.com")
    assert email.kind is PreviewKind.LINK
    assert email.href == "mailto:ops@example.com"
    assert format_preview(ValueTypeTag.URL, "https://example.com").href == "https://example.com"
    assert format_preview(ValueTypeTag.URL, "ftp://example.com").href is None


def test_list_preview_chips_skip_blank_items() -> None:
    fragment = format_preview(ValueTypeTag.LIST, "a, ,b,,c ")
    assert fragment.kind is PreviewKind.CHIPS
    assert fragment.items == ("a", "b", "c")
    assert split_list(" , ") == []


def test_json_preview_pretty_prints() -> None:
    fragment = format_preview(ValueTypeTag.JSON, '{"b":1,"a":[1,2]}')
    assert fragment.kind is PreviewKind.JSON_BLOCK
    assert fragment.text == '{\n  "b": 1,\n  "a": [\n    1,\n    2\n  ]\n}'


def test_json_preview_reports_malformed_input() -> None:
    fragment = format_preview(ValueTypeTag.JSON, "{bad")
    assert fragment.kind is PreviewKind.INVALID
    assert fragment.error is not None
    assert fragment.error.value_type == "JSON"
    assert fragment.text.startswith("Invalid JSON: ")


def test_decode_json_rejects_non_finite_constants() -> None:
    payload, message = decode_json("NaN")
    assert payload is None
    assert message


def test_text_preview_keeps_lines() -> None:
    fragment = format_preview(ValueTypeTag.TEXT, "one\ntwo")
    assert fragment.kind is PreviewKind.TEXT_BLOCK
    assert fragment.items == ("one", "two")


def test_plain_preview_for_other_tags() -> None:
    assert format_preview(ValueTypeTag.STRING, "x").kind is PreviewKind.PLAIN
    assert format_preview("UNKNOWN", "x").text == "x"


def test_seed_value() -> None:
    assert seed_value(ValueTypeTag.BOOLEAN, "TRUE") == "true"
    assert seed_value(ValueTypeTag.BOOLEAN, "yes") == "false"
    assert seed_value(ValueTypeTag.COLOR, "") == config.DEFAULT_COLOR
    assert seed_value(ValueTypeTag.COLOR, "#000000") == "#000000"
    assert seed_value(ValueTypeTag.STRING, "abc") == "abc"
