from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

import config
from core.value_types import ValueTypeTag
from models.setting import SettingCategory, SettingRecord, coerce_category


def _record(**overrides: object) -> SettingRecord:
    payload: dict[str, object] = {
        "key": "app.name",
        "category": "GENERAL",
        "valueType": "STRING",
        "value": "Demo",
        "description": "",
        "sortOrder": "0",
        "isSystem": "false",
        "isEncrypted": "false",
    }
    payload.update(overrides)
    return SettingRecord.model_validate(payload)


def test_model_validates_form_draft() -> None:
    record = _record(sortOrder="7", isSystem="true")
    assert record.key == "app.name"
    assert record.category is SettingCategory.GENERAL
    assert record.value_type is ValueTypeTag.STRING
    assert record.sort_order == 7
    assert record.is_system is True


def test_empty_sort_order_is_zero() -> None:
    assert _record(sortOrder="").sort_order == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"key": ""},
        {"key": "9lives"},
        {"key": "a" * 101},
        {"description": "d" * 501},
        {"category": "NOPE"},
        {"valueType": "INTEGER", "value": "12a"},
        {"valueType": "JSON", "value": "{"},
    ],
)
def test_invalid_records_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        _record(**overrides)


def test_typed_accessors() -> None:
    assert _record(valueType="BOOLEAN", value="true").boolean_value() is True
    assert _record(valueType="INTEGER", value="-5").integer_value() == -5
    assert _record(valueType="DECIMAL", value="19.6").decimal_value() == Decimal("19.6")
    assert _record(valueType="STRING", value="5").integer_value() == 0


def test_display_value() -> None:
    assert _record(valueType="PASSWORD", value="s3cret").display_value() == config.PASSWORD_MASK
    assert _record(valueType="BOOLEAN", value="true").display_value(lang="en") == "✓ Enabled"
    assert _record(valueType="LIST", value="a, b,,c").display_value() == "a, b, c"
    long_json = '{"key": "' + "v" * 60 + '"}'
    assert _record(valueType="JSON", value=long_json).display_value().endswith("...")


def test_to_form_values_round_trips() -> None:
    record = _record(valueType="COLOR", value="#AABBCC", isEncrypted="true")
    values = record.to_form_values()
    assert values["isEncrypted"] == "true"
    assert SettingRecord.model_validate(values) == record


def test_category_metadata() -> None:
    assert coerce_category("email") is SettingCategory.EMAIL
    assert coerce_category("unknown") is None
    assert SettingCategory.APPEARANCE.label == ("Darstellung", "Appearance")
    assert SettingCategory.SECURITY.icon
