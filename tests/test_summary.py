from __future__ import annotations

import config
from wizard.summary import build_summary, summarize_value


def test_password_is_masked_even_when_empty() -> None:
    assert summarize_value("PASSWORD", "secret") == config.PASSWORD_MASK
    assert summarize_value("PASSWORD", "") == config.PASSWORD_MASK


def test_long_values_are_truncated() -> None:
    value = "x" * 51
    assert summarize_value("STRING", value) == "x" * 50 + "..."
    assert summarize_value("STRING", "x" * 50) == "x" * 50


def test_empty_values_use_marker() -> None:
    summary = build_summary({})
    assert summary.key == "-"
    assert summary.category == "-"
    assert summary.value_type == "-"
    assert summary.value == "-"
    assert summary.description == "-"


def test_summary_uses_display_labels() -> None:
    summary = build_summary(
        {
            "key": "mail.sender",
            "category": "EMAIL",
            "valueType": "EMAIL",
            "value": "ops@example.com",
            "description": "Sender address",
        },
        lang="de",
    )
    assert summary.key == "mail.sender"
    assert summary.category == "E-Mail"
    assert summary.value == "ops@example.com"
    assert summary.rows(lang="en")[0] == ("Key", "mail.sender")
    assert [label for label, _ in summary.rows(lang="de")] == [
        "Schlüssel",
        "Kategorie",
        "Werttyp",
        "Wert",
        "Beschreibung",
    ]
