"""Review-step summary derived from the settings draft."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import config
from constants.keys import FieldNames
from core.value_types import ValueTypeTag, coerce_tag
from models.setting import coerce_category
from utils.i18n import tr_pair
from wizard.step_registry import FIELDS


def summarize_value(value_type: str | None, raw_value: str) -> str:
    """Return the review rendering of ``raw_value``.

    Password values are always replaced by the mask, other values are cut to
    ``SUMMARY_VALUE_LIMIT`` characters.
    """

    if coerce_tag(value_type) is ValueTypeTag.PASSWORD:
        return config.PASSWORD_MASK
    if not raw_value:
        return config.SUMMARY_EMPTY_MARKER
    if len(raw_value) > config.SUMMARY_VALUE_LIMIT:
        return raw_value[: config.SUMMARY_VALUE_LIMIT] + "..."
    return raw_value


@dataclass(frozen=True)
class SettingsSummary:
    """Read-model shown on the review step."""

    key: str
    category: str
    value_type: str
    value: str
    description: str

    def rows(self, lang: str | None = None) -> list[tuple[str, str]]:
        """Return ``(label, value)`` pairs in display order."""

        entries = (
            (FieldNames.KEY, self.key),
            (FieldNames.CATEGORY, self.category),
            (FieldNames.VALUE_TYPE, self.value_type),
            (FieldNames.VALUE, self.value),
            (FieldNames.DESCRIPTION, self.description),
        )
        return [(tr_pair(FIELDS[name].label, lang), value) for name, value in entries]


def build_summary(draft: Mapping[str, str], *, lang: str | None = None) -> SettingsSummary:
    """Derive the review summary from the current draft."""

    empty = config.SUMMARY_EMPTY_MARKER
    category = coerce_category(draft.get(FieldNames.CATEGORY))
    value_type_raw = draft.get(FieldNames.VALUE_TYPE, "")
    tag = coerce_tag(value_type_raw)
    if tag is not None:
        type_label = tr_pair(tag.label, lang)
    else:
        type_label = value_type_raw or empty
    return SettingsSummary(
        key=draft.get(FieldNames.KEY) or empty,
        category=tr_pair(category.label, lang) if category is not None else empty,
        value_type=type_label,
        value=summarize_value(value_type_raw, draft.get(FieldNames.VALUE, "")),
        description=draft.get(FieldNames.DESCRIPTION) or empty,
    )


__all__ = ["SettingsSummary", "build_summary", "summarize_value"]
