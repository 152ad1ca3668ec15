"""Registry for settings wizard steps, their fields and canonical order."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

import config
from constants.keys import FieldNames, UIKeys
from utils.i18n import LocalizedText


@dataclass(frozen=True)
class FieldDefinition:
    """Static metadata for one form field."""

    name: str
    label: LocalizedText
    widget_key: str
    rules: tuple[str, ...] = ()
    checkbox: bool = False
    max_length: int | None = None


@dataclass(frozen=True)
class StepDefinition:
    """Metadata for an individual wizard step. Steps are numbered from 1."""

    number: int
    key: str
    label: LocalizedText
    fields: tuple[str, ...]


FIELDS: Final[Mapping[str, FieldDefinition]] = MappingProxyType(
    {
        FieldNames.KEY: FieldDefinition(
            name=FieldNames.KEY,
            label=("Schlüssel", "Key"),
            widget_key=UIKeys.KEY_INPUT,
            rules=("required", "key-format", f"max-length:{config.KEY_MAX_LENGTH}"),
            max_length=config.KEY_MAX_LENGTH,
        ),
        FieldNames.CATEGORY: FieldDefinition(
            name=FieldNames.CATEGORY,
            label=("Kategorie", "Category"),
            widget_key=UIKeys.CATEGORY_SELECT,
            rules=("required",),
        ),
        FieldNames.DESCRIPTION: FieldDefinition(
            name=FieldNames.DESCRIPTION,
            label=("Beschreibung", "Description"),
            widget_key=UIKeys.DESCRIPTION_INPUT,
            rules=(f"max-length:{config.DESCRIPTION_MAX_LENGTH}",),
            max_length=config.DESCRIPTION_MAX_LENGTH,
        ),
        FieldNames.VALUE_TYPE: FieldDefinition(
            name=FieldNames.VALUE_TYPE,
            label=("Werttyp", "Value type"),
            widget_key=UIKeys.VALUE_TYPE_SELECT,
            rules=("required",),
        ),
        # Rules and widget key of the value follow the selected value type.
        FieldNames.VALUE: FieldDefinition(
            name=FieldNames.VALUE,
            label=("Wert", "Value"),
            widget_key=UIKeys.VALUE_PREFIX,
        ),
        FieldNames.SORT_ORDER: FieldDefinition(
            name=FieldNames.SORT_ORDER,
            label=("Sortierung", "Sort order"),
            widget_key=UIKeys.SORT_ORDER_INPUT,
            rules=("integer",),
        ),
        FieldNames.IS_SYSTEM: FieldDefinition(
            name=FieldNames.IS_SYSTEM,
            label=("Systemeinstellung", "System setting"),
            widget_key=UIKeys.IS_SYSTEM_CHECKBOX,
            checkbox=True,
        ),
        FieldNames.IS_ENCRYPTED: FieldDefinition(
            name=FieldNames.IS_ENCRYPTED,
            label=("Verschlüsselt", "Encrypted"),
            widget_key=UIKeys.IS_ENCRYPTED_CHECKBOX,
            checkbox=True,
        ),
    }
)


WIZARD_STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition(
        number=1,
        key="identity",
        label=("Identität & Kategorie", "Identity & category"),
        fields=(FieldNames.KEY, FieldNames.CATEGORY, FieldNames.DESCRIPTION),
    ),
    StepDefinition(
        number=2,
        key="value",
        label=("Wert", "Value"),
        fields=(FieldNames.VALUE_TYPE, FieldNames.VALUE, FieldNames.SORT_ORDER),
    ),
    StepDefinition(
        number=3,
        key="review",
        label=("Überprüfung", "Review"),
        fields=(FieldNames.IS_SYSTEM, FieldNames.IS_ENCRYPTED),
    ),
)


__all__ = [
    "FIELDS",
    "FieldDefinition",
    "StepDefinition",
    "WIZARD_STEPS",
]
