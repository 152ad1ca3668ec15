"""Pydantic models for configuration settings."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Final, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

import config
from core import validators
from core.value_types import ValueTypeTag, rules_for, split_list
from utils.i18n import BOOLEAN_DISABLED, BOOLEAN_ENABLED, LocalizedText, tr_pair

KEY_REGEX: Final[str] = r"^[A-Za-z][A-Za-z0-9._-]*$"

_JSON_DISPLAY_LIMIT: Final[int] = 50
_TEXT_DISPLAY_LIMIT: Final[int] = 100


class SettingCategory(StrEnum):
    """Functional area a setting belongs to."""

    GENERAL = "GENERAL"
    COMPANY = "COMPANY"
    EMAIL = "EMAIL"
    INVOICE = "INVOICE"
    TAX = "TAX"
    SECURITY = "SECURITY"
    NOTIFICATION = "NOTIFICATION"
    SYSTEM = "SYSTEM"
    INTEGRATION = "INTEGRATION"
    APPEARANCE = "APPEARANCE"

    @property
    def label(self) -> LocalizedText:
        return _CATEGORY_META[self][0]

    @property
    def icon(self) -> str:
        return _CATEGORY_META[self][1]

    @property
    def description(self) -> LocalizedText:
        return _CATEGORY_META[self][2]


_CATEGORY_META: Final[Mapping[SettingCategory, tuple[LocalizedText, str, LocalizedText]]] = MappingProxyType(
    {
        SettingCategory.GENERAL: (
            ("Allgemein", "General"),
            "⚙️",
            ("Allgemeine Anwendungseinstellungen", "General application settings"),
        ),
        SettingCategory.COMPANY: (
            ("Unternehmen", "Company"),
            "🏢",
            ("Angaben zum Unternehmen", "Company information"),
        ),
        SettingCategory.EMAIL: (
            ("E-Mail", "Email"),
            "✉️",
            ("E-Mail-Konfiguration", "Email configuration"),
        ),
        SettingCategory.INVOICE: (
            ("Rechnungen", "Invoicing"),
            "🧾",
            ("Einstellungen zur Rechnungsstellung", "Invoicing settings"),
        ),
        SettingCategory.TAX: (
            ("Steuern", "Tax"),
            "💶",
            ("Steuerkonfiguration", "Tax configuration"),
        ),
        SettingCategory.SECURITY: (
            ("Sicherheit", "Security"),
            "🛡️",
            ("Sicherheitseinstellungen", "Security settings"),
        ),
        SettingCategory.NOTIFICATION: (
            ("Benachrichtigungen", "Notifications"),
            "🔔",
            ("Verwaltung der Benachrichtigungen", "Notification management"),
        ),
        SettingCategory.SYSTEM: (
            ("System", "System"),
            "🖥️",
            ("Erweiterte Systemeinstellungen", "Advanced system settings"),
        ),
        SettingCategory.INTEGRATION: (
            ("Integrationen", "Integrations"),
            "🔌",
            ("Drittanbieter-Integrationen", "Third-party integrations"),
        ),
        SettingCategory.APPEARANCE: (
            ("Darstellung", "Appearance"),
            "🎨",
            ("Anpassung der Oberfläche", "Interface customisation"),
        ),
    }
)


def coerce_category(raw: SettingCategory | str | None) -> SettingCategory | None:
    """Return the category named by ``raw`` or ``None`` when unknown."""

    if isinstance(raw, SettingCategory):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return SettingCategory(raw.strip().upper())
    except ValueError:
        return None


def _truncate(value: str, limit: int) -> str:
    return value[:limit] + "..." if len(value) > limit else value


class SettingRecord(BaseModel):
    """A typed key/value configuration record ready to be persisted.

    Field aliases match the form field names (``valueType``, ``value``,
    ``sortOrder`` ...) so a form draft validates directly via
    :meth:`pydantic.BaseModel.model_validate`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    key: str = Field(min_length=1, max_length=config.KEY_MAX_LENGTH, pattern=KEY_REGEX)
    category: SettingCategory = SettingCategory.GENERAL
    value_type: ValueTypeTag = Field(default=ValueTypeTag.STRING, alias="valueType")
    raw_value: str = Field(default="", alias="value")
    description: str = Field(default="", max_length=config.DESCRIPTION_MAX_LENGTH)
    sort_order: int = Field(default=0, alias="sortOrder")
    is_system: bool = Field(default=False, alias="isSystem")
    is_encrypted: bool = Field(default=False, alias="isEncrypted")

    @field_validator("sort_order", mode="before")
    @classmethod
    def _empty_sort_order(cls, value: Any) -> Any:
        """Treat an empty sort order as ``0``."""

        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("raw_value", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_validator(mode="after")
    def _value_matches_type(self) -> "SettingRecord":
        """Reject values that break one of the rules of ``value_type``."""

        result = validators.check(rules_for(self.value_type), self.raw_value, label="value")
        if not result.passed:
            raise ValueError(result.message)
        return self

    def boolean_value(self) -> bool:
        if self.value_type is not ValueTypeTag.BOOLEAN:
            return False
        return self.raw_value.strip().lower() == "true"

    def integer_value(self) -> int:
        if self.value_type is not ValueTypeTag.INTEGER or not self.raw_value.strip():
            return 0
        try:
            return int(self.raw_value.strip())
        except ValueError:
            return 0

    def decimal_value(self) -> Decimal:
        if self.value_type is not ValueTypeTag.DECIMAL or not self.raw_value.strip():
            return Decimal("0")
        try:
            return Decimal(self.raw_value.strip())
        except InvalidOperation:
            return Decimal("0")

    def display_value(self, lang: str | None = None) -> str:
        """Return the compact value shown in settings listings."""

        value = self.raw_value
        if not value:
            return ""
        if self.value_type is ValueTypeTag.PASSWORD:
            return config.PASSWORD_MASK
        if self.value_type is ValueTypeTag.BOOLEAN:
            marker = "✓" if self.boolean_value() else "✗"
            label = BOOLEAN_ENABLED if self.boolean_value() else BOOLEAN_DISABLED
            return f"{marker} {tr_pair(label, lang)}"
        if self.value_type is ValueTypeTag.LIST:
            return ", ".join(split_list(value))
        if self.value_type is ValueTypeTag.JSON:
            return _truncate(value, _JSON_DISPLAY_LIMIT)
        if self.value_type is ValueTypeTag.TEXT:
            return _truncate(value, _TEXT_DISPLAY_LIMIT)
        return value

    def to_form_values(self) -> dict[str, str]:
        """Return the record as canonical form strings keyed by field name."""

        return {
            "key": self.key,
            "category": self.category.value,
            "valueType": self.value_type.value,
            "value": self.raw_value,
            "description": self.description,
            "sortOrder": str(self.sort_order),
            "isSystem": "true" if self.is_system else "false",
            "isEncrypted": "true" if self.is_encrypted else "false",
        }


__all__ = ["KEY_REGEX", "SettingCategory", "SettingRecord", "coerce_category"]
