"""Registry mapping value-type tags to widgets, rules and previews.

Each :class:`ValueTypeTag` resolves to exactly one :class:`WidgetDescriptor`
(what control to show and which ordered validation rules apply) and to a
preview formatter that turns a raw string into a :class:`PreviewFragment`.
Unknown tags fall back to a plain single-line text widget without rules.
Everything in this module is a pure function over its inputs.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Final, Mapping

import config
from core.errors import MalformedPreviewInput
from utils.i18n import (
    BOOLEAN_DISABLED,
    BOOLEAN_ENABLED,
    PREVIEW_INVALID_JSON,
    LocalizedText,
    tr_pair,
)

_HEX_COLOR_RE: Final[re.Pattern[str]] = re.compile(r"#[0-9A-Fa-f]{6}")
_HTTP_URL_RE: Final[re.Pattern[str]] = re.compile(r"https?://.+", re.DOTALL)


class ValueTypeTag(StrEnum):
    """Closed set of value types a setting can declare."""

    STRING = "STRING"
    TEXT = "TEXT"
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    BOOLEAN = "BOOLEAN"
    EMAIL = "EMAIL"
    URL = "URL"
    PASSWORD = "PASSWORD"
    COLOR = "COLOR"
    DATE = "DATE"
    TIME = "TIME"
    JSON = "JSON"
    FILE_PATH = "FILE_PATH"
    LIST = "LIST"

    @property
    def label(self) -> LocalizedText:
        return _TAG_LABELS[self]


class WidgetKind(StrEnum):
    """Rendering-independent kinds of input controls."""

    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"
    NUMBER = "number"
    BOOLEAN_TOGGLE = "boolean_toggle"
    COLOR_PICKER = "color_picker"
    DATE = "date"
    TIME = "time"
    PASSWORD = "password"


class PreviewKind(StrEnum):
    """Shapes a preview fragment can take."""

    MASKED = "masked"
    BOOLEAN_BADGE = "boolean_badge"
    COLOR_SWATCH = "color_swatch"
    LINK = "link"
    CHIPS = "chips"
    JSON_BLOCK = "json_block"
    INVALID = "invalid"
    TEXT_BLOCK = "text_block"
    PLAIN = "plain"


_TAG_LABELS: Final[Mapping[ValueTypeTag, LocalizedText]] = MappingProxyType(
    {
        ValueTypeTag.STRING: ("Text", "Text"),
        ValueTypeTag.TEXT: ("Langer Text", "Long text"),
        ValueTypeTag.INTEGER: ("Ganzzahl", "Integer"),
        ValueTypeTag.DECIMAL: ("Dezimalzahl", "Decimal"),
        ValueTypeTag.BOOLEAN: ("Boolesch", "Boolean"),
        ValueTypeTag.EMAIL: ("E-Mail", "Email"),
        ValueTypeTag.URL: ("URL", "URL"),
        ValueTypeTag.PASSWORD: ("Passwort", "Password"),
        ValueTypeTag.COLOR: ("Farbe", "Color"),
        ValueTypeTag.DATE: ("Datum", "Date"),
        ValueTypeTag.TIME: ("Uhrzeit", "Time"),
        ValueTypeTag.JSON: ("JSON", "JSON"),
        ValueTypeTag.FILE_PATH: ("Pfad", "Path"),
        ValueTypeTag.LIST: ("Liste", "List"),
    }
)


@dataclass(frozen=True)
class WidgetDescriptor:
    """Declarative description of the value control for one value type."""

    kind: WidgetKind
    placeholder: str
    help_text: LocalizedText
    input_type: str = "text"
    rules: tuple[str, ...] = ()
    constraints: tuple[tuple[str, str], ...] = ()
    rows: int | None = None

    @property
    def has_secondary_control(self) -> bool:
        """Return ``True`` for widgets paired with a toggle or colour wheel."""

        return self.kind in (WidgetKind.BOOLEAN_TOGGLE, WidgetKind.COLOR_PICKER)

    def constraint(self, name: str) -> str | None:
        for key, value in self.constraints:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class PreviewFragment:
    """Structured, renderer-agnostic preview of a raw value."""

    kind: PreviewKind
    text: str
    href: str | None = None
    color: str | None = None
    active: bool | None = None
    items: tuple[str, ...] = ()
    error: MalformedPreviewInput | None = None


_FALLBACK_DESCRIPTOR: Final[WidgetDescriptor] = WidgetDescriptor(
    kind=WidgetKind.SINGLE_LINE,
    placeholder="Value",
    help_text=("Wert eingeben", "Enter the value"),
)

_REGISTRY: Final[Mapping[ValueTypeTag, WidgetDescriptor]] = MappingProxyType(
    {
        ValueTypeTag.STRING: WidgetDescriptor(
            kind=WidgetKind.SINGLE_LINE,
            placeholder="Plain text",
            help_text=("Einfachen Text eingeben", "Enter plain text"),
        ),
        ValueTypeTag.TEXT: WidgetDescriptor(
            kind=WidgetKind.MULTI_LINE,
            placeholder="Multi-line text",
            help_text=("Text über mehrere Zeilen eingeben", "Enter text spanning several lines"),
            rows=3,
        ),
        ValueTypeTag.INTEGER: WidgetDescriptor(
            kind=WidgetKind.NUMBER,
            placeholder="123",
            help_text=("Ganzzahl eingeben (z. B. 42, -10)", "Enter a whole number (e.g. 42, -10)"),
            input_type="number",
            rules=("integer",),
            constraints=(("step", "1"),),
        ),
        ValueTypeTag.DECIMAL: WidgetDescriptor(
            kind=WidgetKind.NUMBER,
            placeholder="3.14",
            help_text=("Dezimalzahl eingeben (z. B. 3.14, 19.6)", "Enter a decimal number (e.g. 3.14, 19.6)"),
            input_type="number",
            rules=("decimal",),
            constraints=(("step", "0.01"),),
        ),
        ValueTypeTag.BOOLEAN: WidgetDescriptor(
            kind=WidgetKind.BOOLEAN_TOGGLE,
            placeholder="",
            help_text=(
                "Aktivieren (true) oder deaktivieren (false)",
                "Switch on (true) or off (false)",
            ),
            input_type="checkbox",
        ),
        ValueTypeTag.EMAIL: WidgetDescriptor(
            kind=WidgetKind.SINGLE_LINE,
            placeholder="name@example.com",
            help_text=("Gültige E-Mail-Adresse eingeben", "Enter a valid email address"),
            input_type="email",
            rules=("email",),
        ),
        ValueTypeTag.URL: WidgetDescriptor(
            kind=WidgetKind.SINGLE_LINE,
            placeholder="https://example.com",
            help_text=(
                "Vollständige URL eingeben (mit http:// oder https://)",
                "Enter a full URL (including http:// or https://)",
            ),
            input_type="url",
            rules=("url",),
        ),
        ValueTypeTag.PASSWORD: WidgetDescriptor(
            kind=WidgetKind.PASSWORD,
            placeholder=config.PASSWORD_MASK,
            help_text=(
                "Passwort eingeben (wird verschlüsselt gespeichert)",
                "Enter a password (stored encrypted)",
            ),
            input_type="password",
        ),
        ValueTypeTag.COLOR: WidgetDescriptor(
            kind=WidgetKind.COLOR_PICKER,
            placeholder="#FF0000",
            help_text=(
                "Farbe wählen oder Hex-Code eingeben",
                "Pick a colour or type its hex code",
            ),
            input_type="color",
            rules=("color",),
        ),
        ValueTypeTag.DATE: WidgetDescriptor(
            kind=WidgetKind.DATE,
            placeholder="YYYY-MM-DD",
            help_text=("Datum auswählen", "Select a date"),
            input_type="date",
        ),
        ValueTypeTag.TIME: WidgetDescriptor(
            kind=WidgetKind.TIME,
            placeholder="HH:MM",
            help_text=("Uhrzeit auswählen", "Select a time"),
            input_type="time",
        ),
        ValueTypeTag.JSON: WidgetDescriptor(
            kind=WidgetKind.MULTI_LINE,
            placeholder='{"key": "value"}',
            help_text=("Gültiges JSON-Objekt eingeben", "Enter a valid JSON object"),
            rules=("json",),
            rows=4,
        ),
        ValueTypeTag.FILE_PATH: WidgetDescriptor(
            kind=WidgetKind.SINGLE_LINE,
            placeholder="/path/to/file",
            help_text=(
                "Pfad zu einer Datei oder einem Ordner eingeben",
                "Enter the path to a file or folder",
            ),
        ),
        ValueTypeTag.LIST: WidgetDescriptor(
            kind=WidgetKind.MULTI_LINE,
            placeholder="value1, value2, value3",
            help_text=("Werte durch Kommas getrennt eingeben", "Enter values separated by commas"),
            rows=3,
        ),
    }
)


def coerce_tag(raw: ValueTypeTag | str | None) -> ValueTypeTag | None:
    """Return the tag named by ``raw`` or ``None`` when it is not recognised."""

    if isinstance(raw, ValueTypeTag):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return ValueTypeTag(raw.strip().upper())
    except ValueError:
        return None


def describe(tag: ValueTypeTag | str | None) -> WidgetDescriptor:
    """Return the widget descriptor for ``tag`` (plain text for unknown tags)."""

    resolved = coerce_tag(tag)
    if resolved is None:
        return _FALLBACK_DESCRIPTOR
    return _REGISTRY[resolved]


def rules_for(tag: ValueTypeTag | str | None) -> tuple[str, ...]:
    """Return the ordered validation rule names declared for ``tag``."""

    return describe(tag).rules


def is_hex_color(value: str) -> bool:
    return bool(_HEX_COLOR_RE.fullmatch(value))


def split_list(raw_value: str) -> list[str]:
    """Split a comma separated value into trimmed, non-empty items."""

    items = (item.strip() for item in raw_value.split(config.LIST_SEPARATOR))
    return [item for item in items if item]


def decode_json(raw_value: str) -> tuple[Any, str | None]:
    """Parse ``raw_value`` as strict JSON.

    Returns:
        ``(payload, None)`` on success or ``(None, message)`` with the parser's
        message when the input is malformed. ``NaN``/``Infinity`` literals are
        rejected.
    """

    def _reject_constant(token: str) -> Any:
        raise ValueError(f"Unexpected token {token}")

    try:
        return json.loads(raw_value, parse_constant=_reject_constant), None
    except (ValueError, RecursionError) as error:
        return None, str(error) or error.__class__.__name__


def seed_value(tag: ValueTypeTag | str | None, raw_value: str) -> str:
    """Return the value a freshly built widget for ``tag`` starts from."""

    resolved = coerce_tag(tag)
    if resolved is ValueTypeTag.BOOLEAN:
        return "true" if raw_value.strip().lower() == "true" else "false"
    if resolved is ValueTypeTag.COLOR and not raw_value:
        return config.DEFAULT_COLOR
    return raw_value


def format_preview(
    tag: ValueTypeTag | str | None,
    raw_value: str,
    *,
    lang: str | None = None,
) -> PreviewFragment:
    """Return the human-readable preview of ``raw_value`` for ``tag``."""

    value = raw_value or ""
    resolved = coerce_tag(tag)

    if resolved is ValueTypeTag.PASSWORD:
        return PreviewFragment(kind=PreviewKind.MASKED, text=config.PASSWORD_MASK)

    if resolved is ValueTypeTag.BOOLEAN:
        active = value == "true"
        label = BOOLEAN_ENABLED if active else BOOLEAN_DISABLED
        return PreviewFragment(kind=PreviewKind.BOOLEAN_BADGE, text=tr_pair(label, lang), active=active)

    if resolved is ValueTypeTag.COLOR:
        return PreviewFragment(
            kind=PreviewKind.COLOR_SWATCH,
            text=value,
            color=value if is_hex_color(value) else None,
        )

    if resolved is ValueTypeTag.EMAIL:
        return PreviewFragment(kind=PreviewKind.LINK, text=value, href=f"mailto:{value}" if value else None)

    if resolved is ValueTypeTag.URL:
        href = value if _HTTP_URL_RE.fullmatch(value) else None
        return PreviewFragment(kind=PreviewKind.LINK, text=value, href=href)

    if resolved is ValueTypeTag.LIST:
        items = tuple(split_list(value))
        return PreviewFragment(kind=PreviewKind.CHIPS, text=", ".join(items), items=items)

    if resolved is ValueTypeTag.JSON:
        payload, message = decode_json(value)
        if message is not None:
            return PreviewFragment(
                kind=PreviewKind.INVALID,
                text=tr_pair(PREVIEW_INVALID_JSON, lang, message=message),
                error=MalformedPreviewInput(value_type=ValueTypeTag.JSON.value, message=message),
            )
        return PreviewFragment(
            kind=PreviewKind.JSON_BLOCK,
            text=json.dumps(payload, indent=2, ensure_ascii=False),
        )

    if resolved is ValueTypeTag.TEXT:
        lines = tuple(value.splitlines())
        return PreviewFragment(kind=PreviewKind.TEXT_BLOCK, text=value, items=lines)

    return PreviewFragment(kind=PreviewKind.PLAIN, text=value)


__all__ = [
    "PreviewFragment",
    "PreviewKind",
    "ValueTypeTag",
    "WidgetDescriptor",
    "WidgetKind",
    "coerce_tag",
    "decode_json",
    "describe",
    "format_preview",
    "is_hex_color",
    "rules_for",
    "seed_value",
    "split_list",
]
