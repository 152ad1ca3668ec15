"""Named validation rules for raw settings input.

Rules are evaluated in the order a field declares them and evaluation stops at
the first failing rule. Type rules (``email``, ``url``, ``integer`` ...) accept
the empty string; mandatory fields compose the explicit ``required`` rule.
Parametrised rules use ``name:argument`` (``max-length:100``).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from core.value_types import decode_json
from utils.i18n import LocalizedText, tr_pair

KEY_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9._-]*")

_EMAIL_RE: Final[re.Pattern[str]] = re.compile(r"[^\s]+@[^\s]+\.[^\s]+")
_URL_RE: Final[re.Pattern[str]] = re.compile(r"https?://.+", re.DOTALL)
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"-?\d+", re.ASCII)
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"-?\d*\.?\d+", re.ASCII)
_COLOR_RE: Final[re.Pattern[str]] = re.compile(r"#[0-9A-Fa-f]{6}")

logger = logging.getLogger(__name__)

RulePredicate = Callable[[str, str | None], bool]


def _optional(pattern: re.Pattern[str]) -> RulePredicate:
    def _check(value: str, _argument: str | None) -> bool:
        return not value or bool(pattern.fullmatch(value))

    return _check


def _is_json(value: str, _argument: str | None) -> bool:
    if not value:
        return True
    _, error = decode_json(value)
    return error is None


def _within_length(value: str, argument: str | None) -> bool:
    try:
        limit = int(argument or "")
    except ValueError:
        return False
    return len(value) <= limit


RULES: Final[Mapping[str, RulePredicate]] = MappingProxyType(
    {
        "required": lambda value, _argument: value.strip() != "",
        "key-format": lambda value, _argument: bool(KEY_PATTERN.fullmatch(value)),
        "email": _optional(_EMAIL_RE),
        "url": _optional(_URL_RE),
        "integer": _optional(_INTEGER_RE),
        "decimal": _optional(_DECIMAL_RE),
        "color": _optional(_COLOR_RE),
        "json": _is_json,
        "max-length": _within_length,
    }
)

_MESSAGES: Final[Mapping[str, LocalizedText]] = MappingProxyType(
    {
        "required": ("{label} ist erforderlich", "{label} is required"),
        "key-format": (
            "Ungültiges Format (Buchstaben, Ziffern, Punkte, Binde- und Unterstriche)",
            "Invalid format (letters, digits, dots, dashes, underscores)",
        ),
        "email": ("Ungültiges E-Mail-Format", "Invalid email format"),
        "url": (
            "Die URL muss mit http:// oder https:// beginnen",
            "The URL must start with http:// or https://",
        ),
        "integer": ("Muss eine Ganzzahl sein", "Must be a whole number"),
        "decimal": ("Muss eine Dezimalzahl sein", "Must be a decimal number"),
        "color": ("Ungültiges Farbformat (#RRGGBB)", "Invalid colour format (#RRGGBB)"),
        "json": ("Ungültiges JSON-Format", "Invalid JSON format"),
        "max-length": ("Höchstens {argument} Zeichen erlaubt", "At most {argument} characters allowed"),
    }
)
_FALLBACK_MESSAGE: Final[LocalizedText] = ("Ungültiger Wert", "Invalid value")


@dataclass(frozen=True)
class ValidationRuleResult:
    """Outcome of validating one field against its ordered rules."""

    rule_name: str
    passed: bool
    message: str


def _split_rule(rule: str) -> tuple[str, str | None]:
    name, _, argument = rule.strip().partition(":")
    return name, (argument or None)


def validate(rule_name: str, raw_value: str) -> bool:
    """Return ``True`` when ``raw_value`` satisfies ``rule_name``.

    Unknown rules never pass here; ``check`` skips them instead.
    """

    name, argument = _split_rule(rule_name)
    predicate = RULES.get(name)
    if predicate is None:
        return False
    return predicate(raw_value or "", argument)


def message_for(rule_name: str, *, label: str = "", lang: str | None = None) -> str:
    """Return the localized failure message for ``rule_name``."""

    name, argument = _split_rule(rule_name)
    template = _MESSAGES.get(name, _FALLBACK_MESSAGE)
    return tr_pair(template, lang, label=label or "-", argument=argument or "")


def check(
    rules: Sequence[str],
    raw_value: str,
    *,
    label: str = "",
    lang: str | None = None,
) -> ValidationRuleResult:
    """Evaluate ``rules`` in order and stop at the first failure.

    Rules missing from ``RULES`` are skipped. A field without rules is always
    valid; the returned ``rule_name`` is then empty.
    """

    for rule in rules:
        if _split_rule(rule)[0] not in RULES:
            logger.warning("Skipping unknown validation rule '%s'", rule)
            continue
        if not validate(rule, raw_value):
            return ValidationRuleResult(
                rule_name=rule,
                passed=False,
                message=message_for(rule, label=label, lang=lang),
            )
    last_rule = rules[-1] if rules else ""
    return ValidationRuleResult(rule_name=last_rule, passed=True, message="")


__all__ = [
    "KEY_PATTERN",
    "RULES",
    "ValidationRuleResult",
    "check",
    "message_for",
    "validate",
]
