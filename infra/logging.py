"""Structured logging utilities for the settings editor."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict

import config

LOGGER = logging.getLogger("settings_editor")

_SECRET_ENV_VARS: tuple[str, ...] = ("SETTINGS_EDITOR_SECRET_KEY", "SECRET_KEY")


def _redact(value: str) -> str:
    """Redact known secrets from a string."""

    secrets = [os.getenv(name) for name in _SECRET_ENV_VARS]
    for secret in secrets:
        if secret:
            value = value.replace(secret, "[redacted]")
    return value


def mask_sensitive_payload(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Replace the value of password-typed or encrypted settings by the mask."""

    masked = dict(payload)
    sensitive = str(masked.get("valueType", "")).upper() == "PASSWORD" or str(
        masked.get("isEncrypted", "")
    ).lower() in ("true", "1")
    if sensitive and masked.get("value"):
        masked["value"] = config.PASSWORD_MASK
    return masked


def log_event(
    level: str,
    *,
    event: str,
    step: int | None = None,
    field: str | None = None,
    value_type: str | None = None,
    duration: float | None = None,
    payload: Mapping[str, Any] | None = None,
) -> str:
    """Emit a structured log line and optionally dump payload to a temp file.

    Args:
        level: Logging level name (e.g., ``"info"``).
        event: Short event name such as ``"navigation.blocked"``.
        step: Wizard step the event relates to.
        field: Form field the event relates to.
        value_type: Value-type tag active when the event happened.
        duration: Duration of the operation in seconds.
        payload: Optional form payload to dump for debugging when
            ``SETTINGS_EDITOR_DEBUG`` env var is truthy. Sensitive values are
            masked before anything is written.

    Returns:
        Path to the dumped payload file if written, else an empty string.
    """

    record = {
        "level": level.lower(),
        "event": event,
        "step": step,
        "field": field,
        "value_type": value_type,
        "duration": duration,
    }
    safe_record = {k: _redact(str(v)) for k, v in record.items() if v is not None}
    LOGGER.log(getattr(logging, level.upper(), logging.INFO), json.dumps(safe_record))

    if payload and config.debug_dumps_enabled():
        path = Path(tempfile.gettempdir()) / f"settings_editor_{int(time.time() * 1000)}.json"
        path.write_text(json.dumps(mask_sensitive_payload(payload), ensure_ascii=False, indent=2))
        return str(path)
    return ""


__all__ = ["LOGGER", "log_event", "mask_sensitive_payload"]
