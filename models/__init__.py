"""Pydantic models for configuration settings."""

from .setting import SettingCategory, SettingRecord, coerce_category

__all__ = ["SettingCategory", "SettingRecord", "coerce_category"]
