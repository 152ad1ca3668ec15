"""Utility helpers for the settings editor."""
