"""Infrastructure helpers for the settings editor."""
