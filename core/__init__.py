"""Core package for the settings form engine: value types and validation."""
