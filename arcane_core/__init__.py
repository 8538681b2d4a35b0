"""Ability execution and character-resource engine."""

__version__ = "0.1.0"
