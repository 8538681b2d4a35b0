"""Ability types and the static ability catalog."""

from .base import AbilityDefinition, AbilityInstanceId, CharacterClass, MagicType
from .catalog import AbilityCatalog, load_catalog

__all__ = [
    "AbilityCatalog",
    "AbilityDefinition",
    "AbilityInstanceId",
    "CharacterClass",
    "MagicType",
    "load_catalog",
]
