"""components package."""

from .experience import ExperienceState
from .known_abilities import LearnedAbilitySet
from .mana import ResourcePool, effective_cost
from .role import KnownClass
from .stats import CharacterStats

__all__ = [
    "CharacterStats",
    "ExperienceState",
    "KnownClass",
    "LearnedAbilitySet",
    "ResourcePool",
    "effective_cost",
]
