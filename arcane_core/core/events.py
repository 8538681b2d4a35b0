"""Event dataclasses emitted by the engine."""

from __future__ import annotations

from dataclasses import dataclass

from ..abilities.base import AbilityInstanceId, MagicType


@dataclass(slots=True)
class AbilityCastEvent:
    """Record that a cast committed."""

    character_id: int
    ability_type: MagicType
    instance_id: AbilityInstanceId
    cost: int
    cooldown: float
    tick: int


@dataclass(slots=True)
class LevelUpEvent:
    """Record one or more level-ups from a single XP grant."""

    character_id: int
    old_level: int
    new_level: int
    tick: int


@dataclass(slots=True)
class AbilityLearnedEvent:
    """Record that a character learned a new ability type."""

    character_id: int
    ability_type: MagicType
    tick: int


EngineEvent = AbilityCastEvent | LevelUpEvent | AbilityLearnedEvent


__all__ = ["AbilityCastEvent", "LevelUpEvent", "AbilityLearnedEvent", "EngineEvent"]
