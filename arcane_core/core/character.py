"""Per-character state owned by the engine."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..abilities.base import AbilityInstanceId, CharacterClass, MagicType
from ..systems.ability.cooldowns import CooldownTracker
from .components.experience import ExperienceState
from .components.known_abilities import LearnedAbilitySet
from .components.mana import ResourcePool
from .components.role import KnownClass
from .components.stats import CharacterStats


@dataclass
class Character:
    """Everything the engine mutates for one character.

    ``lock`` guards the pool and tracker together so a cast's consume and
    cooldown start are observed as one step when callers use threads.
    """

    character_id: int
    role: KnownClass
    stats: CharacterStats = field(default_factory=CharacterStats)
    experience: ExperienceState = field(default_factory=ExperienceState)
    mana: ResourcePool = field(default_factory=ResourcePool)
    cooldowns: CooldownTracker = field(default_factory=CooldownTracker)
    abilities: LearnedAbilitySet = field(default_factory=LearnedAbilitySet)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def character_class(self) -> CharacterClass:
        return self.role.character_class

    def instance_id(self, ability_type: MagicType, slot: int = 0) -> AbilityInstanceId:
        return AbilityInstanceId(self.character_id, ability_type, slot)


__all__ = ["Character"]
