"""Ability identity types shared by the catalog, tracker and pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class MagicType(str, Enum):
    """Categories of magical action a character can perform."""

    SHAPESHIFTING = "Shapeshifting"
    WINNOWING = "Winnowing"
    DAEMATI = "Daemati"
    DARKNESS_MANIPULATION = "DarknessManipulation"
    LIGHT_MANIPULATION = "LightManipulation"
    FIRE_MANIPULATION = "FireManipulation"
    WATER_MANIPULATION = "WaterManipulation"
    ICE_MANIPULATION = "IceManipulation"
    WIND_MANIPULATION = "WindManipulation"
    EARTH_MANIPULATION = "EarthManipulation"
    HEALING = "Healing"
    SHIELD_CREATION = "ShieldCreation"
    SHADOWSINGER = "Shadowsinger"
    SEER = "Seer"
    SPELL_CLEAVING = "SpellCleaving"
    TRUTH_TELLING = "TruthTelling"
    DEATH_MANIFESTATION = "DeathManifestation"

    @classmethod
    def parse(cls, name: str) -> "MagicType":
        """Return the member matching ``name`` by value or member name.

        Matching is case-insensitive so CLI input such as ``seer`` or
        ``fire_manipulation`` resolves. Raises ``ValueError`` otherwise.
        """

        key = name.strip().replace("_", "").lower()
        for member in cls:
            if member.value.lower() == key or member.name.replace("_", "").lower() == key:
                return member
        raise ValueError(f"Unknown ability type: {name}")


class CharacterClass(str, Enum):
    """Character classes; only used to gate which abilities may be learned."""

    HIGH_FAE = "HighFae"
    LESSER_FAE = "LesserFae"
    HUMAN = "Human"
    ILLYRIAN = "Illyrian"
    ATTOR = "Attor"
    SURIEL = "Suriel"

    @classmethod
    def parse(cls, name: str) -> "CharacterClass":
        key = name.strip().replace("_", "").lower()
        for member in cls:
            if member.value.lower() == key or member.name.replace("_", "").lower() == key:
                return member
        raise ValueError(f"Unknown character class: {name}")


@dataclass(frozen=True, slots=True)
class AbilityDefinition:
    """Static cooldown and base mana cost for one ability type."""

    type: MagicType
    cooldown_seconds: float = 0.0
    mana_cost: int = 0

    def __post_init__(self) -> None:
        if not math.isfinite(self.cooldown_seconds) or self.cooldown_seconds < 0:
            raise ValueError(
                f"{self.type.value}: cooldown_seconds must be a finite value >= 0, got {self.cooldown_seconds}"
            )
        if self.mana_cost < 0:
            raise ValueError(f"{self.type.value}: mana_cost must be >= 0, got {self.mana_cost}")


@dataclass(frozen=True, slots=True)
class AbilityInstanceId:
    """Identify one concrete ability slot whose cooldown is tracked.

    ``slot`` separates several equipped instances of the same type on one
    character; the default of ``0`` covers the common single-instance case.
    """

    character_id: int
    ability_type: MagicType
    slot: int = 0

    def __str__(self) -> str:
        suffix = f"#{self.slot}" if self.slot else ""
        return f"{self.character_id}:{self.ability_type.value}{suffix}"


__all__ = ["MagicType", "CharacterClass", "AbilityDefinition", "AbilityInstanceId"]
