"""Class-gated ability learning."""

from __future__ import annotations

import logging
from enum import Enum

from ...abilities.base import CharacterClass, MagicType
from ...core.components.known_abilities import LearnedAbilitySet

logger = logging.getLogger(__name__)

# Classes that can never learn magic.
NON_MAGICAL_CLASSES = frozenset({CharacterClass.HUMAN})
# Classes restricted to exactly one ability type.
SINGLE_ABILITY_CLASSES = {CharacterClass.SURIEL: MagicType.SEER}


class LearnOutcome(str, Enum):
    LEARNED = "Learned"
    ALREADY_KNOWN = "AlreadyKnown"
    NOT_ELIGIBLE = "NotEligible"

    @property
    def ok(self) -> bool:
        return self is LearnOutcome.LEARNED


def can_learn(character_class: CharacterClass, ability_type: MagicType) -> bool:
    """Return ``True`` if ``character_class`` may ever learn ``ability_type``."""

    if character_class in NON_MAGICAL_CLASSES:
        return False
    allowed = SINGLE_ABILITY_CLASSES.get(character_class)
    if allowed is not None:
        return ability_type is allowed
    return True


def learn(
    abilities: LearnedAbilitySet,
    character_class: CharacterClass,
    ability_type: MagicType,
) -> LearnOutcome:
    """Add ``ability_type`` to ``abilities`` if the class allows it."""

    if ability_type in abilities:
        return LearnOutcome.ALREADY_KNOWN
    if not can_learn(character_class, ability_type):
        logger.debug("Class %s cannot learn %s", character_class.value, ability_type.value)
        return LearnOutcome.NOT_ELIGIBLE
    abilities.add(ability_type)
    return LearnOutcome.LEARNED


__all__ = ["LearnOutcome", "can_learn", "learn", "NON_MAGICAL_CLASSES", "SINGLE_ABILITY_CLASSES"]
