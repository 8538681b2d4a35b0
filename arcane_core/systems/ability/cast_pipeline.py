"""Atomic ability casting: readiness, affordability, then commit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from ...abilities.base import MagicType
from ...abilities.catalog import AbilityCatalog
from ...core.components.mana import effective_cost
from ...core.event_bus import EventBus
from ...core.events import AbilityCastEvent

if TYPE_CHECKING:
    from ...core.character import Character

logger = logging.getLogger(__name__)


class RejectReason(str, Enum):
    ON_COOLDOWN = "OnCooldown"
    INSUFFICIENT_RESOURCE = "InsufficientResource"
    NOT_LEARNED = "NotLearned"
    UNKNOWN_CHARACTER = "UnknownCharacter"


@dataclass(frozen=True, slots=True)
class EquipmentReduction:
    """Mana cost reductions supplied by the caller's equipment layer."""

    flat: int = 0
    percent: float = 0.0

    def __post_init__(self) -> None:
        if self.flat < 0:
            raise ValueError(f"flat mana reduction must be >= 0, got {self.flat}")
        object.__setattr__(self, "percent", min(1.0, max(0.0, float(self.percent))))


NO_REDUCTION = EquipmentReduction()


@dataclass(frozen=True, slots=True)
class CastResult:
    """Outcome of one cast attempt.

    Committed results carry the mana spent and the cooldown started; rejected
    results carry the first failing check.
    """

    ability_type: MagicType
    reason: Optional[RejectReason] = None
    cost: int = 0
    cooldown: float = 0.0

    @property
    def committed(self) -> bool:
        return self.reason is None

    @classmethod
    def rejected(cls, ability_type: MagicType, reason: RejectReason) -> "CastResult":
        return cls(ability_type=ability_type, reason=reason)


class CastPipeline:
    """Run the fixed check order and commit both mutations together.

    1. readiness (cooldown tracker) -> ``ON_COOLDOWN``
    2. affordability (mana pool, after equipment reductions) -> ``INSUFFICIENT_RESOURCE``
    3. consume mana, then start the catalog cooldown

    Nothing is mutated unless both checks pass.
    """

    def __init__(self, catalog: AbilityCatalog, events: EventBus | None = None) -> None:
        self.catalog = catalog
        self.events = events

    def cost_for(
        self, ability_type: MagicType, equipment: EquipmentReduction = NO_REDUCTION
    ) -> int:
        """Mana charged for ``ability_type``; uncatalogued types stay free under any equipment."""

        definition = self.catalog.lookup(ability_type)
        if definition is None:
            return 0
        return effective_cost(definition.mana_cost, equipment.flat, equipment.percent)

    def cast(
        self,
        character: "Character",
        ability_type: MagicType,
        equipment: EquipmentReduction | None = None,
        slot: int = 0,
        tick: int = 0,
    ) -> CastResult:
        equipment = equipment if equipment is not None else NO_REDUCTION
        instance_id = character.instance_id(ability_type, slot)

        with character.lock:
            if not character.cooldowns.is_ready(instance_id):
                logger.debug(
                    "Ability %s on cooldown (%.2fs left)",
                    instance_id,
                    character.cooldowns.remaining(instance_id),
                )
                return CastResult.rejected(ability_type, RejectReason.ON_COOLDOWN)

            cost = self.cost_for(ability_type, equipment)
            if not character.mana.try_consume(cost):
                logger.debug(
                    "Not enough mana for %s: need %d, have %s", instance_id, cost, character.mana
                )
                return CastResult.rejected(ability_type, RejectReason.INSUFFICIENT_RESOURCE)

            cooldown = self.catalog.cooldown_duration(ability_type)
            character.cooldowns.start(instance_id, cooldown)

        logger.info(
            "Character %s cast %s for %d mana (remaining %s). Cooldown set to %.1fs.",
            character.character_id,
            ability_type.value,
            cost,
            character.mana,
            cooldown,
        )
        if self.events is not None:
            self.events.emit(
                AbilityCastEvent(
                    character_id=character.character_id,
                    ability_type=ability_type,
                    instance_id=instance_id,
                    cost=cost,
                    cooldown=cooldown,
                    tick=tick,
                )
            )
        return CastResult(ability_type=ability_type, cost=cost, cooldown=cooldown)


__all__ = ["CastPipeline", "CastResult", "EquipmentReduction", "RejectReason", "NO_REDUCTION"]
