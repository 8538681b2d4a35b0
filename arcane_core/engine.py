"""Engine facade: character registry plus the operations callers invoke."""

from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional

from .abilities.base import AbilityInstanceId, CharacterClass, MagicType
from .abilities.catalog import AbilityCatalog, load_catalog
from .config import CONFIG, Config
from .core.character import Character
from .core.components.experience import ExperienceState
from .core.components.mana import ResourcePool
from .core.components.role import KnownClass
from .core.components.stats import CharacterStats, base_stats_for
from .core.event_bus import EventBus
from .core.events import AbilityLearnedEvent, LevelUpEvent
from .core.systems_manager import SystemsManager
from .core.time_manager import TimeManager
from .systems.ability.ability_system import CastSystem, CooldownSystem
from .systems.ability.actions import CastAction, CastQueue
from .systems.ability.cast_pipeline import (
    CastPipeline,
    CastResult,
    EquipmentReduction,
    RejectReason,
)
from .systems.ability.learning import LearnOutcome, learn
from .systems.progression.experience import ExperienceCurve
from .systems.resources.regen_system import ManaRegenSystem

logger = logging.getLogger(__name__)


class AbilityEngine:
    """Own the catalog, curve and per-character state for one game session.

    Direct calls (:meth:`cast`, :meth:`tick`, :meth:`regenerate`,
    :meth:`grant_xp`, :meth:`learn_ability`) act immediately on one
    character. :meth:`update` runs a full tick for every registered
    character: cooldown decay and regeneration first, then any casts queued
    with :meth:`submit_cast`.
    """

    def __init__(
        self,
        catalog: AbilityCatalog | None = None,
        curve: ExperienceCurve | None = None,
        events: EventBus | None = None,
        time_manager: TimeManager | None = None,
        config: Config | None = None,
    ) -> None:
        self.config = config if config is not None else CONFIG
        self.catalog = catalog if catalog is not None else load_catalog(self.config.catalog.abilities_path)
        self.curve = curve if curve is not None else ExperienceCurve(self.config.progression)
        self.events = events if events is not None else EventBus()
        self.time_manager = time_manager if time_manager is not None else TimeManager(self.config.tick_rate)
        self.pipeline = CastPipeline(self.catalog, self.events)

        self.characters: Dict[int, Character] = {}
        self._ids = itertools.count(1)

        self.cast_queue = CastQueue()
        self.cooldown_system = CooldownSystem(self.characters)
        self.regen_system = ManaRegenSystem(self.characters)
        self.cast_system = CastSystem(self.cast_queue, self._handle_queued_cast)
        self.systems_manager = SystemsManager()
        for system in (self.cooldown_system, self.regen_system, self.cast_system):
            self.systems_manager.register(system)

    # ------------------------------------------------------------------
    # Character registry
    # ------------------------------------------------------------------
    def create_character(
        self,
        character_class: CharacterClass,
        character_id: int | None = None,
        stats: CharacterStats | None = None,
        level: int = 1,
    ) -> Character:
        """Create, initialise and register a character."""

        if character_id is None:
            character_id = next(self._ids)
            while character_id in self.characters:
                character_id = next(self._ids)
        if stats is None:
            stats = base_stats_for(character_class, self.config.catalog.classes_path)
        character = Character(
            character_id=character_id,
            role=KnownClass(character_class),
            stats=stats,
            experience=ExperienceState(level=level),
            mana=ResourcePool(settings=self.config.mana),
        )
        character.mana.initialize(stats.magic_power, level)
        self.register(character)
        logger.info(
            "Created character %s (%s, level %d, mana %s)",
            character_id,
            character_class.value,
            level,
            character.mana,
        )
        return character

    def register(self, character: Character) -> None:
        if character.character_id in self.characters:
            logger.warning("Character %s already registered. Overwriting.", character.character_id)
        self.characters[character.character_id] = character

    def remove(self, character_id: int) -> Optional[Character]:
        return self.characters.pop(character_id, None)

    def character(self, character_id: int) -> Character:
        """Return the registered character; raises ``KeyError`` if unknown."""

        return self.characters[character_id]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def cast(
        self,
        character: Character,
        ability_type: MagicType,
        equipment: EquipmentReduction | None = None,
        slot: int = 0,
    ) -> CastResult:
        """Attempt a cast now. Only learned abilities reach the pipeline."""

        with character.lock:
            if ability_type not in character.abilities:
                logger.debug(
                    "Character %s has not learned %s", character.character_id, ability_type.value
                )
                return CastResult.rejected(ability_type, RejectReason.NOT_LEARNED)
            return self.pipeline.cast(
                character,
                ability_type,
                equipment=equipment,
                slot=slot,
                tick=self.time_manager.tick_counter,
            )

    def tick(self, character: Character, dt: float) -> List[AbilityInstanceId]:
        """Advance ``character``'s cooldowns by ``dt`` seconds; returns expired ids."""

        with character.lock:
            return character.cooldowns.tick(dt)

    def regenerate(self, character: Character) -> int:
        with character.lock:
            return character.mana.regenerate()

    def grant_xp(self, character: Character, amount: int) -> bool:
        """Award XP, applying stat growth and resizing mana on level-up."""

        with character.lock:
            old_level = character.experience.level
            leveled_up = self.curve.apply_xp(character.experience, amount, character.stats)
            if leveled_up:
                character.mana.recompute_max(character.stats.magic_power)
                character.mana.update_regen(character.experience.level)
            new_level = character.experience.level

        if leveled_up:
            logger.info(
                "Character %s levelled up %d -> %d (mana %s)",
                character.character_id,
                old_level,
                new_level,
                character.mana,
            )
            self.events.emit(
                LevelUpEvent(
                    character_id=character.character_id,
                    old_level=old_level,
                    new_level=new_level,
                    tick=self.time_manager.tick_counter,
                )
            )
        return leveled_up

    def learn_ability(self, character: Character, ability_type: MagicType) -> LearnOutcome:
        with character.lock:
            outcome = learn(character.abilities, character.character_class, ability_type)
        if outcome is LearnOutcome.LEARNED:
            logger.info("Character %s learned %s", character.character_id, ability_type.value)
            self.events.emit(
                AbilityLearnedEvent(
                    character_id=character.character_id,
                    ability_type=ability_type,
                    tick=self.time_manager.tick_counter,
                )
            )
        elif outcome is LearnOutcome.NOT_ELIGIBLE:
            logger.warning(
                "Character class %s cannot learn %s",
                character.character_class.value,
                ability_type.value,
            )
        return outcome

    # ------------------------------------------------------------------
    # Tick loop
    # ------------------------------------------------------------------
    def submit_cast(
        self,
        character_id: int,
        ability_type: MagicType,
        equipment: EquipmentReduction | None = None,
        slot: int = 0,
    ) -> None:
        """Queue a cast to be resolved during the next :meth:`update`."""

        self.cast_queue.enqueue(CastAction(character_id, ability_type, equipment, slot))

    def update(self, dt: float | None = None) -> List[CastResult]:
        """Run one engine tick and return the results of queued casts."""

        self.time_manager.advance()
        step = self.time_manager.dt if dt is None else dt
        self.systems_manager.update(step)
        return list(self.cast_system.results)

    def _handle_queued_cast(self, action: CastAction) -> CastResult:
        character = self.characters.get(action.actor)
        if character is None:
            logger.warning("Queued cast for unknown character %s", action.actor)
            return CastResult.rejected(action.ability_type, RejectReason.UNKNOWN_CHARACTER)
        return self.cast(character, action.ability_type, action.equipment, action.slot)


__all__ = ["AbilityEngine"]
