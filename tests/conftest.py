import pytest

from arcane_core.abilities.base import AbilityDefinition, CharacterClass, MagicType
from arcane_core.abilities.catalog import AbilityCatalog
from arcane_core.config import Config, _parse_config
from arcane_core.core.character import Character
from arcane_core.core.components.mana import ResourcePool
from arcane_core.core.components.role import KnownClass
from arcane_core.engine import AbilityEngine


@pytest.fixture
def default_config() -> Config:
    """Built-in defaults, independent of the repo's config.yaml."""
    return _parse_config({})


@pytest.fixture
def catalog() -> AbilityCatalog:
    return AbilityCatalog(
        [
            AbilityDefinition(MagicType.WINNOWING, cooldown_seconds=10.0, mana_cost=25),
            AbilityDefinition(MagicType.SEER, cooldown_seconds=60.0, mana_cost=50),
            AbilityDefinition(MagicType.HEALING, cooldown_seconds=0.0, mana_cost=15),
        ]
    )


@pytest.fixture
def engine(catalog, default_config) -> AbilityEngine:
    return AbilityEngine(catalog=catalog, config=default_config)


@pytest.fixture
def make_character(default_config):
    def _make(
        character_class: CharacterClass = CharacterClass.HIGH_FAE,
        current: int = 50,
        maximum: int = 50,
        learned: tuple = (MagicType.WINNOWING,),
        character_id: int = 1,
    ) -> Character:
        character = Character(
            character_id=character_id,
            role=KnownClass(character_class),
            mana=ResourcePool(current=current, max=maximum, settings=default_config.mana),
        )
        for ability in learned:
            character.abilities.add(ability)
        return character

    return _make
