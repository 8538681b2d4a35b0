import pytest

from arcane_core.abilities.base import MagicType
from arcane_core.core.event_bus import EventBus
from arcane_core.core.events import AbilityCastEvent
from arcane_core.systems.ability.cast_pipeline import (
    CastPipeline,
    CastResult,
    EquipmentReduction,
    RejectReason,
)


def test_commit_then_on_cooldown(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=50, maximum=50)

    first = pipeline.cast(character, MagicType.WINNOWING)
    assert first == CastResult(MagicType.WINNOWING, cost=25, cooldown=10.0)
    assert first.committed
    assert character.mana.current == 25

    second = pipeline.cast(character, MagicType.WINNOWING)
    assert not second.committed
    assert second.reason is RejectReason.ON_COOLDOWN
    assert character.mana.current == 25


def test_insufficient_mana_mutates_nothing(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=10, maximum=50)

    result = pipeline.cast(character, MagicType.WINNOWING)
    assert result.reason is RejectReason.INSUFFICIENT_RESOURCE
    assert character.mana.current == 10
    assert character.cooldowns.is_ready(character.instance_id(MagicType.WINNOWING))
    assert len(character.cooldowns) == 0


def test_cooldown_is_reported_before_mana(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=0, maximum=50)
    character.cooldowns.start(character.instance_id(MagicType.WINNOWING), 3.0)

    result = pipeline.cast(character, MagicType.WINNOWING)
    assert result.reason is RejectReason.ON_COOLDOWN


def test_equipment_reduces_cost(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=50, maximum=50)

    result = pipeline.cast(character, MagicType.WINNOWING, EquipmentReduction(flat=5, percent=0.2))
    assert result.cost == 15
    assert character.mana.current == 35


def test_reduction_makes_unaffordable_cast_affordable(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=10, maximum=50)

    result = pipeline.cast(character, MagicType.WINNOWING, EquipmentReduction(percent=0.6))
    assert result.committed
    assert result.cost == 10
    assert character.mana.current == 0


def test_uncatalogued_ability_is_free_without_cooldown(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=0, maximum=50)

    for _ in range(3):
        result = pipeline.cast(character, MagicType.DEATH_MANIFESTATION)
        assert result == CastResult(MagicType.DEATH_MANIFESTATION, cost=0, cooldown=0.0)
    assert len(character.cooldowns) == 0


def test_slots_have_independent_cooldowns(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=50, maximum=50)

    assert pipeline.cast(character, MagicType.WINNOWING, slot=0).committed
    assert pipeline.cast(character, MagicType.WINNOWING, slot=1).committed
    assert pipeline.cast(character, MagicType.WINNOWING, slot=1).reason is RejectReason.ON_COOLDOWN


def test_commit_emits_event(catalog, make_character):
    bus = EventBus()
    received = []
    bus.subscribe(received.append)
    pipeline = CastPipeline(catalog, bus)
    character = make_character(current=50, maximum=50, character_id=7)

    pipeline.cast(character, MagicType.WINNOWING, tick=3)
    pipeline.cast(character, MagicType.WINNOWING, tick=4)

    assert len(received) == 1
    event = received[0]
    assert isinstance(event, AbilityCastEvent)
    assert event.character_id == 7
    assert event.instance_id == character.instance_id(MagicType.WINNOWING)
    assert (event.cost, event.cooldown, event.tick) == (25, 10.0, 3)


def test_equipment_reduction_validation():
    with pytest.raises(ValueError):
        EquipmentReduction(flat=-1)
    assert EquipmentReduction(percent=1.5).percent == 1.0
    assert EquipmentReduction(percent=-0.5).percent == 0.0


def test_uncatalogued_ability_stays_free_with_equipment(catalog, make_character):
    pipeline = CastPipeline(catalog)
    character = make_character(current=0, maximum=50)

    result = pipeline.cast(
        character, MagicType.DEATH_MANIFESTATION, EquipmentReduction(flat=5, percent=0.5)
    )
    assert result == CastResult(MagicType.DEATH_MANIFESTATION, cost=0, cooldown=0.0)
    assert pipeline.cost_for(MagicType.DEATH_MANIFESTATION, EquipmentReduction(flat=5)) == 0


def test_catalogued_cost_keeps_floor_under_equipment(catalog):
    pipeline = CastPipeline(catalog)
    assert pipeline.cost_for(MagicType.HEALING) == 15
    assert pipeline.cost_for(MagicType.WINNOWING, EquipmentReduction(flat=100)) == 1
