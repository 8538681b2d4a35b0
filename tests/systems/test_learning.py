from arcane_core.abilities.base import CharacterClass, MagicType
from arcane_core.core.components.known_abilities import LearnedAbilitySet
from arcane_core.systems.ability.learning import LearnOutcome, can_learn, learn


def test_human_learns_nothing():
    assert not any(can_learn(CharacterClass.HUMAN, ability) for ability in MagicType)


def test_suriel_learns_only_seer():
    allowed = [ability for ability in MagicType if can_learn(CharacterClass.SURIEL, ability)]
    assert allowed == [MagicType.SEER]


def test_other_classes_learn_anything():
    for cls in (
        CharacterClass.HIGH_FAE,
        CharacterClass.LESSER_FAE,
        CharacterClass.ILLYRIAN,
        CharacterClass.ATTOR,
    ):
        assert all(can_learn(cls, ability) for ability in MagicType)


def test_restricted_class_learn_flow():
    known = LearnedAbilitySet()
    assert learn(known, CharacterClass.SURIEL, MagicType.WINNOWING) is LearnOutcome.NOT_ELIGIBLE
    assert MagicType.WINNOWING not in known
    assert learn(known, CharacterClass.SURIEL, MagicType.SEER) is LearnOutcome.LEARNED
    assert learn(known, CharacterClass.SURIEL, MagicType.SEER) is LearnOutcome.ALREADY_KNOWN
    assert len(known) == 1


def test_already_known_is_checked_before_eligibility():
    known = LearnedAbilitySet({MagicType.WINNOWING})
    assert learn(known, CharacterClass.HUMAN, MagicType.WINNOWING) is LearnOutcome.ALREADY_KNOWN


def test_forget_and_clear():
    known = LearnedAbilitySet()
    known.add(MagicType.SEER)
    known.add(MagicType.HEALING)
    assert known.forget(MagicType.SEER)
    assert not known.forget(MagicType.SEER)
    assert list(known) == [MagicType.HEALING]
    known.clear()
    assert len(known) == 0


def test_outcome_ok_flag():
    assert LearnOutcome.LEARNED.ok
    assert not LearnOutcome.ALREADY_KNOWN.ok
    assert not LearnOutcome.NOT_ELIGIBLE.ok
