"""Implementations of development CLI commands."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from ...abilities.base import MagicType
from ...core.character import Character
from ...engine import AbilityEngine
from ...systems.ability.cast_pipeline import CastResult, EquipmentReduction
from .command_parser import CLICommand

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "/cast <ability> [flat] [percent]  /tick <seconds>  /regen  /xp <amount>  "
    "/learn <ability>  /reduce <percent>  /reset [ability]  /status  /quit"
)


def _parse_ability(name: str) -> MagicType | None:
    try:
        return MagicType.parse(name)
    except ValueError:
        logger.error("Unknown ability: %s", name)
        return None


def cast(engine: AbilityEngine, character: Character, args: List[str]) -> CastResult | None:
    if not args:
        logger.error("Usage: /cast <ability> [flat] [percent]")
        return None
    ability = _parse_ability(args[0])
    if ability is None:
        return None
    try:
        flat = int(args[1]) if len(args) > 1 else 0
        percent = float(args[2]) if len(args) > 2 else 0.0
        equipment = EquipmentReduction(flat=flat, percent=percent)
    except ValueError as e:
        logger.error("Invalid equipment reduction: %s", e)
        return None
    result = engine.cast(character, ability, equipment)
    if result.committed:
        logger.info("Cast %s: -%d mana, %.1fs cooldown", ability.value, result.cost, result.cooldown)
    else:
        logger.info("Cast %s rejected: %s", ability.value, result.reason.value if result.reason else "?")
    return result


def tick(engine: AbilityEngine, character: Character, args: List[str]) -> None:
    try:
        dt = float(args[0]) if args else engine.time_manager.dt
    except ValueError:
        logger.error("Invalid tick length: %s", args[0])
        return
    expired = engine.tick(character, dt)
    for ability_id in expired:
        logger.info("%s is ready", ability_id)


def regen(engine: AbilityEngine, character: Character, args: List[str]) -> None:
    restored = engine.regenerate(character)
    logger.info("Regenerated %d mana (%s)", restored, character.mana)


def xp(engine: AbilityEngine, character: Character, args: List[str]) -> None:
    try:
        amount = int(args[0])
    except (IndexError, ValueError):
        logger.error("Usage: /xp <amount>")
        return
    if engine.grant_xp(character, amount):
        logger.info("Level up! Now level %d", character.experience.level)


def learn(engine: AbilityEngine, character: Character, args: List[str]) -> None:
    if not args:
        logger.error("Usage: /learn <ability>")
        return
    ability = _parse_ability(args[0])
    if ability is None:
        return
    outcome = engine.learn_ability(character, ability)
    logger.info("Learn %s: %s", ability.value, outcome.value)


def reduce(engine: AbilityEngine, character: Character, args: List[str]) -> None:
    try:
        percentage = float(args[0])
    except (IndexError, ValueError):
        logger.error("Usage: /reduce <percent>")
        return
    with character.lock:
        character.cooldowns.reduce_all(percentage)
    logger.info("Reduced all cooldowns by %.0f%%", percentage * 100)


def reset(engine: AbilityEngine, character: Character, args: List[str]) -> None:
    with character.lock:
        if not args:
            character.cooldowns.reset_all()
            logger.info("All cooldowns reset")
            return
        ability = _parse_ability(args[0])
        if ability is not None and character.cooldowns.reset(character.instance_id(ability)):
            logger.info("Cooldown for %s reset", ability.value)


def status(engine: AbilityEngine, character: Character, args: List[str]) -> Dict[str, Any]:
    """Log and return a summary of ``character``'s engine state."""

    exp = character.experience
    summary: Dict[str, Any] = {
        "id": character.character_id,
        "class": character.character_class.value,
        "level": exp.level,
        "experience": f"{exp.experience}/{engine.curve.requirement(exp.level)}",
        "mana": str(character.mana),
        "abilities": [a.value for a in character.abilities],
        "cooldowns": {
            ability_id.ability_type.value: round(remaining, 2)
            for ability_id, remaining in character.cooldowns.active().items()
        },
    }
    logger.info("Status: %s", summary)
    return summary


def show_help(engine: AbilityEngine, character: Character, args: List[str]) -> None:
    logger.info(HELP_TEXT)


COMMANDS: Dict[str, Callable[[AbilityEngine, Character, List[str]], Any]] = {
    "cast": cast,
    "tick": tick,
    "regen": regen,
    "xp": xp,
    "learn": learn,
    "reduce": reduce,
    "reset": reset,
    "status": status,
    "help": show_help,
}


def execute(engine: AbilityEngine, character: Character, command: CLICommand) -> Any:
    """Dispatch ``command``; unknown commands are logged and ignored."""

    handler = COMMANDS.get(command.name)
    if handler is None:
        logger.warning("Unknown command: /%s", command.name)
        return None
    return handler(engine, character, command.args)


__all__ = ["COMMANDS", "HELP_TEXT", "execute"]
