"""Character stat component and per-class base values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from ...abilities.base import CharacterClass
from ...config import CONFIG

logger = logging.getLogger(__name__)

_STAT_KEYS = ("max_health", "magic_power", "strength", "agility")
_CLASS_CACHE: Dict[Path, Dict[CharacterClass, "CharacterStats"]] = {}


@dataclass
class CharacterStats:
    """Stats the engine reads: magic power sizes the mana pool, the rest grow on level-up."""

    max_health: int = 0
    magic_power: int = 0
    strength: int = 0
    agility: int = 0
    health: int | None = None

    def __post_init__(self) -> None:
        if self.health is None:
            self.health = self.max_health


def load_class_stats(path: Path | None = None) -> Dict[CharacterClass, CharacterStats]:
    """Return base stats per class from ``classes.yaml`` (cached per path)."""

    p = Path(path) if path is not None else CONFIG.catalog.classes_path
    if p in _CLASS_CACHE:
        return _CLASS_CACHE[p]
    table: Dict[CharacterClass, CharacterStats] = {}
    if p.exists():
        data: Any = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Class table {p} must contain a mapping at top level")
        for name, values in data.items():
            try:
                cls = CharacterClass.parse(str(name))
            except ValueError:
                logger.warning("Skipping unknown character class '%s' in %s", name, p)
                continue
            values = values or {}
            table[cls] = CharacterStats(**{key: int(values.get(key, 0)) for key in _STAT_KEYS})
    else:
        logger.warning("Class table %s not found; classes start with zeroed stats.", p)
    _CLASS_CACHE[p] = table
    return table


def base_stats_for(character_class: CharacterClass, path: Path | None = None) -> CharacterStats:
    """Return a fresh copy of the base stats for ``character_class``."""

    template = load_class_stats(path).get(character_class)
    if template is None:
        return CharacterStats()
    return CharacterStats(
        max_health=template.max_health,
        magic_power=template.magic_power,
        strength=template.strength,
        agility=template.agility,
    )


__all__ = ["CharacterStats", "load_class_stats", "base_stats_for"]
