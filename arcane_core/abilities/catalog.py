"""Static per-ability-type cooldown and mana cost table.

Lookups for a type that has no entry return ``None`` and the convenience
getters fall back to *no cooldown* and *no cost*, so an unlisted ability is
free and always castable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

import yaml

from .base import AbilityDefinition, MagicType

logger = logging.getLogger(__name__)


class AbilityCatalog:
    """Read-only mapping of :class:`MagicType` to :class:`AbilityDefinition`."""

    def __init__(self, definitions: Iterable[AbilityDefinition] = ()) -> None:
        self._definitions: Dict[MagicType, AbilityDefinition] = {}
        for definition in definitions:
            if definition.type in self._definitions:
                logger.warning(
                    "Ability '%s' defined twice in catalog. Overwriting.", definition.type.value
                )
            self._definitions[definition.type] = definition

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def lookup(self, ability_type: MagicType) -> Optional[AbilityDefinition]:
        """Return the definition for ``ability_type`` or ``None`` if absent."""

        return self._definitions.get(ability_type)

    def cooldown_duration(self, ability_type: MagicType) -> float:
        """Cooldown in seconds, ``0.0`` for types with no entry."""

        definition = self._definitions.get(ability_type)
        return definition.cooldown_seconds if definition is not None else 0.0

    def mana_cost(self, ability_type: MagicType) -> int:
        """Base mana cost, ``0`` for types with no entry."""

        definition = self._definitions.get(ability_type)
        return definition.mana_cost if definition is not None else 0

    def __contains__(self, ability_type: object) -> bool:
        return ability_type in self._definitions

    def __iter__(self) -> Iterator[AbilityDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


def _whole_cost(name: Any, value: Any) -> int:
    whole = isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    if isinstance(value, bool) or not whole:
        raise ValueError(f"Catalog entry for '{name}': mana_cost must be a whole number, got {value!r}")
    return int(value)


def _parse_catalog(data: Mapping[str, Any]) -> list[AbilityDefinition]:
    definitions: list[AbilityDefinition] = []
    for name, entry in data.items():
        try:
            ability_type = MagicType.parse(str(name))
        except ValueError:
            logger.warning("Skipping unknown ability type '%s' in catalog data.", name)
            continue
        if not isinstance(entry, Mapping):
            raise ValueError(f"Catalog entry for '{name}' must be a mapping, got {type(entry).__name__}")
        definitions.append(
            AbilityDefinition(
                type=ability_type,
                cooldown_seconds=float(entry.get("cooldown_seconds", 0.0)),
                mana_cost=_whole_cost(name, entry.get("mana_cost", 0)),
            )
        )
    return definitions


def load_catalog(path: str | Path) -> AbilityCatalog:
    """Build an :class:`AbilityCatalog` from a YAML file.

    A missing file yields an empty catalog, so every ability is free and has
    no cooldown. Malformed entries raise ``ValueError``.
    """

    p = Path(path)
    if not p.exists():
        logger.warning("Ability catalog %s not found; using an empty catalog.", p)
        return AbilityCatalog()
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Ability catalog {p} must contain a mapping at top level")
    catalog = AbilityCatalog(_parse_catalog(data))
    logger.info("Loaded %d ability definitions from %s", len(catalog), p)
    return catalog


__all__ = ["AbilityCatalog", "load_catalog"]
