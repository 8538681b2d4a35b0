"""Mana regeneration applied once per tick."""

from __future__ import annotations

import logging
from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.character import Character

logger = logging.getLogger(__name__)


class ManaRegenSystem:
    """Regenerate every registered character's mana pool."""

    def __init__(self, roster: Dict[int, "Character"]) -> None:
        self.roster = roster
        self.last_restored: Dict[int, int] = {}

    def update(self) -> None:
        restored: Dict[int, int] = {}
        for character_id, character in list(self.roster.items()):
            with character.lock:
                restored[character_id] = character.mana.regenerate()
        self.last_restored = restored


__all__ = ["ManaRegenSystem"]
