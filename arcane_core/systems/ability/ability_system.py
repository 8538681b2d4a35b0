"""Per-tick systems for cooldown decay and queued casts."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, TYPE_CHECKING

from .actions import CastAction, CastQueue
from .cast_pipeline import CastResult

if TYPE_CHECKING:
    from ...core.character import Character

logger = logging.getLogger(__name__)

CastHandler = Callable[[CastAction], CastResult]


class CooldownSystem:
    """Advance every registered character's cooldowns by ``dt``."""

    def __init__(self, roster: Dict[int, "Character"]) -> None:
        self.roster = roster

    def update(self, dt: float) -> None:
        for character in list(self.roster.values()):
            with character.lock:
                expired = character.cooldowns.tick(dt)
            for ability_id in expired:
                logger.debug("Cooldown expired for %s", ability_id)


class CastSystem:
    """Drain a :class:`CastQueue` through ``handler``.

    Registered after decay and regeneration so casts observe fully updated
    cooldowns and mana for the tick.
    """

    def __init__(self, queue: CastQueue, handler: CastHandler) -> None:
        self.queue = queue
        self.handler = handler
        self.results: List[CastResult] = []

    def update(self) -> None:
        self.results = []
        while True:
            action = self.queue.pop()
            if action is None:
                break
            result = self.handler(action)
            if not result.committed:
                logger.debug(
                    "Queued cast of %s by %s rejected: %s",
                    action.ability_type.value,
                    action.actor,
                    result.reason.value if result.reason else None,
                )
            self.results.append(result)


__all__ = ["CooldownSystem", "CastSystem", "CastHandler"]
