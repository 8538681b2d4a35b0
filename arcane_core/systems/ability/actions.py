"""Queued cast requests processed once per engine tick."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from ...abilities.base import MagicType
from .cast_pipeline import EquipmentReduction

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CastAction:
    """Request that ``actor`` casts ``ability_type`` on the next tick."""

    actor: int
    ability_type: MagicType
    equipment: Optional[EquipmentReduction] = None
    slot: int = 0


class CastQueue:
    """Simple FIFO queue of :class:`CastAction` requests."""

    def __init__(self) -> None:
        self._queue: Deque[CastAction] = deque()

    def enqueue(self, action: CastAction) -> None:
        self._queue.append(action)
        logger.debug(
            "CastQueue: actor %s enqueued %s. Queue: %s",
            action.actor,
            action.ability_type.value,
            len(self._queue),
        )

    def pop(self) -> Optional[CastAction]:
        if self._queue:
            return self._queue.popleft()
        return None

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)


__all__ = ["CastAction", "CastQueue"]
