"""Per-character cooldown tracking for ability instances."""

from __future__ import annotations

import logging
import math
from typing import Dict, List

from ...abilities.base import AbilityInstanceId

logger = logging.getLogger(__name__)


class CooldownTracker:
    """Track remaining cooldown seconds per :class:`AbilityInstanceId`.

    An instance with no entry is ready. Entries are dropped as soon as their
    remaining time reaches zero, so the map only ever holds active cooldowns.
    """

    def __init__(self) -> None:
        # Mapping of ability instance -> remaining seconds
        self._cooldowns: Dict[AbilityInstanceId, float] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_ready(self, ability_id: AbilityInstanceId) -> bool:
        """Return ``True`` if ``ability_id`` is not on cooldown."""

        return self._cooldowns.get(ability_id, 0.0) <= 0

    def remaining(self, ability_id: AbilityInstanceId) -> float:
        """Seconds left on ``ability_id``'s cooldown, never negative."""

        return max(0.0, self._cooldowns.get(ability_id, 0.0))

    def active(self) -> Dict[AbilityInstanceId, float]:
        """Return a copy of all active cooldowns."""

        return dict(self._cooldowns)

    def __len__(self) -> int:
        return len(self._cooldowns)

    def __contains__(self, ability_id: object) -> bool:
        return ability_id in self._cooldowns

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def start(self, ability_id: AbilityInstanceId, duration: float) -> None:
        """Start (or restart) a cooldown for ``ability_id`` lasting ``duration`` seconds.

        A non-positive duration clears the entry; a non-finite one is rejected.
        """

        if not math.isfinite(duration):
            logger.warning("Rejected cooldown start for %s with non-finite duration %r", ability_id, duration)
            return
        if duration <= 0:
            self._cooldowns.pop(ability_id, None)
            return
        self._cooldowns[ability_id] = float(duration)

    def tick(self, dt: float) -> List[AbilityInstanceId]:
        """Advance every cooldown by ``dt`` seconds.

        Entries that reach zero are removed in the same pass. Returns the ids
        that expired. Negative or non-finite ``dt`` is rejected.
        """

        if not math.isfinite(dt) or dt < 0:
            logger.warning("Rejected cooldown tick with invalid dt %r", dt)
            return []
        expired: List[AbilityInstanceId] = []
        for ability_id in list(self._cooldowns):
            remaining = self._cooldowns[ability_id] - dt
            if remaining <= 0:
                del self._cooldowns[ability_id]
                expired.append(ability_id)
            else:
                self._cooldowns[ability_id] = remaining
        return expired

    def reset(self, ability_id: AbilityInstanceId) -> bool:
        """Clear ``ability_id``'s cooldown. ``False`` if it was not active."""

        if self._cooldowns.pop(ability_id, None) is None:
            return False
        logger.debug("Reset cooldown for %s", ability_id)
        return True

    def reset_all(self) -> None:
        self._cooldowns.clear()
        logger.debug("All ability cooldowns reset")

    def scale_all(self, factor: float) -> bool:
        """Multiply every remaining time by ``factor``.

        Only finiteness is checked. Factors above one lengthen cooldowns and
        negative factors leave negative remaining times, which read back as
        zero and are swept on the next :meth:`tick`.
        """

        if not math.isfinite(factor):
            logger.warning("Rejected cooldown scale with non-finite factor %r", factor)
            return False
        for ability_id in self._cooldowns:
            self._cooldowns[ability_id] *= factor
        return True

    def reduce_all(self, percentage: float) -> bool:
        """Shorten every cooldown by ``percentage`` (``0.25`` removes a quarter)."""

        return self.scale_all(1.0 - percentage)


__all__ = ["CooldownTracker"]
