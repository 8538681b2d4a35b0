"""Experience requirements and level-up resolution."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ...config import CONFIG, ProgressionConfig
from ...core.components.experience import ExperienceState
from ...core.components.stats import CharacterStats

logger = logging.getLogger(__name__)

# Absorbs binary float error so e.g. 100 * 1.2 never floors to 119.
_FLOOR_EPSILON = 1e-9


def _floor(value: float) -> int:
    return math.floor(value + _FLOOR_EPSILON)


class ExperienceCurve:
    """Exponential XP curve with a steeper early game.

    ``requirement(level)`` is ``floor(base_xp * level_multiplier ** (level - 1))``,
    scaled by ``early_game_scaling`` (and floored again) while the level is at
    or below ``early_game_threshold``. With the defaults the opening levels
    cost more than the plain exponential would, which paces the first hours.
    """

    def __init__(self, settings: ProgressionConfig | None = None) -> None:
        self.settings = settings if settings is not None else CONFIG.progression

    def requirement(self, level: int) -> int:
        """XP needed to advance from ``level`` to ``level + 1``."""

        s = self.settings
        effective_level = max(1, level)
        xp = _floor(s.base_xp * s.level_multiplier ** (effective_level - 1))
        if effective_level <= s.early_game_threshold:
            xp = _floor(xp * s.early_game_scaling)
        return xp

    def xp_to_next_level(self, state: ExperienceState) -> int:
        return max(0, self.requirement(state.level) - state.experience)

    def progress(self, state: ExperienceState) -> float:
        """Fraction of the current level completed, in ``[0, 1)``."""

        needed = self.requirement(state.level)
        return state.experience / needed if needed > 0 else 0.0

    def apply_xp(
        self,
        state: ExperienceState,
        xp: int,
        stats: Optional[CharacterStats] = None,
    ) -> bool:
        """Bank ``xp`` and resolve every level-up it pays for.

        Returns ``True`` if at least one level was gained. Negative ``xp`` is
        rejected and zero is a no-op; neither mutates ``state``.
        """

        if xp < 0:
            logger.warning("Rejected negative XP grant %s", xp)
            return False
        if xp == 0:
            return False

        state.experience += xp
        leveled_up = False
        required = self.requirement(state.level)
        while required > 0 and state.experience >= required:
            state.experience -= required
            state.level += 1
            if stats is not None:
                self._apply_level_growth(stats)
            leveled_up = True
            required = self.requirement(state.level)
        return leveled_up

    def _apply_level_growth(self, stats: CharacterStats) -> None:
        s = self.settings
        stats.max_health += s.health_per_level
        stats.health = stats.max_health
        stats.magic_power += s.magic_per_level
        stats.strength += s.strength_per_level
        stats.agility += s.agility_per_level


__all__ = ["ExperienceCurve"]
