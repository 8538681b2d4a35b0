"""Mana pool component and cost arithmetic."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import CONFIG, ManaConfig

logger = logging.getLogger(__name__)


@dataclass
class ResourcePool:
    """Track current and maximum mana plus per-tick regeneration.

    ``0 <= current <= max`` holds after every public method.
    """

    current: int = 0
    max: int = 0
    regen_per_tick: int = 0
    settings: ManaConfig = field(default_factory=lambda: CONFIG.mana, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.max < 0 or not 0 <= self.current <= self.max:
            raise ValueError(f"ResourcePool requires 0 <= current <= max, got {self.current}/{self.max}")

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------
    def initialize(self, base_stat: int, level: int) -> None:
        """Size the pool from ``base_stat`` and fill it."""

        self.max = max(0, base_stat * self.settings.mana_per_magic_power)
        self.current = self.max
        self.update_regen(level)

    def recompute_max(self, new_base_stat: int) -> None:
        """Resize the pool, keeping the same fraction full."""

        old_max = self.max
        self.max = max(0, new_base_stat * self.settings.mana_per_magic_power)
        if old_max > 0:
            self.current = round(self.max * (self.current / old_max))
        else:
            self.current = self.max
        self.current = min(max(self.current, 0), self.max)

    def update_regen(self, level: int) -> None:
        self.regen_per_tick = self.settings.min_regen + level * self.settings.regen_per_level

    # ------------------------------------------------------------------
    # Spending / restoring
    # ------------------------------------------------------------------
    def has_enough(self, cost: int) -> bool:
        return self.current >= cost

    def try_consume(self, amount: int) -> bool:
        """Spend ``amount`` if available. Returns ``False`` without mutating otherwise."""

        if amount < 0:
            logger.warning("Rejected consume of negative mana amount %s", amount)
            return False
        if self.current < amount:
            return False
        self.current -= amount
        return True

    def restore(self, amount: int) -> int:
        """Add ``amount`` up to ``max`` and return how much was actually added."""

        if amount < 0:
            logger.warning("Rejected restore of negative mana amount %s", amount)
            return 0
        restored = min(amount, self.max - self.current)
        self.current += restored
        return restored

    def regenerate(self) -> int:
        """Apply one tick of regeneration and return the amount restored."""

        restored = max(0, min(self.regen_per_tick, self.max - self.current))
        self.current += restored
        return restored

    def restore_to_max(self) -> None:
        self.current = self.max

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def fraction(self) -> float:
        """Fill ratio in ``[0, 1]``; an empty-capacity pool reports ``0.0``."""

        return self.current / self.max if self.max > 0 else 0.0

    def __str__(self) -> str:
        return f"{self.current}/{self.max}"


def effective_cost(base_cost: int, flat_reduction: int = 0, percent_reduction: float = 0.0) -> int:
    """Apply equipment reductions to ``base_cost``.

    With no reduction the base cost is returned unchanged (so a zero-cost
    ability stays free). Once any reduction applies, the result is floored
    at 1: reductions never make an ability free.
    """

    if flat_reduction == 0 and percent_reduction == 0:
        return base_cost
    return max(1, round(base_cost * (1 - percent_reduction)) - flat_reduction)


__all__ = ["ResourcePool", "effective_cost"]
