"""Tick timing helpers."""

from __future__ import annotations

import time


class TimeManager:
    """Manage the engine tick cadence and count elapsed ticks."""

    def __init__(self, tick_rate: float = 10.0) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.tick_rate: float = tick_rate
        self.tick_counter: int = 0
        self._last_tick: float = time.perf_counter()

    @property
    def dt(self) -> float:
        """Nominal seconds per tick."""

        return 1.0 / self.tick_rate

    def advance(self) -> int:
        """Count one tick without sleeping and return the new tick number."""

        self.tick_counter += 1
        return self.tick_counter

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------
    def sleep_until_next_tick(self) -> None:
        """Block until the next tick should occur. Counting is left to :meth:`advance`."""

        interval = self.dt
        target = self._last_tick + interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_tick = target
        else:
            # We're behind schedule; start from current time
            self._last_tick = now


__all__ = ["TimeManager"]
