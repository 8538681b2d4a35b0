"""System registry and tick dispatcher."""

from __future__ import annotations

from typing import Any, Iterator, List
import inspect

from ..systems.ability.ability_system import CastSystem, CooldownSystem
from ..systems.resources.regen_system import ManaRegenSystem

# Systems that must finish for every character before casts are processed.
_STATE_ADVANCING_SYSTEMS = (CooldownSystem, ManaRegenSystem)


class SystemsManager:
    """Maintain an ordered list of systems and tick them sequentially."""

    def __init__(self) -> None:
        self._systems: List[Any] = []

    # ------------------------------------------------------------------
    # Registration API
    # ------------------------------------------------------------------
    def register(self, system: Any) -> None:
        """Add ``system`` to the update list if not already present.

        Cooldown decay and mana regeneration always run before any
        :class:`CastSystem` regardless of registration order, so a cast never
        sees a half-advanced tick.
        """

        if system in self._systems:
            return

        if isinstance(system, _STATE_ADVANCING_SYSTEMS):
            for idx, s in enumerate(self._systems):
                if isinstance(s, CastSystem):
                    self._systems.insert(idx, system)
                    break
            else:
                self._systems.append(system)
            return

        self._systems.append(system)

    def unregister(self, system: Any) -> None:
        """Remove ``system`` if currently registered."""

        if system in self._systems:
            self._systems.remove(system)

    # ------------------------------------------------------------------
    # Tick dispatch
    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        """Run one tick: call ``update`` on each registered system in order.

        Systems declare what they need through their signature. ``update()``
        is called bare and ``update(dt)`` receives the tick length.
        """

        for system in list(self._systems):
            method = getattr(system, "update", None)
            if not callable(method):
                continue
            if _positional_arity(method) == 0:
                method()
            else:
                method(dt)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Any]:
        return iter(self._systems)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._systems)


def _positional_arity(method: Any) -> int:
    """Number of positional parameters ``method`` accepts (bound ``self`` excluded)."""

    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(1 for p in inspect.signature(method).parameters.values() if p.kind in positional)


__all__ = ["SystemsManager"]
