"""Track ability types a character has learned."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from ...abilities.base import MagicType


@dataclass
class LearnedAbilitySet:
    """Unique set of ability types available to a character."""

    known: set[MagicType] = field(default_factory=set)

    def __contains__(self, ability_type: object) -> bool:
        return ability_type in self.known

    def __iter__(self) -> Iterator[MagicType]:
        return iter(sorted(self.known, key=lambda t: t.value))

    def __len__(self) -> int:
        return len(self.known)

    def add(self, ability_type: MagicType) -> bool:
        """Insert ``ability_type``; ``False`` if it was already known."""

        if ability_type in self.known:
            return False
        self.known.add(ability_type)
        return True

    def forget(self, ability_type: MagicType) -> bool:
        """Remove ``ability_type`` (curse effects). ``False`` if it was not known."""

        if ability_type not in self.known:
            return False
        self.known.discard(ability_type)
        return True

    def clear(self) -> None:
        self.known.clear()


__all__ = ["LearnedAbilitySet"]
