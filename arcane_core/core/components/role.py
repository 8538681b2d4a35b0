"""Class component."""

from __future__ import annotations

from dataclasses import dataclass

from ...abilities.base import CharacterClass


@dataclass(frozen=True)
class KnownClass:
    """The character's class tag, consulted only when learning abilities."""

    character_class: CharacterClass


__all__ = ["KnownClass"]
