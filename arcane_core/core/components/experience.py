"""Experience component."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExperienceState:
    """Current level and experience banked towards the next one."""

    level: int = 1
    experience: int = 0

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"level must be >= 1, got {self.level}")
        if self.experience < 0:
            raise ValueError(f"experience must be >= 0, got {self.experience}")


__all__ = ["ExperienceState"]
