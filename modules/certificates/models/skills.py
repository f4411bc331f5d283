"""Character-owned skills and requirements resolved against them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .static_data import StaticSkill


MAX_SKILL_LEVEL = 5


def skill_points_for_level(rank: int, level: int) -> int:
    """Return the cumulative skill points a skill of ``rank`` needs for ``level``."""
    level = max(0, min(MAX_SKILL_LEVEL, int(level)))
    if level == 0:
        return 0
    return int(math.ceil(250 * int(rank) * 2 ** (2.5 * (level - 1))))


class Skill:
    """A single skill as trained by one character."""

    def __init__(self, static: StaticSkill, level: int = 0, skill_points: Optional[int] = None) -> None:
        self.static = static
        self.level = max(0, min(MAX_SKILL_LEVEL, int(level)))
        floor = skill_points_for_level(static.rank, self.level)
        self.skill_points = max(floor, int(skill_points or 0))

    @property
    def id(self) -> int:
        return self.static.id

    @property
    def name(self) -> str:
        return self.static.name

    @property
    def rank(self) -> int:
        return self.static.rank

    def points_for_level(self, level: int) -> int:
        return skill_points_for_level(self.rank, level)

    def set_level(self, level: int) -> None:
        """Set the trained level, raising skill points to at least its requirement."""
        self.level = max(0, min(MAX_SKILL_LEVEL, int(level)))
        self.skill_points = max(self.skill_points, self.points_for_level(self.level))

    def __repr__(self) -> str:
        return f"Skill({self.name!r}, level={self.level}, sp={self.skill_points})"


@dataclass(frozen=True)
class SkillLevel:
    """A requirement resolved to a specific character's skill."""

    skill: Skill
    level: int

    @property
    def is_trained(self) -> bool:
        return self.skill.level >= self.level

    @property
    def is_partially_trained(self) -> bool:
        # Points already spent towards the required level without finishing it
        if self.is_trained:
            return False
        return self.skill.skill_points > self.skill.points_for_level(self.level - 1)


__all__ = ["MAX_SKILL_LEVEL", "skill_points_for_level", "Skill", "SkillLevel"]
