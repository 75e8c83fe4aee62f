# SPDX-License-Identifier: MIT

import math
from typing import Any, Mapping

from questlog.model.profile import HeroProfile

XP_PER_LEVEL_STEP = 100


def level_for_xp(total_xp: float) -> int:
    """Levels grow quadratically: level n starts at (n - 1)^2 * 100 XP."""
    if total_xp <= 0:
        return 1
    return math.floor(math.sqrt(total_xp / XP_PER_LEVEL_STEP)) + 1


def get_hero_profile(stats_by_habit: Mapping[Any, Mapping[str, Any]]) -> HeroProfile:
    total_xp = 0.0
    for stats in stats_by_habit.values():
        try:
            habit_xp = float(stats.get("total_xp") or 0)
        except (TypeError, ValueError):
            habit_xp = 0.0
        if math.isfinite(habit_xp) and habit_xp > 0:
            total_xp += habit_xp

    level = level_for_xp(total_xp)
    level_floor_xp = float((level - 1) ** 2 * XP_PER_LEVEL_STEP)
    next_level_xp = float(level**2 * XP_PER_LEVEL_STEP)
    progress = (total_xp - level_floor_xp) / (next_level_xp - level_floor_xp) * 100

    return {
        "total_xp": total_xp,
        "level": level,
        "level_floor_xp": level_floor_xp,
        "next_level_xp": next_level_xp,
        "progress": max(0.0, min(100.0, progress)),
    }
