# SPDX-License-Identifier: MIT

from typing import TypedDict


class HeroProfile(TypedDict):
    total_xp: float
    level: int
    level_floor_xp: float  # XP at which the current level started
    next_level_xp: float
    progress: float  # Percent towards next level, 0..100
