# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class HabitStats(TypedDict):
    streak: int  # Consecutive logical days with at least one log
    best_streak: int  # Historical maximum of streak
    total_xp: float
    total_volume: float  # Raw value logged, before any multiplier
    last_log_date: Optional[str]  # Logical date (YYYY-MM-DD) of the streak anchor
