# SPDX-License-Identifier: MIT

from questlog.model.habit_stats import HabitStats


def get_habit_stats_template() -> HabitStats:
    return {
        "streak": 0,
        "best_streak": 0,
        "total_xp": 0.0,
        "total_volume": 0.0,
        "last_log_date": None,
    }
