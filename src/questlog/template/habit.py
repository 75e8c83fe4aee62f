# SPDX-License-Identifier: MIT

from questlog.model.entity_type import EntityType
from questlog.model.habit import Habit
from questlog.time import now_utc


def get_habit_template() -> Habit:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.HABIT,
        "name": "",
        "category": None,
        "metric": "BOOLEAN",
        "xp_multiplier": 1.0,
        "unit": None,
        "color": None,
        "active": True,
        "created": now,
        "updated": now,
    }
