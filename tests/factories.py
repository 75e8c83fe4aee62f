# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from questlog.model.habit import Habit
from questlog.model.log import LogPayload
from questlog.template.habit import get_habit_template


def local_noon(date: str) -> pendulum.DateTime:
    """Midday local time on a date, far from any day start boundary."""
    parsed = pendulum.from_format(date, "YYYY-MM-DD", tz="local")
    return parsed.set(hour=12)


def make_habit(
    id: Optional[str] = "habit-1",
    name: str = "Read",
    metric: str = "COUNT",
    xp_multiplier: float = 10.0,
    unit: Optional[str] = None,
    active: bool = True,
) -> Habit:
    habit = get_habit_template()
    habit["id"] = id
    habit["name"] = name
    habit["metric"] = metric  # type: ignore[typeddict-item]
    habit["xp_multiplier"] = xp_multiplier
    habit["unit"] = unit
    habit["active"] = active
    return habit


def make_payload(
    logical_date: str,
    value: object = 1,
    intensity: object = 1.0,
    habit_id: str = "habit-1",
    id: str = "log-1",
) -> LogPayload:
    return {
        "id": id,
        "entity_type": "log",
        "habit_id": habit_id,
        "metric": "COUNT",
        "timestamp": local_noon(logical_date),
        "logical_date": logical_date,
        "value": value,  # type: ignore[typeddict-item]
        "intensity": intensity,  # type: ignore[typeddict-item]
        "note": None,
    }
