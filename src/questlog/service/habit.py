# SPDX-License-Identifier: MIT

from typing import Optional

from questlog.model.entity_id import EntityId
from questlog.model.habit import DEFAULT_UNITS, METRICS, Habit, Metric


class HabitValidationError(Exception):
    """Raised when a habit definition is not usable."""

    pass


class HabitNotFoundError(Exception):
    """Raised when no habit exists for an id."""

    def __init__(self, habit_id: EntityId) -> None:
        super().__init__(f"No habit with id {habit_id}")
        self.habit_id = habit_id


def parse_metric(metric: str) -> Metric:
    normalized = metric.strip().upper()
    if normalized == "BOOL":
        normalized = "BOOLEAN"
    if normalized not in METRICS:
        raise HabitValidationError(
            f"Invalid metric: {metric}. Valid options: {', '.join(METRICS)}"
        )
    return normalized  # type: ignore[return-value]


def default_unit_for(metric: Metric) -> Optional[str]:
    return DEFAULT_UNITS.get(metric)


def validate_habit(habit: Habit) -> bool:
    """
    Check a habit definition before it is saved.

    - name must not be blank
    - metric must be one of BOOLEAN, TIME, MONEY, COUNT
    - xp_multiplier must be a positive number

    Returns True if valid, raises HabitValidationError if not.
    """
    if not habit["name"].strip():
        raise HabitValidationError("Habit name must not be empty.")
    parse_metric(habit["metric"])
    if not habit["xp_multiplier"] > 0:
        raise HabitValidationError(
            f"XP multiplier must be positive, got {habit['xp_multiplier']}."
        )
    return True


def filter_active_habits(habits: list[Habit]) -> list[Habit]:
    return [habit for habit in habits if habit["active"]]


def find_habit(habits: list[Habit], habit_id: EntityId) -> Habit:
    for habit in habits:
        if habit["id"] == habit_id:
            return habit
    raise HabitNotFoundError(habit_id)
