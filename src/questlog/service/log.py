# SPDX-License-Identifier: MIT

from typing import Optional, Union

import pendulum

from questlog.model.entity_id import EntityId, generate_entity_id
from questlog.model.entity_type import EntityType
from questlog.model.habit import Habit
from questlog.model.log import LogPayload
from questlog.service.stats import BOOLEAN_METRICS
from questlog.time import (
    DEFAULT_DAY_START_OFFSET_HOURS,
    LOGICAL_DATE_FORMAT,
    logical_date_of,
    now_utc,
)


class LogValidationError(Exception):
    """Raised when a submitted log value is not acceptable for its habit."""

    pass


def validate_log_value(habit: Habit, value: Optional[Union[int, float, str]]) -> bool:
    """
    Check a user supplied value before a log is built.

    - BOOLEAN: any value (or none) is accepted, it always counts as 1
    - TIME, MONEY, COUNT: a positive number is required

    Returns True if valid, raises LogValidationError if not.
    """
    if habit["metric"] in BOOLEAN_METRICS:
        return True

    try:
        number = float(value) if value is not None else None
    except (TypeError, ValueError, OverflowError):
        number = None

    if number is None or not number > 0:
        raise LogValidationError(
            f"Habit '{habit['name']}' needs a positive value, got {value!r}."
        )
    return True


def create_log_payload(
    habit: Habit,
    value: Optional[Union[int, float, str]],
    intensity: float = 1.0,
    note: Optional[str] = None,
    date: Optional[pendulum.Date] = None,
    now: Optional[pendulum.DateTime] = None,
    day_start_offset_hours: float = DEFAULT_DAY_START_OFFSET_HOURS,
    log_id: Optional[EntityId] = None,
) -> LogPayload:
    """
    Build the payload for a new log.

    Without a date the log is recorded now and attributed to the current
    logical date. With a date the log is attributed to exactly that day and
    stamped with the current local time of day on it.
    """
    if habit["id"] is None:
        raise ValueError("Cannot log against a habit that was never saved")

    if now is None:
        now = now_utc()

    if date is None:
        timestamp = now
        logical_date = logical_date_of(now, day_start_offset_hours)
    else:
        local_now = now.in_tz("local")
        timestamp = pendulum.datetime(
            date.year,
            date.month,
            date.day,
            local_now.hour,
            local_now.minute,
            local_now.second,
            tz="local",
        ).in_tz("UTC")
        logical_date = pendulum.Date(date.year, date.month, date.day).format(
            LOGICAL_DATE_FORMAT
        )

    return {
        "id": log_id if log_id is not None else generate_entity_id(),
        "entity_type": EntityType.LOG,
        "habit_id": habit["id"],
        "metric": habit["metric"],
        "timestamp": timestamp,
        "logical_date": logical_date or "",
        "value": 1 if habit["metric"] in BOOLEAN_METRICS and value is None else value,
        "intensity": intensity,
        "note": note,
    }
