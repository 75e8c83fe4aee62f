# SPDX-License-Identifier: MIT

import math
from typing import Any, Mapping, Optional, TypedDict

import pendulum

from questlog.model.habit import Habit
from questlog.model.habit_stats import HabitStats
from questlog.model.log import LogPayload
from questlog.template.habit_stats import get_habit_stats_template
from questlog.time import (
    DEFAULT_DAY_START_OFFSET_HOURS,
    days_between,
    logical_date_of,
    now_utc,
    parse_logical_date,
)

BOOLEAN_METRICS = ("BOOLEAN", "BOOL")


class StatsReduction(TypedDict):
    stats: HabitStats
    earned_xp: float


def _to_finite_float(raw: Any) -> Optional[float]:
    if isinstance(raw, bool):
        return float(raw)
    try:
        number = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _positive_or(raw: Any, default: float) -> float:
    number = _to_finite_float(raw)
    if number is None or number <= 0:
        return default
    return number


def _non_negative_int(raw: Any) -> int:
    number = _to_finite_float(raw)
    if number is None or number < 0:
        return 0
    return int(number)


def _non_negative_float(raw: Any) -> float:
    number = _to_finite_float(raw)
    if number is None or number < 0:
        return 0.0
    return number


def normalize_stats(current_stats: Optional[Mapping[str, Any]]) -> HabitStats:
    """
    Fill in defaults for missing or unusable fields.

    Returns a fresh dict; the given mapping is never modified.
    """
    stats = get_habit_stats_template()
    if not current_stats:
        return stats

    stats["streak"] = _non_negative_int(current_stats.get("streak"))
    stats["best_streak"] = _non_negative_int(current_stats.get("best_streak"))
    stats["total_xp"] = _non_negative_float(current_stats.get("total_xp"))
    stats["total_volume"] = _non_negative_float(current_stats.get("total_volume"))

    last_log_date = current_stats.get("last_log_date")
    if parse_logical_date(last_log_date) is not None:
        stats["last_log_date"] = last_log_date
    return stats


def log_value(habit: Mapping[str, Any], payload: Mapping[str, Any]) -> float:
    """
    The raw value a log contributes to volume.

    BOOLEAN habits always count 1. Anything non-numeric or non-positive
    counts 0.
    """
    if habit.get("metric") in BOOLEAN_METRICS:
        return 1.0
    return _positive_or(payload.get("value"), 0.0)


def earned_xp_for(habit: Mapping[str, Any], payload: Mapping[str, Any]) -> float:
    value = log_value(habit, payload)
    xp_multiplier = _positive_or(habit.get("xp_multiplier"), 1.0)
    intensity = _positive_or(payload.get("intensity"), 1.0)
    return value * xp_multiplier * intensity


def next_streak(
    streak: int,
    last_log_date: Optional[str],
    logical_date: Optional[str],
    today: Optional[str],
) -> int:
    """
    Streak after a log dated ``logical_date`` is applied.

    - No previous log: 1 when logged for today, otherwise 0. A backfilled
      entry does not start a live streak.
    - Same logical day: unchanged.
    - Next logical day: +1.
    - After a gap: 1 when the gap is closed by a log for today, otherwise
      unchanged since a backfill cannot repair the chain.
    - Earlier than the anchor: unchanged.
    """
    if parse_logical_date(logical_date) is None:
        return streak

    if last_log_date is None:
        return 1 if logical_date == today else streak

    diff_days = days_between(logical_date, last_log_date)
    if diff_days is None or diff_days <= 0:
        return streak
    if diff_days == 1:
        return streak + 1
    if logical_date == today:
        return 1
    return streak


def reduce_stats(
    current_stats: Optional[Mapping[str, Any]],
    habit: Habit,
    payload: LogPayload,
    now: Optional[pendulum.DateTime] = None,
    day_start_offset_hours: float = DEFAULT_DAY_START_OFFSET_HOURS,
) -> StatsReduction:
    """
    Compute a habit's stats after one more log, ahead of any persistence.

    The payload's logical date is taken as given and is never derived from
    its timestamp. "Today" is the logical date of ``now`` (defaults to the
    current instant) under the same day start offset.

    Never raises: unusable numbers degrade to a zero contribution so the
    optimistic update always goes through.

    Args:
        current_stats: The habit's aggregate before this log, possibly empty
        habit: The habit definition, read only
        payload: The submitted log
        now: The instant that defines today's logical date
        day_start_offset_hours: Hours after midnight at which a day starts

    Returns:
        The new stats and the XP earned by this log
    """
    stats = normalize_stats(current_stats)

    value = log_value(habit, payload)
    earned_xp = earned_xp_for(habit, payload)

    stats["total_volume"] += value
    stats["total_xp"] += earned_xp

    logical_date = payload.get("logical_date")
    today = logical_date_of(now or now_utc(), day_start_offset_hours)

    stats["streak"] = next_streak(
        stats["streak"], stats["last_log_date"], logical_date, today
    )
    stats["best_streak"] = max(stats["best_streak"], stats["streak"])

    if parse_logical_date(logical_date) is not None and (
        stats["last_log_date"] is None or logical_date >= stats["last_log_date"]
    ):
        stats["last_log_date"] = logical_date

    return {"stats": stats, "earned_xp": earned_xp}
