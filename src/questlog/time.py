# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Union, cast

import pendulum

DEFAULT_DAY_START_OFFSET_HOURS = 4

LOGICAL_DATE_FORMAT = "YYYY-MM-DD"

Instant = Union[pendulum.DateTime, datetime.datetime, str]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def logical_date_of(
    instant: Optional[Instant],
    day_start_offset_hours: float = DEFAULT_DAY_START_OFFSET_HOURS,
    tz: str = "local",
) -> Optional[str]:
    """
    Map an instant to the logical date it belongs to.

    The day start offset is subtracted from the instant before it is
    truncated to a calendar date in ``tz``, so with an offset of 4 hours
    anything before 04:00 still counts toward the previous day.

    Naive datetimes are interpreted as local time. ``None`` maps to ``None``.
    """
    if instant is None:
        return None

    if isinstance(instant, str):
        moment = datetime_from_str(instant)
    elif isinstance(instant, pendulum.DateTime):
        moment = instant
    else:
        moment = pendulum.instance(instant, tz="local")

    shifted = moment - datetime.timedelta(hours=day_start_offset_hours)
    return shifted.in_tz(tz).format(LOGICAL_DATE_FORMAT)


def parse_logical_date(logical_date: Optional[str]) -> Optional[pendulum.Date]:
    """Parse a 'YYYY-MM-DD' string, returning None for anything else."""
    if not isinstance(logical_date, str):
        return None
    try:
        return pendulum.from_format(logical_date, LOGICAL_DATE_FORMAT).date()
    except ValueError:
        return None


def days_between(later: Optional[str], earlier: Optional[str]) -> Optional[int]:
    """
    Whole calendar days from ``earlier`` to ``later``.

    Works on date ordinals so daylight saving transitions never skew the
    result. Returns None when either side is not a valid logical date.
    """
    later_date = parse_logical_date(later)
    earlier_date = parse_logical_date(earlier)
    if later_date is None or earlier_date is None:
        return None
    return later_date.toordinal() - earlier_date.toordinal()
