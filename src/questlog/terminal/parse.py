# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from questlog.model.entity_id import EntityId
from questlog.model.habit import Habit
from questlog.repository.configuration import CONFIGURATION_REPO
from questlog.time import logical_date_of, now_utc, parse_logical_date


def logical_today() -> pendulum.Date:
    config = CONFIGURATION_REPO.get_config()
    today = parse_logical_date(
        logical_date_of(now_utc(), config["day_start_offset_hours"])
    )
    if today is None:
        raise ValueError()
    return today


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a logical date option.

    Accepts YYYY-MM-DD, today/t, yesterday/y, or a day offset like -1.
    today and yesterday follow the configured day start, so at 02:00 with a
    04:00 day start "today" is still the previous calendar date.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        parsed = parse_logical_date(date)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date: {date}")
        return parsed

    if re.match(r"^-?\d+$", date):
        return logical_today().add(days=int(date))

    if date == "today" or date == "t":
        return logical_today()
    if date == "yesterday" or date == "y":
        return logical_today().subtract(days=1)
    raise typer.BadParameter("Incorrect date format")


def resolve_habit_id(habits: list[Habit], id_param: str) -> EntityId:
    """Match a full habit id or an unambiguous prefix of one."""
    matches = [
        habit["id"]
        for habit in habits
        if habit["id"] is not None and habit["id"].startswith(id_param)
    ]
    if id_param in matches:
        return id_param
    if len(matches) == 0:
        raise typer.BadParameter(f"No habit matches id '{id_param}'")
    if len(matches) > 1:
        raise typer.BadParameter(f"Habit id '{id_param}' is ambiguous")
    return matches[0]
