# SPDX-License-Identifier: MIT

from typing import Mapping

from rich import box
from rich.console import Console
from rich.table import Table

from questlog.color import (
    INACTIVE_HABIT_COLOR,
    STREAK_ACTIVE_COLOR,
    STREAK_DORMANT_COLOR,
    XP_COLOR,
)
from questlog.model.entity_id import EntityId
from questlog.model.habit import Habit
from questlog.model.habit_stats import HabitStats
from questlog.template.habit_stats import get_habit_stats_template
from questlog.time import datetime_to_display_local_date_str_optional
from questlog.view.views.header import header


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_streak(streak: int) -> str:
    if streak > 0:
        return f"[{STREAK_ACTIVE_COLOR}]{streak} day streak[/{STREAK_ACTIVE_COLOR}]"
    return f"[{STREAK_DORMANT_COLOR}]{streak} day streak[/{STREAK_DORMANT_COLOR}]"


def format_volume(habit: Habit, stats: HabitStats) -> str:
    volume = format_number(stats["total_volume"])
    if habit["unit"] is None or habit["unit"] == "":
        return volume
    if habit["metric"] == "MONEY":
        return f"{habit['unit']}{volume}"
    return f"{volume} {habit['unit']}"


def quest_board_view(
    habits: list[Habit],
    stats_by_habit: Mapping[EntityId, HabitStats],
) -> None:
    """Progress of the active habits."""
    header("quests")

    if len(habits) == 0:
        Console().print("No active habits found. Add one with 'questlog habit add'.")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("id", no_wrap=True)
    table.add_column("name")
    table.add_column("streak")
    table.add_column("best")
    table.add_column("xp")
    table.add_column("volume")

    for habit in habits:
        stats = stats_by_habit.get(habit["id"] or "") or get_habit_stats_template()
        name = habit["name"]
        if habit["color"]:
            name = f"[{habit['color']}]{name}[/{habit['color']}]"
        table.add_row(
            str(habit["id"])[:8],
            name,
            format_streak(stats["streak"]),
            str(stats["best_streak"]),
            f"[{XP_COLOR}]{int(stats['total_xp'])} XP[/{XP_COLOR}]",
            format_volume(habit, stats),
        )

    Console().print(table)


def habits_view(habits: list[Habit]) -> None:
    """Every habit definition, archived ones included."""
    header("studio")

    table = Table(box=box.SIMPLE)
    for column in ["id", "name", "category", "metric", "unit", "xp", "status"]:
        table.add_column(column)

    for habit in habits:
        row = [
            str(habit["id"])[:8],
            habit["name"],
            habit["category"] or "",
            habit["metric"],
            habit["unit"] or "",
            f"{format_number(habit['xp_multiplier'])}x",
            "active" if habit["active"] else "archived",
        ]
        if not habit["active"]:
            row = [
                f"[{INACTIVE_HABIT_COLOR}]{cell}[/{INACTIVE_HABIT_COLOR}]"
                for cell in row
            ]
        table.add_row(*row)

    Console().print(table)


def single_habit_view(habit: Habit, stats: HabitStats) -> None:
    """Display detailed view of a single habit."""
    header("habit")

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")

    table.add_row("id", str(habit["id"]))
    table.add_row("name", habit["name"])
    table.add_row("category", habit["category"] or "")
    table.add_row("metric", habit["metric"])
    table.add_row("unit", habit["unit"] or "")
    table.add_row("xp multiplier", format_number(habit["xp_multiplier"]))
    table.add_row("color", habit["color"] or "")
    table.add_row("active", "yes" if habit["active"] else "no")
    table.add_row("streak", str(stats["streak"]))
    table.add_row("best streak", str(stats["best_streak"]))
    table.add_row("total xp", format_number(stats["total_xp"]))
    table.add_row("total volume", format_volume(habit, stats))
    table.add_row("last logged", stats["last_log_date"] or "")
    table.add_row(
        "updated", datetime_to_display_local_date_str_optional(habit["updated"])
    )

    Console().print(table)
