# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from questlog.color import get_random_color
from questlog.initialize import create_controller
from questlog.repository.configuration import CONFIGURATION_REPO
from questlog.service.habit import (
    HabitValidationError,
    default_unit_for,
    parse_metric,
)
from questlog.template.habit import get_habit_template
from questlog.terminal.custom_typer import AliasedTyperGroup
from questlog.terminal.parse import resolve_habit_id
from questlog.view.views import habit as habit_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    metric: Annotated[
        str,
        typer.Option("--metric", "-m", help="BOOLEAN, TIME, MONEY, COUNT"),
    ] = "BOOLEAN",
    xp_multiplier: Annotated[
        float,
        typer.Option("--xp", "-x", help="XP earned per unit of value"),
    ] = 1.0,
    unit: Annotated[
        Optional[str],
        typer.Option("--unit", "-u", help="defaults to mins for TIME and $ for MONEY"),
    ] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-cat")] = None,
    color: Annotated[Optional[str], typer.Option("--color", "-col")] = None,
    inactive: Annotated[
        bool, typer.Option("--inactive", help="create the habit archived")
    ] = False,
) -> None:
    """Create a new habit."""
    config = CONFIGURATION_REPO.get_config()
    controller = create_controller()

    try:
        habit_metric = parse_metric(metric)
    except HabitValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    # Determine color: use provided color, or random if config enabled
    habit_color = color
    if habit_color is None and config.get("random_color_for_habits", False):
        habit_color = get_random_color()

    habit = get_habit_template()
    habit["name"] = name
    habit["category"] = category
    habit["metric"] = habit_metric
    habit["xp_multiplier"] = xp_multiplier
    habit["unit"] = unit if unit is not None else default_unit_for(habit_metric)
    habit["color"] = habit_color
    habit["active"] = not inactive

    try:
        id = controller.save_habit(habit)
    except HabitValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    habit_report.single_habit_view(
        controller.get_habit(id), controller.get_stats(id)
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    metric: Annotated[
        Optional[str],
        typer.Option("--metric", "-m", help="BOOLEAN, TIME, MONEY, COUNT"),
    ] = None,
    xp_multiplier: Annotated[Optional[float], typer.Option("--xp", "-x")] = None,
    unit: Annotated[Optional[str], typer.Option("--unit", "-u")] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-cat")] = None,
    color: Annotated[Optional[str], typer.Option("--color", "-col")] = None,
    remove_unit: Annotated[bool, typer.Option("--remove-unit", "-ru")] = False,
    remove_category: Annotated[
        bool, typer.Option("--remove-category", "-rcat")
    ] = False,
    remove_color: Annotated[bool, typer.Option("--remove-color", "-rcol")] = False,
) -> None:
    """Edit a habit definition. Stats and history are kept."""
    controller = create_controller()
    habit_id = resolve_habit_id(controller.habits, id)
    habit = controller.get_habit(habit_id)

    try:
        if metric is not None:
            habit["metric"] = parse_metric(metric)
        if name is not None:
            habit["name"] = name
        if xp_multiplier is not None:
            habit["xp_multiplier"] = xp_multiplier
        if unit is not None:
            habit["unit"] = unit
        if category is not None:
            habit["category"] = category
        if color is not None:
            habit["color"] = color

        if remove_unit:
            habit["unit"] = None
        if remove_category:
            habit["category"] = None
        if remove_color:
            habit["color"] = None

        controller.save_habit(habit)
    except HabitValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    habit_report.single_habit_view(
        controller.get_habit(habit_id), controller.get_stats(habit_id)
    )


def _set_active(id: str, active: bool) -> None:
    controller = create_controller()
    habit_id = resolve_habit_id(controller.habits, id)
    habit = controller.get_habit(habit_id)
    habit["active"] = active
    controller.save_habit(habit)
    habit_report.single_habit_view(
        controller.get_habit(habit_id), controller.get_stats(habit_id)
    )


@app.command("archive, ar", no_args_is_help=True)
def archive(id: str) -> None:
    """Hide a habit from the quest board. Its history is kept."""
    _set_active(id, False)


@app.command("activate, ac", no_args_is_help=True)
def activate(id: str) -> None:
    """Put an archived habit back on the quest board."""
    _set_active(id, True)


@app.command("list, ls")
def list_habits() -> None:
    """List every habit, archived ones included."""
    controller = create_controller()
    habit_report.habits_view(controller.habits)


@app.command("show, s", no_args_is_help=True)
def show(id: str) -> None:
    """Show a habit with its stats."""
    controller = create_controller()
    habit_id = resolve_habit_id(controller.habits, id)
    habit_report.single_habit_view(
        controller.get_habit(habit_id), controller.get_stats(habit_id)
    )
