# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from questlog.initialize import create_controller
from questlog.service.log import LogValidationError
from questlog.terminal.parse import parse_date, resolve_habit_id
from questlog.view.views import log as log_report


def log(
    id: Annotated[str, typer.Argument(help="habit id or a unique prefix of it")],
    value: Annotated[
        Optional[str],
        typer.Argument(help="minutes, amount or count; not needed for BOOLEAN habits"),
    ] = None,
    intensity: Annotated[
        float,
        typer.Option("--intensity", "-i", help="effort multiplier, e.g. 0.5, 1, 2"),
    ] = 1.0,
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, or day offset like -1",
        ),
    ] = None,
    log_id: Annotated[
        Optional[str],
        typer.Option("--id", help="reuse the id of a submission to retry it safely"),
    ] = None,
) -> None:
    """Log an occurrence of a habit."""
    if intensity <= 0:
        raise typer.BadParameter("Intensity must be positive")

    controller = create_controller()
    habit_id = resolve_habit_id(controller.habits, id)
    habit = controller.get_habit(habit_id)

    try:
        submission = controller.submit_log(
            habit_id,
            value,
            intensity=intensity,
            note=note,
            date=date,
            log_id=log_id,
        )
    except LogValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    log_report.submission_view(habit, submission)
