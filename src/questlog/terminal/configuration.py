# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from questlog import configuration
from questlog.repository.configuration import CONFIGURATION_REPO
from questlog.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("day_start_offset_hours", str(config["day_start_offset_hours"]))
    table.add_row(
        "idempotency_window_minutes", str(config["idempotency_window_minutes"])
    )
    table.add_row(
        "data_path", str(config["data_path"] or configuration.DEFAULT_DATA_PATH)
    )
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "random_color_for_habits",
        "✓ Enabled" if config.get("random_color_for_habits", False) else "✗ Disabled",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set_config(
    day_start_offset_hours: Annotated[
        Optional[float],
        typer.Option(
            "--day-start",
            help="hours after midnight at which a new logical day starts",
        ),
    ] = None,
    idempotency_window_minutes: Annotated[
        Optional[float],
        typer.Option(
            "--idempotency-window",
            help="minutes during which a repeated log id is ignored",
        ),
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the default data path")
    ] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    random_color_for_habits: Annotated[
        Optional[bool],
        typer.Option("--random-color/--no-random-color"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if day_start_offset_hours is not None and not 0 <= day_start_offset_hours < 24:
        raise typer.BadParameter("Day start must be between 0 and 24 hours")
    if idempotency_window_minutes is not None and idempotency_window_minutes <= 0:
        raise typer.BadParameter("Idempotency window must be positive")

    CONFIGURATION_REPO.update_config(
        day_start_offset_hours=day_start_offset_hours,
        idempotency_window_minutes=idempotency_window_minutes,
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        random_color_for_habits=random_color_for_habits,
    )
    view()
