# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from questlog.terminal import configuration, habit
from questlog.terminal.custom_typer import OrderedAliasedTyperGroup
from questlog.terminal.log import log
from questlog.terminal.quests import profile, quests
from questlog.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="questlog - habit tracking with streaks and XP",
    no_args_is_help=True,
)
app.add_typer(habit.app, name="habit, h")
app.add_typer(configuration.app, name="config, c")
app.command(name="log, l")(log)
app.command(name="quests, q")(quests)
app.command(name="profile, p")(profile)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-vb", help="Log what the engine is doing"),
    ] = False,
) -> None:
    """
    questlog - habit tracking with streaks and XP

    Global options that apply to all commands.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
