# SPDX-License-Identifier: MIT

from rich.console import Console

from questlog.color import XP_COLOR
from questlog.controller import Submission
from questlog.model.habit import Habit
from questlog.view.views.habit import format_streak


def submission_view(habit: Habit, submission: Submission) -> None:
    console = Console()

    if submission["duplicate"]:
        console.print(
            f"[yellow]Log {submission['payload']['id']} was already submitted.[/yellow]"
        )
        return

    console.print(
        f"Saved! [{XP_COLOR}]+{submission['earned_xp']:.0f} XP[/{XP_COLOR}]"
        f" for {habit['name']} on {submission['payload']['logical_date']}"
        f" ({format_streak(submission['stats']['streak'])})"
    )
    if not submission["synced"]:
        console.print("[red]Saved locally, but failed to sync.[/red]")
