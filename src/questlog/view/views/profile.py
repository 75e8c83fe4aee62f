# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.progress_bar import ProgressBar
from rich.table import Table

from questlog.color import XP_COLOR
from questlog.model.profile import HeroProfile
from questlog.view.views.header import header


def hero_profile_view(profile: HeroProfile) -> None:
    header("hero")

    table = Table.grid(padding=(0, 2))
    table.add_column()
    table.add_column()
    table.add_row("level", f"[bold]{profile['level']}[/bold]")
    table.add_row(
        "xp",
        f"[{XP_COLOR}]{int(profile['total_xp'])} XP[/{XP_COLOR}]"
        f" / {int(profile['next_level_xp'])} XP",
    )
    # A sliver of the bar is always shown so level 1 does not look empty
    table.add_row(
        "progress",
        ProgressBar(total=100, completed=max(5.0, profile["progress"]), width=30),
    )

    Console().print(table)
