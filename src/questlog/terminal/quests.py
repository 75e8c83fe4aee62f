# SPDX-License-Identifier: MIT

from questlog.initialize import create_controller
from questlog.view.views import habit as habit_report
from questlog.view.views import profile as profile_report


def quests() -> None:
    """Show the active habits with their streaks and XP."""
    controller = create_controller()
    profile_report.hero_profile_view(controller.hero_profile())
    habit_report.quest_board_view(controller.active_habits(), controller.stats)


def profile() -> None:
    """Show the hero level earned across all habits."""
    controller = create_controller()
    profile_report.hero_profile_view(controller.hero_profile())
