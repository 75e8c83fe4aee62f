# SPDX-License-Identifier: MIT

import random

STREAK_ACTIVE_COLOR = "dark_orange"
STREAK_DORMANT_COLOR = "bright_black"
XP_COLOR = "gold"
INACTIVE_HABIT_COLOR = "bright_black"


def get_random_color() -> str:
    """Return a random color from the Rich color palette.

    These colors are chosen for good visibility in terminal displays.
    """
    colors = [
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "bright_red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "purple",
        "deep_pink",
        "spring_green",
        "dark_violet",
        "orange",
        "pink",
    ]
    return random.choice(colors)
