# SPDX-License-Identifier: MIT

import atexit

from questlog.repository.configuration import CONFIGURATION_REPO
from questlog.repository.habit import HABIT_REPO
from questlog.repository.log import LOG_REPO
from questlog.repository.stats import STATS_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()

    # Flush entity repositories
    HABIT_REPO.flush()
    STATS_REPO.flush()
    LOG_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
