# SPDX-License-Identifier: MIT

from typing import Optional

from questlog.model.entity_id import EntityId
from questlog.model.habit import Habit
from questlog.model.habit_stats import HabitStats
from questlog.repository.habit import HABIT_REPO, HabitRepository
from questlog.repository.stats import STATS_REPO, StatsRepository


class LocalCatalog:
    """Habit catalog backed by the local habit and stats repositories."""

    def __init__(
        self,
        habit_repo: Optional[HabitRepository] = None,
        stats_repo: Optional[StatsRepository] = None,
    ) -> None:
        self.habit_repo = habit_repo if habit_repo is not None else HABIT_REPO
        self.stats_repo = stats_repo if stats_repo is not None else STATS_REPO

    def get_all_habits(self) -> list[Habit]:
        return self.habit_repo.get_all_habits()

    def get_all_stats(self) -> dict[EntityId, HabitStats]:
        return self.stats_repo.get_all_stats()

    def save_habit(self, habit: Habit) -> EntityId:
        return self.habit_repo.save_habit(habit)

    def save_stats(self, habit_id: EntityId, stats: HabitStats) -> None:
        self.stats_repo.save_stats(habit_id, stats)
