# SPDX-License-Identifier: MIT

from typing import Protocol

from questlog.model.entity_id import EntityId
from questlog.model.habit import Habit
from questlog.model.habit_stats import HabitStats
from questlog.model.log import LogPayload


class LogSinkError(Exception):
    """Raised by a log sink when a payload could not be stored."""

    pass


class HabitCatalog(Protocol):
    """Supplies habit definitions and their stats, keyed by habit id."""

    def get_all_habits(self) -> list[Habit]: ...

    def get_all_stats(self) -> dict[EntityId, HabitStats]: ...

    def save_habit(self, habit: Habit) -> EntityId: ...

    def save_stats(self, habit_id: EntityId, stats: HabitStats) -> None: ...


class LogSink(Protocol):
    """
    Durable storage for submitted logs.

    Must be idempotent on the log id: appending the same payload twice
    stores it once. Failures surface as LogSinkError.
    """

    def contains(self, log_id: EntityId) -> bool: ...

    def append(self, payload: LogPayload) -> None: ...