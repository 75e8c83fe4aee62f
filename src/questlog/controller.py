# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable, Optional, TypedDict, Union

import pendulum

from questlog.model.entity_id import EntityId
from questlog.model.habit import Habit
from questlog.model.habit_stats import HabitStats
from questlog.model.log import LogPayload
from questlog.model.profile import HeroProfile
from questlog.service.collaborator import HabitCatalog, LogSink, LogSinkError
from questlog.service.habit import filter_active_habits, find_habit, validate_habit
from questlog.service.idempotency import DEFAULT_IDEMPOTENCY_WINDOW, IdempotencyGuard
from questlog.service.log import create_log_payload, validate_log_value
from questlog.service.profile import get_hero_profile
from questlog.service.stats import reduce_stats
from questlog.template.habit_stats import get_habit_stats_template
from questlog.time import DEFAULT_DAY_START_OFFSET_HOURS, now_utc

logger = logging.getLogger(__name__)


class Submission(TypedDict):
    payload: LogPayload
    stats: HabitStats
    earned_xp: float
    duplicate: bool  # True for an id seen recently or already stored
    synced: bool  # False when the log sink failed; local stats are kept


class HabitController:
    """
    Owns the client side state: habit list, stats keyed by habit id and the
    idempotency guard.

    Submissions update the local stats immediately and then hand the log to
    the sink. A sink failure is reported but never rolls the stats back.
    Submissions for the same habit must be made in order.
    """

    def __init__(
        self,
        catalog: HabitCatalog,
        sink: LogSink,
        day_start_offset_hours: float = DEFAULT_DAY_START_OFFSET_HOURS,
        idempotency_window: pendulum.Duration = DEFAULT_IDEMPOTENCY_WINDOW,
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self.catalog = catalog
        self.sink = sink
        self.day_start_offset_hours = day_start_offset_hours
        self.guard = IdempotencyGuard(idempotency_window, clock)
        self._clock = clock
        self.habits: list[Habit] = []
        self.stats: dict[EntityId, HabitStats] = {}

    def load(self) -> None:
        self.habits = self.catalog.get_all_habits()
        self.stats = self.catalog.get_all_stats()
        logger.debug(
            "Loaded %d habit(s) and stats for %d", len(self.habits), len(self.stats)
        )

    def active_habits(self) -> list[Habit]:
        return filter_active_habits(self.habits)

    def get_habit(self, habit_id: EntityId) -> Habit:
        return deepcopy(find_habit(self.habits, habit_id))

    def get_stats(self, habit_id: EntityId) -> HabitStats:
        stats = self.stats.get(habit_id)
        if stats is None:
            return get_habit_stats_template()
        return deepcopy(stats)

    def submit_log(
        self,
        habit_id: EntityId,
        value: Optional[Union[int, float, str]],
        intensity: float = 1.0,
        note: Optional[str] = None,
        date: Optional[pendulum.Date] = None,
        log_id: Optional[EntityId] = None,
    ) -> Submission:
        """
        Log one occurrence of a habit.

        Raises HabitNotFoundError for an unknown habit and LogValidationError
        for a value the habit does not accept. Passing the ``log_id`` of an
        earlier submission, either within the idempotency window or already
        stored by the sink, returns a duplicate result without touching any
        state.
        """
        habit = self.get_habit(habit_id)
        validate_log_value(habit, value)

        now = self._clock()
        payload = create_log_payload(
            habit,
            value,
            intensity=intensity,
            note=note,
            date=date,
            now=now,
            day_start_offset_hours=self.day_start_offset_hours,
            log_id=log_id,
        )

        if self.guard.seen(payload["id"]):
            logger.info("Ignoring duplicate submission of log %s", payload["id"])
            return self.__duplicate(payload, synced=False)

        # The guard only spans this process; a retry from an earlier run is
        # caught by the sink already holding the id.
        try:
            already_stored = self.sink.contains(payload["id"])
        except LogSinkError as e:
            logger.warning(
                "Could not check log %s in the sink: %s", payload["id"], e
            )
            already_stored = False
        if already_stored:
            logger.info("Log %s is already stored, ignoring retry", payload["id"])
            return self.__duplicate(payload, synced=True)

        reduction = reduce_stats(
            self.stats.get(habit_id),
            habit,
            payload,
            now=now,
            day_start_offset_hours=self.day_start_offset_hours,
        )
        self.stats[habit_id] = reduction["stats"]
        self.catalog.save_stats(habit_id, reduction["stats"])

        synced = True
        try:
            self.sink.append(payload)
        except LogSinkError as e:
            synced = False
            logger.warning(
                "Saved log %s locally but failed to sync: %s", payload["id"], e
            )

        return {
            "payload": payload,
            "stats": deepcopy(reduction["stats"]),
            "earned_xp": reduction["earned_xp"],
            "duplicate": False,
            "synced": synced,
        }

    def __duplicate(self, payload: LogPayload, synced: bool) -> Submission:
        return {
            "payload": payload,
            "stats": self.get_stats(payload["habit_id"]),
            "earned_xp": 0.0,
            "duplicate": True,
            "synced": synced,
        }

    def save_habit(self, habit: Habit) -> EntityId:
        """Create or update a habit, then refresh the habit list."""
        validate_habit(habit)
        habit_id = self.catalog.save_habit(habit)
        self.habits = self.catalog.get_all_habits()
        return habit_id

    def hero_profile(self) -> HeroProfile:
        return get_hero_profile(self.stats)
