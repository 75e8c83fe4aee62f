# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import pendulum
import pytest
from factories import local_noon, make_habit

from questlog.controller import HabitController
from questlog.model.entity_id import EntityId, generate_entity_id
from questlog.model.habit import Habit
from questlog.model.habit_stats import HabitStats
from questlog.model.log import LogPayload
from questlog.repository.catalog import LocalCatalog
from questlog.repository.habit import HabitRepository
from questlog.repository.log import LogRepository
from questlog.repository.stats import StatsRepository
from questlog.service.collaborator import LogSinkError
from questlog.service.habit import HabitNotFoundError, HabitValidationError
from questlog.service.log import LogValidationError


class MemoryCatalog:
    def __init__(
        self,
        habits: list[Habit],
        stats: Optional[dict[EntityId, HabitStats]] = None,
    ) -> None:
        self.habits = habits
        self.stats = stats or {}

    def get_all_habits(self) -> list[Habit]:
        return deepcopy(self.habits)

    def get_all_stats(self) -> dict[EntityId, HabitStats]:
        return deepcopy(self.stats)

    def save_habit(self, habit: Habit) -> EntityId:
        if habit["id"] is None:
            habit["id"] = generate_entity_id()
            self.habits.append(habit)
        else:
            self.habits = [h if h["id"] != habit["id"] else habit for h in self.habits]
        return habit["id"]

    def save_stats(self, habit_id: EntityId, stats: HabitStats) -> None:
        self.stats[habit_id] = deepcopy(stats)


class MemorySink:
    def __init__(self) -> None:
        self.logs: dict[EntityId, LogPayload] = {}

    def contains(self, log_id: EntityId) -> bool:
        return log_id in self.logs

    def append(self, payload: LogPayload) -> None:
        self.logs.setdefault(payload["id"], payload)


class FailingSink:
    def contains(self, log_id: EntityId) -> bool:
        raise LogSinkError("offline")

    def append(self, payload: LogPayload) -> None:
        raise LogSinkError("offline")


class FakeClock:
    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def __call__(self) -> pendulum.DateTime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(local_noon("2025-06-10"))


def make_controller(
    clock: FakeClock,
    sink: object = None,
    stats: Optional[dict[EntityId, HabitStats]] = None,
) -> HabitController:
    catalog = MemoryCatalog(
        [
            make_habit(id="read", name="Read", metric="TIME", xp_multiplier=2),
            make_habit(id="gym", name="Gym", metric="BOOLEAN", xp_multiplier=50),
            make_habit(id="old", name="Old", active=False),
        ],
        stats,
    )
    controller = HabitController(
        catalog, sink if sink is not None else MemorySink(), clock=clock
    )
    controller.load()
    return controller


def test_load_and_active_habits(clock: FakeClock) -> None:
    controller = make_controller(clock)
    assert [habit["id"] for habit in controller.habits] == ["read", "gym", "old"]
    assert [habit["id"] for habit in controller.active_habits()] == ["read", "gym"]


def test_unknown_habit(clock: FakeClock) -> None:
    controller = make_controller(clock)
    with pytest.raises(HabitNotFoundError):
        controller.submit_log("missing", 1)


def test_submit_applies_stats_and_forwards_payload(clock: FakeClock) -> None:
    sink = MemorySink()
    controller = make_controller(clock, sink)

    submission = controller.submit_log("read", 30, intensity=1.5, note="novel")

    assert submission["duplicate"] is False
    assert submission["synced"] is True
    assert submission["earned_xp"] == 90
    assert submission["payload"]["logical_date"] == "2025-06-10"
    assert controller.get_stats("read")["total_xp"] == 90
    assert controller.get_stats("read")["streak"] == 1
    assert controller.catalog.stats["read"]["total_volume"] == 30  # type: ignore[attr-defined]
    assert list(sink.logs) == [submission["payload"]["id"]]


def test_new_habit_stats_start_at_zero(clock: FakeClock) -> None:
    controller = make_controller(clock)
    assert controller.get_stats("gym") == {
        "streak": 0,
        "best_streak": 0,
        "total_xp": 0.0,
        "total_volume": 0.0,
        "last_log_date": None,
    }


def test_duplicate_submission_changes_nothing(clock: FakeClock) -> None:
    sink = MagicMock()
    sink.contains.return_value = False
    controller = make_controller(clock, sink)

    first = controller.submit_log("gym", None, log_id="tap-1")
    second = controller.submit_log("gym", None, log_id="tap-1")

    assert first["duplicate"] is False
    assert second["duplicate"] is True
    assert second["earned_xp"] == 0
    assert controller.get_stats("gym")["total_xp"] == 50
    sink.append.assert_called_once()


def test_resubmission_after_window_is_accepted(clock: FakeClock) -> None:
    sink = MagicMock()
    sink.contains.return_value = False
    controller = make_controller(clock, sink)
    controller.submit_log("gym", None, log_id="tap-1")

    clock.now = clock.now.add(minutes=5)
    again = controller.submit_log("gym", None, log_id="tap-1")

    assert again["duplicate"] is False
    assert controller.get_stats("gym")["total_xp"] == 100


def test_id_already_in_the_sink_is_a_duplicate(clock: FakeClock) -> None:
    sink = MemorySink()
    controller = make_controller(clock, sink)
    controller.submit_log("gym", None, log_id="tap-1")

    clock.now = clock.now.add(minutes=10)
    again = controller.submit_log("gym", None, log_id="tap-1")

    assert again["duplicate"] is True
    assert again["synced"] is True
    assert controller.get_stats("gym")["total_xp"] == 50
    assert list(sink.logs) == ["tap-1"]


def test_retry_from_a_new_process_is_not_counted_twice(
    clock: FakeClock, data_path: Path
) -> None:
    def fresh_controller() -> HabitController:
        controller = HabitController(
            LocalCatalog(HabitRepository(), StatsRepository()),
            LogRepository(),
            clock=clock,
        )
        controller.load()
        return controller

    first = fresh_controller()
    habit_id = first.save_habit(make_habit(id=None, xp_multiplier=10))
    first.submit_log(habit_id, 3, log_id="retry-1")
    first.catalog.habit_repo.flush()  # type: ignore[attr-defined]
    first.catalog.stats_repo.flush()  # type: ignore[attr-defined]
    first.sink.flush()  # type: ignore[attr-defined]

    second = fresh_controller()
    retry = second.submit_log(habit_id, 3, log_id="retry-1")

    assert retry["duplicate"] is True
    assert retry["stats"]["total_xp"] == 30
    assert StatsRepository().get_all_stats()[habit_id]["total_volume"] == 3
    assert len(LogRepository().get_all_logs()) == 1


def test_unreadable_sink_does_not_block_a_submission(
    clock: FakeClock, caplog: pytest.LogCaptureFixture
) -> None:
    controller = make_controller(clock, FailingSink())

    with caplog.at_level("WARNING", logger="questlog.controller"):
        submission = controller.submit_log("gym", None, log_id="tap-1")

    assert submission["duplicate"] is False
    assert controller.get_stats("gym")["total_xp"] == 50
    assert "Could not check log tap-1" in caplog.text


def test_fresh_ids_are_never_duplicates(clock: FakeClock) -> None:
    controller = make_controller(clock)
    controller.submit_log("gym", None)
    second = controller.submit_log("gym", None)
    assert second["duplicate"] is False
    assert controller.get_stats("gym")["total_xp"] == 100
    assert controller.get_stats("gym")["streak"] == 1


def test_sink_failure_keeps_optimistic_stats(
    clock: FakeClock, caplog: pytest.LogCaptureFixture
) -> None:
    controller = make_controller(clock, FailingSink())

    with caplog.at_level("WARNING", logger="questlog.controller"):
        submission = controller.submit_log("read", 10)

    assert submission["synced"] is False
    assert controller.get_stats("read")["total_xp"] == 20
    assert "failed to sync" in caplog.text


def test_invalid_value_is_rejected_before_anything_changes(clock: FakeClock) -> None:
    sink = MagicMock()
    sink.contains.return_value = False
    controller = make_controller(clock, sink)

    with pytest.raises(LogValidationError):
        controller.submit_log("read", 0)

    assert controller.get_stats("read")["total_xp"] == 0
    sink.append.assert_not_called()


def test_streak_grows_over_consecutive_days(clock: FakeClock) -> None:
    controller = make_controller(clock)
    for day in ["2025-06-10", "2025-06-11", "2025-06-12"]:
        clock.now = local_noon(day)
        controller.submit_log("gym", None)

    stats = controller.get_stats("gym")
    assert stats["streak"] == 3
    assert stats["best_streak"] == 3
    assert stats["last_log_date"] == "2025-06-12"


def test_backfilled_log_keeps_anchor(clock: FakeClock) -> None:
    controller = make_controller(
        clock,
        stats={
            "read": {
                "streak": 2,
                "best_streak": 2,
                "total_xp": 10,
                "total_volume": 5,
                "last_log_date": "2025-06-10",
            }
        },
    )

    submission = controller.submit_log("read", 5, date=pendulum.date(2025, 6, 1))

    assert submission["payload"]["logical_date"] == "2025-06-01"
    assert submission["stats"]["streak"] == 2
    assert submission["stats"]["last_log_date"] == "2025-06-10"
    assert submission["stats"]["total_volume"] == 10


def test_save_habit_validates_and_reloads(clock: FakeClock) -> None:
    controller = make_controller(clock)

    new_habit = make_habit(id=None, name="Save", metric="MONEY", xp_multiplier=0.5)
    habit_id = controller.save_habit(new_habit)
    assert controller.get_habit(habit_id)["name"] == "Save"

    broken = make_habit(id=None, name="   ")
    with pytest.raises(HabitValidationError):
        controller.save_habit(broken)


def test_hero_profile(clock: FakeClock) -> None:
    controller = make_controller(clock)
    controller.submit_log("gym", None)
    controller.submit_log("gym", None)
    profile = controller.hero_profile()
    assert profile["total_xp"] == 100
    assert profile["level"] == 2
