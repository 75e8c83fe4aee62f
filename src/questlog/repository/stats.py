# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from questlog import configuration
from questlog.model.entity_id import EntityId
from questlog.model.habit_stats import HabitStats
from questlog.service.stats import normalize_stats


class StatsRepository:
    """Aggregate stats for every habit, stored in one file keyed by habit id."""

    def __init__(self) -> None:
        self._stats: Optional[dict[EntityId, HabitStats]] = None
        self.is_dirty = False

    @property
    def stats(self) -> dict[EntityId, HabitStats]:
        if self._stats is None:
            self.__load_data()
        if self._stats is None:
            raise ValueError()
        return self._stats

    def __load_data(self) -> None:
        self._stats = {}
        if not configuration.DATA_STATS_PATH.is_file():
            return
        stats_data: Optional[dict[str, Any]] = load(
            configuration.DATA_STATS_PATH.read_text(), Loader=Loader
        )
        if stats_data is None:
            return
        for habit_id, raw_stats in (stats_data.get("stats") or {}).items():
            # Stored best streaks are kept as seeded, even below the streak
            self._stats[habit_id] = normalize_stats(raw_stats)

    def __save_data(self, stats: dict[EntityId, HabitStats]) -> None:
        configuration.DATA_STATS_PATH.parent.mkdir(parents=True, exist_ok=True)
        stats_data = {"stats": dict(sorted(stats.items()))}
        configuration.DATA_STATS_PATH.write_text(dump(stats_data, Dumper=Dumper))

    def flush(self) -> bool:
        if self._stats is not None and self.is_dirty:
            self.__save_data(self._stats)
            self.is_dirty = False
            return True
        return False

    def save_stats(self, habit_id: EntityId, stats: HabitStats) -> None:
        self.is_dirty = True
        self.stats[habit_id] = deepcopy(stats)

    def get_all_stats(self) -> dict[EntityId, HabitStats]:
        return deepcopy(self.stats)


STATS_REPO = StatsRepository()
