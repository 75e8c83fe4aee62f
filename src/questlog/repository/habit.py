# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from questlog import configuration, time
from questlog.model.entity_id import EntityId, generate_entity_id
from questlog.model.habit import Habit
from questlog.service.habit import HabitNotFoundError


class HabitRepository:
    def __init__(self) -> None:
        self._habits: Optional[list[Habit]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def habits(self) -> list[Habit]:
        if self._habits is None:
            self.__load_data()
        if self._habits is None:
            raise ValueError()
        return self._habits

    def __load_data(self) -> None:
        self._habits = []
        if not configuration.DATA_HABITS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_HABITS_DIR.iterdir()):
            if file_path.suffix != ".yaml" or file_path.name == ".gitkeep":
                continue
            raw_habit = load(file_path.read_text(), Loader=Loader)
            if raw_habit is not None:
                self._habits.append(self.__convert_habit_for_deserialization(raw_habit))

    def __save_data(self) -> None:
        configuration.DATA_HABITS_DIR.mkdir(parents=True, exist_ok=True)
        for habit in self.habits:
            if habit["id"] in self._dirty_ids:
                serializable_habit = self.__convert_habit_for_serialization(
                    deepcopy(habit)
                )
                file_path = configuration.DATA_HABITS_DIR / f"{habit['id']}.yaml"
                file_path.write_text(dump(serializable_habit, Dumper=Dumper))

        self._dirty_ids.clear()

    def flush(self) -> bool:
        if self._habits is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_habit_for_serialization(self, habit: Habit) -> dict[str, Any]:
        serializable_habit = cast(dict[str, Any], habit)
        serializable_habit["created"] = time.datetime_to_iso_str(
            serializable_habit["created"]
        )
        serializable_habit["updated"] = time.datetime_to_iso_str(
            serializable_habit["updated"]
        )
        return serializable_habit

    def __convert_habit_for_deserialization(self, habit: dict[str, Any]) -> Habit:
        deserializable_habit = habit
        deserializable_habit["created"] = time.datetime_from_str(
            deserializable_habit["created"]
        )
        deserializable_habit["updated"] = time.datetime_from_str(
            deserializable_habit["updated"]
        )
        return cast(Habit, deserializable_habit)

    def save_new_habit(self, habit: Habit) -> EntityId:
        self.is_dirty = True

        habit["id"] = generate_entity_id()

        self.habits.append(habit)
        self._dirty_ids.add(habit["id"])

        return habit["id"]

    def save_habit(self, habit: Habit) -> EntityId:
        """Create the habit if it has no id yet, otherwise replace the stored one."""
        if habit["id"] is None:
            return self.save_new_habit(habit)

        index = self.__index_of(habit["id"])
        self.is_dirty = True
        self._dirty_ids.add(habit["id"])

        habit["updated"] = time.now_utc()
        self.habits[index] = habit
        return habit["id"]

    def __index_of(self, id: EntityId) -> int:
        for index, habit in enumerate(self.habits):
            if habit["id"] == id:
                return index
        raise HabitNotFoundError(id)

    def get_all_habits(self) -> list[Habit]:
        return deepcopy(self.habits)

    def get_habit(self, id: EntityId) -> Habit:
        return deepcopy(self.habits[self.__index_of(id)])


HABIT_REPO = HabitRepository()
