# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from questlog import configuration, time
from questlog.model.entity_id import EntityId
from questlog.model.log import LogPayload
from questlog.service.collaborator import LogSinkError

logger = logging.getLogger(__name__)


class LogRepository:
    """
    Local log sink, one YAML file per log named after the log id.

    Appending a log whose id is already stored is a no-op.
    """

    def __init__(self) -> None:
        self._logs: Optional[list[LogPayload]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def logs(self) -> list[LogPayload]:
        if self._logs is None:
            self.__load_data()
        if self._logs is None:
            raise ValueError()
        return self._logs

    def __load_data(self) -> None:
        self._logs = []
        if not configuration.DATA_LOGS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_LOGS_DIR.iterdir()):
            if file_path.suffix != ".yaml" or file_path.name == ".gitkeep":
                continue
            raw_log = load(file_path.read_text(), Loader=Loader)
            if raw_log is not None:
                self._logs.append(self.__convert_log_for_deserialization(raw_log))
        self._logs.sort(key=lambda log: log["timestamp"])

    def __save_data(self) -> None:
        configuration.DATA_LOGS_DIR.mkdir(parents=True, exist_ok=True)
        for log in self.logs:
            if log["id"] in self._dirty_ids:
                serializable_log = self.__convert_log_for_serialization(deepcopy(log))
                file_path = configuration.DATA_LOGS_DIR / f"{log['id']}.yaml"
                file_path.write_text(dump(serializable_log, Dumper=Dumper))

        self._dirty_ids.clear()

    def flush(self) -> bool:
        if self._logs is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_log_for_serialization(self, log: LogPayload) -> dict[str, Any]:
        serializable_log = cast(dict[str, Any], log)
        serializable_log["timestamp"] = time.datetime_to_iso_str(
            serializable_log["timestamp"]
        )
        return serializable_log

    def __convert_log_for_deserialization(self, log: dict[str, Any]) -> LogPayload:
        deserializable_log = log
        deserializable_log["timestamp"] = time.datetime_from_str(
            deserializable_log["timestamp"]
        )
        return cast(LogPayload, deserializable_log)

    def contains(self, log_id: EntityId) -> bool:
        try:
            return any(log["id"] == log_id for log in self.logs)
        except (OSError, YAMLError) as e:
            raise LogSinkError(f"Could not read stored logs: {e}") from e

    def append(self, payload: LogPayload) -> None:
        if self.contains(payload["id"]):
            logger.info("Log %s is already stored, skipping", payload["id"])
            return

        self.is_dirty = True
        self.logs.append(deepcopy(payload))
        self._dirty_ids.add(payload["id"])

    def get_all_logs(self) -> list[LogPayload]:
        return deepcopy(self.logs)

    def get_logs_for_habit(self, habit_id: EntityId) -> list[LogPayload]:
        return deepcopy([log for log in self.logs if log["habit_id"] == habit_id])


LOG_REPO = LogRepository()
