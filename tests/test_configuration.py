# SPDX-License-Identifier: MIT

from pathlib import Path

from yaml import safe_dump, safe_load

from questlog import configuration
from questlog.repository.configuration import ConfigurationRepository


def test_defaults_without_a_config_file(data_path: Path) -> None:
    config = ConfigurationRepository().get_config()
    assert config["day_start_offset_hours"] == 4
    assert config["idempotency_window_minutes"] == 5
    assert config["data_path"] is None


def test_missing_settings_are_filled_in(data_path: Path) -> None:
    configuration.APP_CONFIG_PATH.write_text(safe_dump({"day_start_offset_hours": 5}))

    config = ConfigurationRepository().get_config()
    assert config["day_start_offset_hours"] == 5
    assert config["idempotency_window_minutes"] == 5
    assert config["show_header"] is True


def test_update_and_flush(data_path: Path) -> None:
    repo = ConfigurationRepository()
    repo.update_config(day_start_offset_hours=3, idempotency_window_minutes=1)
    assert repo.flush() is True

    stored = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert stored["day_start_offset_hours"] == 3
    assert stored["idempotency_window_minutes"] == 1


def test_data_path_setting_moves_every_store(
    data_path: Path, tmp_path: Path
) -> None:
    elsewhere = tmp_path / "elsewhere"
    configuration.APP_CONFIG_PATH.write_text(safe_dump({"data_path": str(elsewhere)}))

    configuration.load_data_path_configuration()

    assert configuration.DATA_PATH == elsewhere
    assert configuration.DATA_HABITS_DIR == elsewhere / "habits"
    assert configuration.DATA_LOGS_DIR == elsewhere / "logs"
    assert configuration.DATA_STATS_PATH == elsewhere / "stats.yaml"
