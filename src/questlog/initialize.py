# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from questlog import configuration
from questlog.controller import HabitController
from questlog.repository.catalog import LocalCatalog
from questlog.repository.configuration import CONFIGURATION_REPO
from questlog.repository.log import LOG_REPO
from questlog.service.idempotency import window_from_minutes
from questlog.view import state as view_state

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])


def create_controller() -> HabitController:
    config = CONFIGURATION_REPO.get_config()
    controller = HabitController(
        LocalCatalog(),
        LOG_REPO,
        day_start_offset_hours=config["day_start_offset_hours"],
        idempotency_window=window_from_minutes(config["idempotency_window_minutes"]),
    )
    controller.load()
    return controller


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        logger.info("Writing default configuration to %s", configuration.APP_CONFIG_PATH)
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    # Directory-based entity stores (one file per entity)
    if not configuration.DATA_HABITS_DIR.is_dir():
        configuration.DATA_HABITS_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_HABITS_DIR / ".gitkeep").touch()
    if not configuration.DATA_LOGS_DIR.is_dir():
        configuration.DATA_LOGS_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_LOGS_DIR / ".gitkeep").touch()

    if not configuration.DATA_STATS_PATH.is_file():
        configuration.DATA_STATS_PATH.write_text(dump({"stats": {}}, Dumper=Dumper))
