# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "questlog"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_DATA_PATH = platformdirs.user_data_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = DEFAULT_DATA_PATH
DATA_HABITS_DIR: Path = DATA_PATH / "habits"
DATA_LOGS_DIR: Path = DATA_PATH / "logs"
DATA_STATS_PATH: Path = DATA_PATH / "stats.yaml"


class Configuration(TypedDict):
    day_start_offset_hours: float
    idempotency_window_minutes: float
    data_path: Optional[str]
    show_header: bool
    random_color_for_habits: NotRequired[bool]


def get_default_configuration() -> Configuration:
    return {
        "day_start_offset_hours": 4,
        "idempotency_window_minutes": 5,
        "data_path": None,
        "show_header": True,
        "random_color_for_habits": False,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_HABITS_DIR, DATA_LOGS_DIR, DATA_STATS_PATH

    DATA_PATH = data_path
    DATA_HABITS_DIR = DATA_PATH / "habits"
    DATA_LOGS_DIR = DATA_PATH / "logs"
    DATA_STATS_PATH = DATA_PATH / "stats.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
