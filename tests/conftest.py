# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Iterator

import pytest

from questlog import configuration
from questlog.repository.configuration import CONFIGURATION_REPO
from questlog.repository.habit import HABIT_REPO
from questlog.repository.log import LOG_REPO
from questlog.repository.stats import STATS_REPO


@pytest.fixture
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point every repository at a temporary directory with empty caches."""
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(configuration, "DATA_HABITS_DIR", tmp_path / "data" / "habits")
    monkeypatch.setattr(configuration, "DATA_LOGS_DIR", tmp_path / "data" / "logs")
    monkeypatch.setattr(
        configuration, "DATA_STATS_PATH", tmp_path / "data" / "stats.yaml"
    )

    for repo, cache in [
        (CONFIGURATION_REPO, "_config"),
        (HABIT_REPO, "_habits"),
        (STATS_REPO, "_stats"),
        (LOG_REPO, "_logs"),
    ]:
        monkeypatch.setattr(repo, cache, None)
        monkeypatch.setattr(repo, "is_dirty", False)
    monkeypatch.setattr(HABIT_REPO, "_dirty_ids", set())
    monkeypatch.setattr(LOG_REPO, "_dirty_ids", set())

    yield tmp_path / "data"


