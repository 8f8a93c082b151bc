from pathlib import Path
from typing import Any, Callable

import pendulum
import pytest

from chronogrid import configuration
from chronogrid.initialize import initialize
from chronogrid.model.task import Task
from chronogrid.repository.configuration import CONFIGURATION_REPO
from chronogrid.repository.task import TASK_REPO, TaskRepository

FIXED_NOW = pendulum.datetime(2024, 3, 1, 12, 0, 0, tz="UTC")


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Build a task with sensible defaults; keyword arguments override fields."""
    next_id = iter(range(1, 10_000))

    def factory(**overrides: Any) -> Task:
        task: Task = {
            "id": next(next_id),
            "title": "Task",
            "priority": 3,
            "deadline": pendulum.date(2024, 3, 10),
            "estimated_time": 60,
            "start_date": None,
            "scheduled_start": None,
            "completed": False,
            "locked": False,
            "category": None,
            "created": FIXED_NOW,
        }
        task.update(overrides)  # type: ignore[typeddict-item]
        return task

    return factory


@pytest.fixture
def data_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every configured path at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "log")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_TASKS_DIR", data_path / "tasks")
    return tmp_path


@pytest.fixture
def task_repo(data_dirs: Path) -> TaskRepository:
    """A repository with a clock that advances one minute per created task."""
    ticks = iter(range(10_000))
    return TaskRepository(clock=lambda: FIXED_NOW.add(minutes=next(ticks)))


@pytest.fixture
def app_env(data_dirs: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Reset the shared repositories and initialize a fresh application home."""
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_tasks", None)
    monkeypatch.setattr(TASK_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_dirty_ids", set())
    monkeypatch.setattr(TASK_REPO, "_deleted_ids", set())
    initialize()
    return data_dirs
