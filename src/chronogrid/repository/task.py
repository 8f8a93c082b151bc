# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Callable, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from chronogrid import configuration, time
from chronogrid.model.task import Task, TaskFormData
from chronogrid.service.optimize import optimize_task_schedule

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    def __init__(self, id: int) -> None:
        super().__init__(f"No task with id {id}")
        self.id = id


class TaskValidationError(ValueError):
    pass


def validate_form_data(form_data: TaskFormData) -> None:
    if not form_data["title"].strip():
        raise TaskValidationError("Title must not be empty")
    if not (1 <= form_data["priority"] <= 5):
        raise TaskValidationError("Priority must be between 1 and 5 (inclusive)")
    if form_data["estimated_hours"] < 0 or form_data["estimated_minutes"] < 0:
        raise TaskValidationError("Estimated time must not be negative")


class TaskRepository:
    """
    File-backed task store, one YAML document per task.

    Data is loaded lazily on first access and written back by flush(), which
    only touches the files of tasks that changed.
    """

    def __init__(
        self, clock: Callable[[], pendulum.DateTime] = time.now_utc
    ) -> None:
        self._tasks: Optional[list[Task]] = None
        self._clock = clock
        self.is_dirty = False
        self._dirty_ids: set[int] = set()
        self._deleted_ids: set[int] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_TASKS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_task = load(file_path.read_text(), Loader=Loader)
            if raw_task is not None:
                self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        logger.debug(
            "Loaded %d tasks from %s", len(self._tasks), configuration.DATA_TASKS_DIR
        )

    def __save_data(self) -> None:
        configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                serializable_task = self.__convert_task_for_serialization(
                    deepcopy(task)
                )
                file_path = configuration.DATA_TASKS_DIR / f"{task['id']}.yaml"
                file_path.write_text(dump(serializable_task, Dumper=Dumper))

        # Remove deleted entity files
        for task_id in self._deleted_ids:
            file_path = configuration.DATA_TASKS_DIR / f"{task_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        logger.debug(
            "Saved %d tasks, removed %d", len(self._dirty_ids), len(self._deleted_ids)
        )
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["deadline"] = time.date_to_str(serializable_task["deadline"])
        serializable_task["start_date"] = time.date_to_str_optional(
            serializable_task["start_date"]
        )
        serializable_task["scheduled_start"] = time.date_to_str_optional(
            serializable_task["scheduled_start"]
        )
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["deadline"] = time.date_from_str(
            str(deserializable_task["deadline"])
        )
        deserializable_task["start_date"] = time.date_from_str_optional(
            _optional_str(deserializable_task.get("start_date"))
        )
        deserializable_task["scheduled_start"] = time.date_from_str_optional(
            _optional_str(deserializable_task.get("scheduled_start"))
        )
        deserializable_task["created"] = time.datetime_from_str(
            str(deserializable_task["created"])
        )
        deserializable_task.setdefault("completed", False)
        deserializable_task.setdefault("locked", False)
        deserializable_task.setdefault("category", None)
        return cast(Task, deserializable_task)

    def reload(self) -> None:
        """Drop the cached tasks so the next access re-reads the files."""
        if self.is_dirty:
            self.flush()
        self._tasks = None

    def __find(self, id: int) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return task
        raise TaskNotFoundError(id)

    def __next_id(self) -> int:
        return max((task["id"] for task in self.tasks), default=0) + 1

    def list_tasks(self) -> list[Task]:
        """Return every task, newest first."""
        return deepcopy(
            sorted(
                self.tasks,
                key=lambda task: (task["created"], task["id"]),
                reverse=True,
            )
        )

    def get_task(self, id: int) -> Task:
        return deepcopy(self.__find(id))

    def create_task(self, form_data: TaskFormData) -> Task:
        validate_form_data(form_data)
        self.is_dirty = True

        task: Task = {
            "id": self.__next_id(),
            "title": form_data["title"].strip(),
            "priority": form_data["priority"],
            "deadline": time.to_date(form_data["deadline"]),
            "estimated_time": form_data["estimated_hours"] * 60
            + form_data["estimated_minutes"],
            "start_date": (
                time.to_date(form_data["start_date"])
                if form_data["start_date"] is not None
                else None
            ),
            "scheduled_start": None,
            "completed": False,
            "locked": False,
            "category": form_data.get("category"),
            "created": self._clock(),
        }
        self.tasks.append(task)
        self._dirty_ids.add(task["id"])
        logger.info("Created task %d: %s", task["id"], task["title"])
        return deepcopy(task)

    def update_task(self, task: Task) -> None:
        stored = self.__find(task["id"])
        if not task["title"].strip():
            raise TaskValidationError("Title must not be empty")
        if task["estimated_time"] < 0:
            raise TaskValidationError("Estimated time must not be negative")
        self.is_dirty = True
        self._dirty_ids.add(task["id"])
        stored.update(deepcopy(task))
        logger.info("Updated task %d", task["id"])

    def delete_task(self, id: int) -> None:
        task = self.__find(id)
        self.is_dirty = True
        self.tasks.remove(task)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        logger.info("Deleted task %d", id)

    def set_completion(self, id: int, completed: bool) -> None:
        task = self.__find(id)
        self.is_dirty = True
        self._dirty_ids.add(id)
        task["completed"] = completed
        logger.info("Marked task %d %s", id, "completed" if completed else "pending")

    def optimize_schedule(self) -> list[Task]:
        """Assign scheduled start dates and return the full replacement snapshot."""
        optimized = optimize_task_schedule(self.list_tasks(), now=self._clock())
        for task in optimized:
            self.update_task(task)
        logger.info("Optimized schedule for %d tasks", len(optimized))
        return deepcopy(optimized)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


TASK_REPO = TaskRepository()
