# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum

from chronogrid.model.task import Task
from chronogrid.time import now_utc


def deadline_buffer_hours(priority: int) -> int:
    """Slack kept between the scheduled start and the deadline, by priority."""
    if priority >= 5:
        return 24
    if priority == 4:
        return 48
    if priority == 3:
        return 72
    return 96


def ideal_start(task: Task, now: pendulum.DateTime) -> pendulum.DateTime:
    required_minutes = task["estimated_time"] + deadline_buffer_hours(
        task["priority"]
    ) * 60

    if task["priority"] >= 3:
        # Urgent work starts soon; the higher the priority the sooner
        start = now.add(seconds=required_minutes * 60 / task["priority"])
    else:
        deadline = pendulum.datetime(
            task["deadline"].year,
            task["deadline"].month,
            task["deadline"].day,
            23,
            59,
            59,
            tz="UTC",
        )
        start = deadline.subtract(minutes=required_minutes)

    if start < now:
        return now.add(hours=1)
    return start


def optimize_task_schedule(
    tasks: list[Task], now: Optional[pendulum.DateTime] = None
) -> list[Task]:
    """
    Assign a scheduled start date to every open task.

    Tasks are ordered by priority (highest first) and then by deadline.
    Completed and locked tasks are returned unchanged.

    Args:
        tasks: The current task snapshot
        now: The reference instant (defaults to the current UTC time)

    Returns:
        A new list holding every task, in optimized order
    """
    if now is None:
        now = now_utc()

    optimized = sorted(
        deepcopy(tasks), key=lambda task: (-task["priority"], task["deadline"])
    )
    for task in optimized:
        if task["completed"] or task["locked"]:
            continue
        task["scheduled_start"] = ideal_start(task, now).date()

    return optimized
