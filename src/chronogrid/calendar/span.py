# SPDX-License-Identifier: MIT

import datetime
import math

import pendulum

from chronogrid.model.calendar import OccupancySpan
from chronogrid.model.task import Task
from chronogrid.time import to_date

MINUTES_PER_DAY = 24 * 60


def span_start(task: Task) -> pendulum.Date:
    """
    Get the day a task begins occupying the calendar.

    The optimizer's scheduled start wins over the user's start date. A task
    with neither is placed on its deadline day.
    """
    if task["scheduled_start"] is not None:
        return to_date(task["scheduled_start"])
    if task["start_date"] is not None:
        return to_date(task["start_date"])
    return to_date(task["deadline"])


def span_days(task: Task) -> int:
    """Number of calendar days a task occupies, never less than one."""
    return max(1, math.ceil(task["estimated_time"] / MINUTES_PER_DAY))


def occupancy_span(task: Task) -> OccupancySpan:
    start = span_start(task)
    return {"start": start, "end": start.add(days=span_days(task) - 1)}


def occupies_date(task: Task, date: datetime.date) -> bool:
    span = occupancy_span(task)
    return span["start"] <= to_date(date) <= span["end"]
