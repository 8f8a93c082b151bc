# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from chronogrid.model.task import Task


class Granularity(StrEnum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class Direction(StrEnum):
    PREV = "prev"
    NEXT = "next"


class OccupancySpan(TypedDict):
    start: pendulum.Date
    end: pendulum.Date


class CalendarCell(TypedDict):
    date: pendulum.Date
    is_in_focused_period: bool
    is_today: bool
    occupying_tasks: list[Task]


class NavigationState(TypedDict):
    focused_date: pendulum.Date
    granularity: Granularity
    selected_date: Optional[pendulum.Date]


class TaskBar(TypedDict):
    task: Task
    width_percent: float
    left_percent: float
    stack_top: int
    is_span_start: bool
    is_span_end: bool
    color: str
    opacity: float


class CellLayout(TypedDict):
    bars: list[TaskBar]
    overflow_count: int
    overflow_top: Optional[int]
