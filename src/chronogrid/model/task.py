# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum


class Task(TypedDict):
    id: int
    title: str
    priority: int
    deadline: pendulum.Date
    estimated_time: int
    start_date: Optional[pendulum.Date]
    scheduled_start: Optional[pendulum.Date]
    completed: bool
    locked: bool
    category: Optional[str]
    created: pendulum.DateTime


class TaskFormData(TypedDict):
    title: str
    priority: int
    deadline: pendulum.Date
    estimated_hours: int
    estimated_minutes: int
    start_date: Optional[pendulum.Date]
    category: NotRequired[Optional[str]]
