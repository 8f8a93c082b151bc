# SPDX-License-Identifier: MIT

import datetime
import math
from typing import Optional

import pendulum

from chronogrid.calendar.span import occupies_date
from chronogrid.model.calendar import CalendarCell, Granularity
from chronogrid.model.task import Task
from chronogrid.time import to_date, today_local


def week_start(date: datetime.date) -> pendulum.Date:
    """Return the Sunday on or before the given date."""
    day = to_date(date)
    # isoweekday: Monday = 1, ..., Sunday = 7
    return day.subtract(days=day.isoweekday() % 7)


def tasks_for_date(tasks: list[Task], date: datetime.date) -> list[Task]:
    return [task for task in tasks if occupies_date(task, date)]


def generate_grid(
    focused_date: datetime.date,
    granularity: Granularity,
    tasks: list[Task],
    today: Optional[datetime.date] = None,
) -> list[CalendarCell]:
    """
    Build the ordered calendar cells for the period containing focused_date.

    Args:
        focused_date: The anchor date of the displayed period
        granularity: Month, week or day
        tasks: The current task snapshot
        today: The current date (defaults to today in the local timezone)

    Returns:
        Chronologically ordered cells. Month grids always hold whole weeks,
        starting on a Sunday and padded with real dates from the adjacent
        months.
    """
    focused = to_date(focused_date)
    current_day = to_date(today) if today is not None else today_local()

    if granularity == Granularity.MONTH:
        month_start = focused.start_of("month")
        month_end = focused.end_of("month")
        grid_start = week_start(month_start)
        days_through_month_end = grid_start.diff(month_end).in_days() + 1
        total_cells = math.ceil(days_through_month_end / 7) * 7
        dates = [grid_start.add(days=offset) for offset in range(total_cells)]
        return [
            _build_cell(
                date,
                date.month == focused.month and date.year == focused.year,
                current_day,
                tasks,
            )
            for date in dates
        ]

    if granularity == Granularity.WEEK:
        grid_start = week_start(focused)
        return [
            _build_cell(grid_start.add(days=offset), True, current_day, tasks)
            for offset in range(7)
        ]

    return [_build_cell(focused, True, current_day, tasks)]


def _build_cell(
    date: pendulum.Date,
    is_in_focused_period: bool,
    today: pendulum.Date,
    tasks: list[Task],
) -> CalendarCell:
    return {
        "date": date,
        "is_in_focused_period": is_in_focused_period,
        "is_today": date == today,
        "occupying_tasks": tasks_for_date(tasks, date),
    }
