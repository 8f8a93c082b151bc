# SPDX-License-Identifier: MIT

from chronogrid.calendar.span import occupancy_span
from chronogrid.model.task import Task
from chronogrid.time import date_to_display_str


def task_state(task: Task) -> str:
    """
    Get the state symbol for a task.

    Returns:
        "X" if completed, "L" if locked, " " if open
    """
    if task["completed"]:
        return "X"
    if task["locked"]:
        return "L"
    return " "


def format_span(task: Task) -> str:
    span = occupancy_span(task)
    if span["start"] == span["end"]:
        return date_to_display_str(span["start"])
    return f"{date_to_display_str(span['start'])} → {date_to_display_str(span['end'])}"


def truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."
