# SPDX-License-Identifier: MIT

from typing import Optional

from chronogrid.calendar.span import occupancy_span
from chronogrid.configuration import (
    DEFAULT_CALENDAR_GEOMETRY,
    CalendarGeometry,
    default_geometry,
)
from chronogrid.model.calendar import CalendarCell, CellLayout, TaskBar
from chronogrid.model.task import Task

PRIORITY_COLORS: dict[int, str] = {
    1: "#ef4444",
    2: "#f97316",
    3: "#eab308",
    4: "#22c55e",
    5: "#06b6d4",
}
FALLBACK_PRIORITY_COLOR = "#6b7280"

COMPLETED_OPACITY = 0.6
PENDING_OPACITY = 0.9


def priority_color(priority: object) -> str:
    if isinstance(priority, int) and not isinstance(priority, bool):
        return PRIORITY_COLORS.get(priority, FALLBACK_PRIORITY_COLOR)
    return FALLBACK_PRIORITY_COLOR


def overflow_label(overflow_count: int) -> str:
    return f"+{overflow_count}"


def layout_cell(
    cell: CalendarCell,
    max_visible_bars: Optional[int] = None,
    geometry: Optional[CalendarGeometry] = None,
) -> CellLayout:
    """
    Stack the tasks occupying a cell into fixed-slot horizontal bars.

    Args:
        cell: The calendar cell to lay out
        max_visible_bars: Bars drawn before the rest collapse into the overflow
            indicator (defaults to the geometry's max_visible_bars)
        geometry: Layout constants (defaults to the built-in geometry)

    Returns:
        The bars in task order, the overflow count and the overflow indicator's
        vertical offset (None when nothing overflows)
    """
    if geometry is None:
        geometry = default_geometry()
    if max_visible_bars is None:
        max_visible_bars = geometry["max_visible_bars"]
    max_visible_bars = max(0, max_visible_bars)

    tasks = cell["occupying_tasks"]
    bars = [
        _layout_bar(task, cell, index, geometry)
        for index, task in enumerate(tasks[:max_visible_bars])
    ]

    overflow_count = max(0, len(tasks) - max_visible_bars)
    overflow_top = None
    if overflow_count > 0:
        overflow_top = _slot_top(max_visible_bars, geometry)

    return {
        "bars": bars,
        "overflow_count": overflow_count,
        "overflow_top": overflow_top,
    }


def bar_width_percent(task: Task, geometry: Optional[CalendarGeometry] = None) -> float:
    """Width of a single-day bar, proportional to the estimate against a reference workday."""
    if geometry is None:
        geometry = default_geometry()
    reference_day_minutes = geometry["reference_day_minutes"]
    if reference_day_minutes <= 0:
        reference_day_minutes = DEFAULT_CALENDAR_GEOMETRY["reference_day_minutes"]
    proportional = task["estimated_time"] / reference_day_minutes * 100
    return min(100.0, max(float(geometry["min_bar_percent"]), proportional))


def _layout_bar(
    task: Task, cell: CalendarCell, index: int, geometry: CalendarGeometry
) -> TaskBar:
    span = occupancy_span(task)

    if span["start"] == span["end"]:
        width_percent = bar_width_percent(task, geometry)
        is_span_start = True
        is_span_end = True
    else:
        # Multi-day spans fill every day they cover
        width_percent = 100.0
        is_span_start = cell["date"] == span["start"]
        is_span_end = cell["date"] == span["end"]

    return {
        "task": task,
        "width_percent": width_percent,
        "left_percent": 0.0,
        "stack_top": _slot_top(index, geometry),
        "is_span_start": is_span_start,
        "is_span_end": is_span_end,
        "color": priority_color(task["priority"]),
        "opacity": COMPLETED_OPACITY if task["completed"] else PENDING_OPACITY,
    }


def _slot_top(index: int, geometry: CalendarGeometry) -> int:
    return geometry["bar_base_offset"] + index * geometry["bar_height"]
