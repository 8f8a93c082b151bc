# SPDX-License-Identifier: MIT

import math
from typing import Optional

from chronogrid.configuration import CalendarGeometry, default_geometry
from chronogrid.model.summary import TaskSummary
from chronogrid.model.task import Task


def polar_to_cartesian(
    center_x: float, center_y: float, radius: float, angle: float
) -> tuple[float, float]:
    """Convert an angle in degrees, measured clockwise from 12 o'clock, to a point."""
    radians = (angle - 90) * math.pi / 180
    return (
        center_x + radius * math.cos(radians),
        center_y + radius * math.sin(radians),
    )


def arc_path(
    start_angle: float,
    end_angle: float,
    geometry: Optional[CalendarGeometry] = None,
) -> str:
    """
    Build an SVG path for a pie sector between two angles.

    The path moves to the centre, draws a line to the end-angle point, arcs
    back to the start-angle point and closes.
    """
    if geometry is None:
        geometry = default_geometry()
    center_x = geometry["pie_center_x"]
    center_y = geometry["pie_center_y"]
    radius = geometry["pie_radius"]

    start_x, start_y = polar_to_cartesian(center_x, center_y, radius, end_angle)
    end_x, end_y = polar_to_cartesian(center_x, center_y, radius, start_angle)
    large_arc_flag = 1 if end_angle - start_angle > 180 else 0

    return " ".join(
        [
            f"M {_fmt(center_x)} {_fmt(center_y)}",
            f"L {_fmt(start_x)} {_fmt(start_y)}",
            f"A {_fmt(radius)} {_fmt(radius)} 0 {large_arc_flag} 0 {_fmt(end_x)} {_fmt(end_y)}",
            "Z",
        ]
    )


def summarize(
    tasks: list[Task], geometry: Optional[CalendarGeometry] = None
) -> TaskSummary:
    """
    Count completed and pending tasks and build the pie chart sectors.

    The completed sector spans [360 - completed_angle, 360] and the pending
    sector spans [0, 360 - completed_angle]. An empty collection produces no
    sectors, only the placeholder ring. A sector with no tasks has no path.
    """
    total = len(tasks)
    completed_count = sum(1 for task in tasks if task["completed"])
    pending_count = total - completed_count

    if total == 0:
        return {
            "completed_count": 0,
            "pending_count": 0,
            "completed_percent": 0,
            "pending_percent": 0,
            "completed_angle": 0,
            "completed_arc_path": None,
            "pending_arc_path": None,
            "placeholder_ring": True,
        }

    completed_percent = completed_count / total * 100
    pending_percent = pending_count / total * 100
    completed_angle = completed_percent / 100 * 360
    boundary = 360 - completed_angle

    return {
        "completed_count": completed_count,
        "pending_count": pending_count,
        "completed_percent": completed_percent,
        "pending_percent": pending_percent,
        "completed_angle": completed_angle,
        "completed_arc_path": (
            arc_path(boundary, 360, geometry) if completed_count > 0 else None
        ),
        "pending_arc_path": (
            arc_path(0, boundary, geometry) if pending_count > 0 else None
        ),
        "placeholder_ring": False,
    }


def _fmt(value: float) -> str:
    rounded = round(value, 4)
    if rounded == 0:
        rounded = 0.0
    if rounded == int(rounded):
        return str(int(rounded))
    return str(rounded)
