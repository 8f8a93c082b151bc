# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from chronogrid.color import (
    COMPLETED_SLICE_COLOR,
    EMPTY_RING_COLOR_DARK,
    EMPTY_RING_COLOR_LIGHT,
    PENDING_SLICE_COLOR,
    SURFACE_COLOR_DARK,
    SURFACE_COLOR_LIGHT,
)
from chronogrid.configuration import CalendarGeometry, default_geometry
from chronogrid.model.summary import TaskSummary
from chronogrid.view.state import get_dark_mode
from chronogrid.view.views.header import header


def summary_view(summary: TaskSummary, bar_width: int = 40) -> None:
    header("Task Statistics", "summary")

    console = Console()

    if summary["placeholder_ring"]:
        console.print(Text("  ( )  No tasks yet", style="dim"))
        console.print()
        return

    table = Table(box=box.SIMPLE)
    table.add_column("state")
    table.add_column("count", justify="right")
    table.add_column("percent", justify="right")
    table.add_row(
        Text("completed", style=COMPLETED_SLICE_COLOR),
        str(summary["completed_count"]),
        f"{summary['completed_percent']:.1f}%",
    )
    table.add_row(
        Text("pending", style=PENDING_SLICE_COLOR),
        str(summary["pending_count"]),
        f"{summary['pending_percent']:.1f}%",
    )
    table.add_row(
        "total",
        str(summary["completed_count"] + summary["pending_count"]),
        "",
    )
    console.print(table)
    console.print(summary_bar(summary, bar_width))
    console.print()


def summary_bar(summary: TaskSummary, width: int) -> Text:
    """A single-line stand-in for the pie chart: pending first, completed last."""
    completed_chars = round(summary["completed_percent"] / 100 * width)
    bar = Text()
    bar.append("█" * (width - completed_chars), style=PENDING_SLICE_COLOR)
    bar.append("█" * completed_chars, style=COMPLETED_SLICE_COLOR)
    return bar


def summary_svg(
    summary: TaskSummary, geometry: Optional[CalendarGeometry] = None
) -> str:
    """
    Render the summary as a standalone SVG donut chart.

    An empty summary renders a dashed placeholder ring instead of sectors.
    """
    if geometry is None:
        geometry = default_geometry()
    dark_mode = get_dark_mode()
    surface = SURFACE_COLOR_DARK if dark_mode else SURFACE_COLOR_LIGHT
    center_x = geometry["pie_center_x"]
    center_y = geometry["pie_center_y"]
    radius = geometry["pie_radius"]
    size = max(center_x, center_y) * 2

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size:g}" height="{size:g}" '
        f'viewBox="0 0 {size:g} {size:g}">'
    ]

    if summary["placeholder_ring"]:
        ring = EMPTY_RING_COLOR_DARK if dark_mode else EMPTY_RING_COLOR_LIGHT
        parts.append(
            f'<circle cx="{center_x:g}" cy="{center_y:g}" r="{radius:g}" fill="none" '
            f'stroke="{ring}" stroke-width="2" stroke-dasharray="5,5"/>'
        )
        parts.append("</svg>")
        return "\n".join(parts)

    if summary["completed_count"] > 0 and summary["pending_count"] == 0:
        # A full-circle arc degenerates to a point, draw the circle instead
        parts.append(
            f'<circle cx="{center_x:g}" cy="{center_y:g}" r="{radius:g}" '
            f'fill="{COMPLETED_SLICE_COLOR}"/>'
        )
    elif summary["pending_count"] > 0 and summary["completed_count"] == 0:
        parts.append(
            f'<circle cx="{center_x:g}" cy="{center_y:g}" r="{radius:g}" '
            f'fill="{PENDING_SLICE_COLOR}"/>'
        )
    else:
        parts.append(
            f'<path d="{summary["pending_arc_path"]}" fill="{PENDING_SLICE_COLOR}" '
            f'stroke="{surface}" stroke-width="2"/>'
        )
        parts.append(
            f'<path d="{summary["completed_arc_path"]}" fill="{COMPLETED_SLICE_COLOR}" '
            f'stroke="{surface}" stroke-width="2"/>'
        )

    total = summary["completed_count"] + summary["pending_count"]
    parts.append(
        f'<circle cx="{center_x:g}" cy="{center_y:g}" r="{radius * 0.5625:g}" '
        f'fill="{surface}"/>'
    )
    parts.append(
        f'<text x="{center_x:g}" y="{center_y:g}" text-anchor="middle" '
        f'dominant-baseline="middle">{total}</text>'
    )
    parts.append("</svg>")
    return "\n".join(parts)
