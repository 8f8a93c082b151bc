# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum
from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from chronogrid.calendar.grid import generate_grid, tasks_for_date, week_start
from chronogrid.calendar.layout import layout_cell, overflow_label, priority_color
from chronogrid.color import (
    OUTSIDE_PERIOD_STYLE,
    SELECTED_STYLE,
    TODAY_STYLE_DARK,
    TODAY_STYLE_LIGHT,
)
from chronogrid.configuration import CalendarGeometry, default_geometry
from chronogrid.model.calendar import (
    CalendarCell,
    Granularity,
    NavigationState,
    TaskBar,
)
from chronogrid.model.task import Task
from chronogrid.time import date_to_long_display_str
from chronogrid.view.state import get_dark_mode
from chronogrid.view.util import truncate
from chronogrid.view.views.header import header

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def period_title(focused_date: pendulum.Date, granularity: Granularity) -> str:
    if granularity == Granularity.MONTH:
        return focused_date.format("MMMM YYYY")
    if granularity == Granularity.WEEK:
        return f"Week of {week_start(focused_date).format('MMM D, YYYY')}"
    return focused_date.format("dddd, MMMM D, YYYY")


def calendar_view(
    state: NavigationState,
    tasks: list[Task],
    geometry: Optional[CalendarGeometry] = None,
    cell_width: int = 20,
    max_visible_bars: Optional[int] = None,
    today: Optional[datetime.date] = None,
    error: Optional[str] = None,
) -> None:
    """
    Display the calendar grid for the navigation state, plus the detail panel
    for the selected date when one is set.

    Args:
        state: Focused date, granularity and selected date
        tasks: The current task snapshot
        geometry: Layout constants (defaults to the built-in geometry)
        cell_width: Width of each day cell in characters (defaults to 20)
        max_visible_bars: Bars drawn per cell before the overflow indicator
        today: The current date (defaults to today in the local timezone)
        error: Message shown below the grid when the snapshot is stale
    """
    header(period_title(state["focused_date"], state["granularity"]), "calendar")

    console = Console()
    console.print(
        render_calendar(state, tasks, geometry, cell_width, max_visible_bars, today)
    )
    if error is not None:
        console.print(f"[red]{error}[/red]")
    console.print()


def render_calendar(
    state: NavigationState,
    tasks: list[Task],
    geometry: Optional[CalendarGeometry] = None,
    cell_width: int = 20,
    max_visible_bars: Optional[int] = None,
    today: Optional[datetime.date] = None,
) -> RenderableType:
    cells = generate_grid(state["focused_date"], state["granularity"], tasks, today)
    grid = render_grid(
        cells,
        state["granularity"],
        geometry,
        cell_width,
        max_visible_bars,
        state["selected_date"],
    )
    if state["selected_date"] is None:
        return grid
    return Group(grid, render_detail_panel(state["selected_date"], tasks))


def render_grid(
    cells: list[CalendarCell],
    granularity: Granularity,
    geometry: Optional[CalendarGeometry] = None,
    cell_width: int = 20,
    max_visible_bars: Optional[int] = None,
    selected_date: Optional[pendulum.Date] = None,
) -> Table:
    """
    Render calendar cells as a table, one row per week.

    Args:
        cells: Chronologically ordered cells from generate_grid
        granularity: Month, week or day
        geometry: Layout constants
        cell_width: Width of each day cell in characters
        max_visible_bars: Bars drawn per cell before the overflow indicator
        selected_date: Date to highlight, if any

    Returns:
        A Table containing the calendar grid
    """
    if geometry is None:
        geometry = default_geometry()

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))

    if granularity == Granularity.DAY:
        day_width = max(cell_width, 40)
        table.add_column(cells[0]["date"].format("ddd"), style="bold", width=day_width)
        table.add_row(
            render_cell(cells[0], geometry, day_width, max_visible_bars, selected_date)
        )
        return table

    for day_name in WEEKDAY_NAMES:
        table.add_column(day_name, style="bold", width=cell_width)

    for week_index in range(0, len(cells), 7):
        week = cells[week_index : week_index + 7]
        table.add_row(
            *[
                render_cell(cell, geometry, cell_width, max_visible_bars, selected_date)
                for cell in week
            ]
        )
    return table


def render_cell(
    cell: CalendarCell,
    geometry: CalendarGeometry,
    cell_width: int,
    max_visible_bars: Optional[int] = None,
    selected_date: Optional[pendulum.Date] = None,
) -> Text:
    cell_content = Text()
    day_num = cell["date"].day

    if selected_date is not None and cell["date"] == selected_date:
        style = SELECTED_STYLE
    elif cell["is_today"]:
        style = TODAY_STYLE_DARK if get_dark_mode() else TODAY_STYLE_LIGHT
    elif not cell["is_in_focused_period"]:
        style = OUTSIDE_PERIOD_STYLE
    else:
        style = "bold"
    cell_content.append(f"{day_num:2d}", style=style)
    cell_content.append("\n")

    layout = layout_cell(cell, max_visible_bars, geometry)
    for bar in layout["bars"]:
        cell_content.append_text(render_bar(bar, cell_width))
        cell_content.append("\n")

    if layout["overflow_count"] > 0:
        cell_content.append(
            f"{overflow_label(layout['overflow_count'])} more\n", style="dim"
        )

    return cell_content


def render_bar(bar: TaskBar, cell_width: int) -> Text:
    """
    Render a bar as a run of coloured cells proportional to its width.

    A bar that continues from the previous day starts with "«" and one that
    continues into the next day ends with "»".
    """
    width = max(1, round(bar["width_percent"] / 100 * cell_width))
    task = bar["task"]

    body = list(truncate(task["title"], width).ljust(width))
    if not bar["is_span_start"]:
        body[0] = "«"
    if not bar["is_span_end"]:
        body[-1] = "»"

    style = f"black on {bar['color']}"
    if task["completed"]:
        style += " dim strike"
    return Text("".join(body), style=style)


def render_detail_panel(date: pendulum.Date, tasks: list[Task]) -> Panel:
    """List the tasks occupying the selected date."""
    selected_tasks = tasks_for_date(tasks, date)

    content: RenderableType
    if not selected_tasks:
        content = Text("No tasks scheduled for this day", style="dim")
    else:
        task_table = Table(box=box.SIMPLE, show_header=True)
        task_table.add_column("id")
        task_table.add_column("priority")
        task_table.add_column("title")
        task_table.add_column("estimate")
        task_table.add_column("category")
        for task in selected_tasks:
            color = priority_color(task["priority"])
            title_style = "strike dim" if task["completed"] else ""
            task_table.add_row(
                str(task["id"]),
                Text(f"P{task['priority']}", style=f"black on {color}"),
                Text(task["title"], style=title_style),
                f"{task['estimated_time']} mins",
                task["category"] or "",
            )
        content = task_table

    return Panel(content, title=date_to_long_display_str(date), title_align="left")
