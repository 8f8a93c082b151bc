# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from chronogrid.calendar.navigation import CalendarNavigator
from chronogrid.calendar.summary import summarize
from chronogrid.model.calendar import Direction, Granularity
from chronogrid.repository.configuration import CONFIGURATION_REPO
from chronogrid.repository.task import TASK_REPO
from chronogrid.service.poll import PeriodicRefresh
from chronogrid.service.snapshot import TaskSnapshot
from chronogrid.terminal.custom_typer import AlphabeticalAliasedGroup
from chronogrid.terminal.parse import parse_date
from chronogrid.terminal.validate import validate_positive
from chronogrid.view.views.calendar import calendar_view
from chronogrid.view.views.summary import summary_svg, summary_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"

DateOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--date",
        "-d",
        parser=parse_date,
        help=f"Date inside the period to show; {DATE_HELP}",
    ),
]
OffsetOption = Annotated[
    int,
    typer.Option(
        "--offset",
        "-o",
        help="Step this many periods forward (positive) or back (negative)",
    ),
]
SelectOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--select",
        "-s",
        parser=parse_date,
        help=f"Show the tasks occupying this date below the grid; {DATE_HELP}",
    ),
]
CellWidthOption = Annotated[
    int,
    typer.Option(
        "--cell-width",
        "-w",
        callback=validate_positive,
        help="Width of each day cell in characters",
    ),
]
MaxBarsOption = Annotated[
    Optional[int],
    typer.Option(
        "--max-bars",
        "-m",
        help="Bars drawn per day before the +N indicator (defaults to config)",
    ),
]


def build_navigator(
    granularity: Granularity,
    date: Optional[pendulum.Date],
    offset: int,
    select: Optional[pendulum.Date],
) -> CalendarNavigator:
    navigator = CalendarNavigator(date, granularity)
    direction = Direction.NEXT if offset > 0 else Direction.PREV
    for _ in range(abs(offset)):
        navigator.step(direction)
    if select is not None:
        navigator.select_date(select)
    return navigator


def show_calendar(
    granularity: Granularity,
    date: Optional[pendulum.Date],
    offset: int,
    select: Optional[pendulum.Date],
    cell_width: int,
    max_bars: Optional[int],
) -> None:
    # Remember the last used granularity for `view calendar`
    if CONFIGURATION_REPO.get_config()["default_granularity"] != granularity.value:
        CONFIGURATION_REPO.update_config(default_granularity=granularity)

    navigator = build_navigator(granularity, date, offset, select)
    snapshot = TaskSnapshot(TASK_REPO)
    snapshot.refresh()

    calendar_view(
        navigator.state,
        snapshot.tasks,
        CONFIGURATION_REPO.get_geometry(),
        cell_width,
        max_bars,
        error=_error_message(snapshot),
    )


@app.command("month, m")
def month(
    date: DateOption = None,
    offset: OffsetOption = 0,
    select: SelectOption = None,
    cell_width: CellWidthOption = 20,
    max_bars: MaxBarsOption = None,
) -> None:
    """Display a month grid, Sunday to Saturday, with task occupancy bars."""
    show_calendar(Granularity.MONTH, date, offset, select, cell_width, max_bars)


@app.command("week, w")
def week(
    date: DateOption = None,
    offset: OffsetOption = 0,
    select: SelectOption = None,
    cell_width: CellWidthOption = 20,
    max_bars: MaxBarsOption = None,
) -> None:
    """Display the Sunday to Saturday week containing the date."""
    show_calendar(Granularity.WEEK, date, offset, select, cell_width, max_bars)


@app.command("day, d")
def day(
    date: DateOption = None,
    offset: OffsetOption = 0,
    select: SelectOption = None,
    cell_width: CellWidthOption = 40,
    max_bars: MaxBarsOption = None,
) -> None:
    """Display a single day."""
    show_calendar(Granularity.DAY, date, offset, select, cell_width, max_bars)


@app.command("calendar, c")
def calendar(
    date: DateOption = None,
    offset: OffsetOption = 0,
    select: SelectOption = None,
    cell_width: CellWidthOption = 20,
    max_bars: MaxBarsOption = None,
) -> None:
    """Display the calendar at the last used granularity."""
    granularity = Granularity(CONFIGURATION_REPO.get_config()["default_granularity"])
    show_calendar(granularity, date, offset, select, cell_width, max_bars)


@app.command("summary, s")
def summary(
    svg: Annotated[
        Optional[Path],
        typer.Option("--svg", help="Also write the pie chart to this SVG file"),
    ] = None,
) -> None:
    """Display completed and pending task counts."""
    snapshot = TaskSnapshot(TASK_REPO)
    snapshot.refresh()

    geometry = CONFIGURATION_REPO.get_geometry()
    task_summary = summarize(snapshot.tasks, geometry)
    summary_view(task_summary)

    if svg is not None:
        svg.write_text(summary_svg(task_summary, geometry))
        logger.info("Wrote summary chart to %s", svg)


@app.command("watch, wa")
def watch(
    granularity: Annotated[
        Optional[Granularity],
        typer.Option("--granularity", "-g", help="Defaults to the last used"),
    ] = None,
    date: DateOption = None,
    select: SelectOption = None,
    cell_width: CellWidthOption = 20,
    max_bars: MaxBarsOption = None,
    interval: Annotated[
        Optional[float],
        typer.Option("--interval", "-i", help="Seconds between refreshes"),
    ] = None,
    count: Annotated[
        Optional[int],
        typer.Option("--count", "-n", help="Stop after this many refreshes"),
    ] = None,
) -> None:
    """Re-render the calendar periodically until interrupted."""
    config = CONFIGURATION_REPO.get_config()
    if granularity is None:
        granularity = Granularity(config["default_granularity"])
    if interval is None:
        interval = float(config["refresh_seconds"])

    navigator = build_navigator(granularity, date, 0, select)
    geometry = CONFIGURATION_REPO.get_geometry()
    snapshot = TaskSnapshot(TASK_REPO)
    console = Console()
    renders = 0

    def render() -> None:
        nonlocal renders
        TASK_REPO.reload()
        snapshot.refresh()
        # Keep following today when no explicit date was given
        if date is None:
            navigator.jump_to_today()
        console.clear()
        calendar_view(
            navigator.state,
            snapshot.tasks,
            geometry,
            cell_width,
            max_bars,
            error=_error_message(snapshot),
        )
        renders += 1
        if count is not None and renders >= count:
            refresher.request_stop()

    refresher = PeriodicRefresh(render, interval, name="calendar-refresh")
    render()
    if count is not None and renders >= count:
        return

    with refresher:
        try:
            refresher.wait()
        except KeyboardInterrupt:
            logger.debug("Watch interrupted")


def _error_message(snapshot: TaskSnapshot) -> Optional[str]:
    if snapshot.last_error is None:
        return None
    return f"Could not load tasks: {snapshot.last_error}"
