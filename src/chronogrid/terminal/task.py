# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from chronogrid.repository.task import (
    TASK_REPO,
    TaskNotFoundError,
    TaskValidationError,
)
from chronogrid.template.task import get_task_form_template
from chronogrid.terminal.custom_typer import AlphabeticalAliasedGroup
from chronogrid.terminal.parse import parse_date, parse_duration_minutes
from chronogrid.terminal.validate import validate_priority, validate_title
from chronogrid.view.views import task as task_report

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)

console = Console()

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
DURATION_HELP = "valid inputs: minutes (90), HH:mm (1:30) or units (1h30m, 2d)"


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]{message}[/red]")
    return typer.Exit(code=1)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(callback=validate_title)],
    deadline: Annotated[
        pendulum.Date,
        typer.Option("--deadline", "-d", parser=parse_date, help=DATE_HELP),
    ],
    priority: Annotated[
        int,
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priority,
            help="valid input: 1-5 (1=lowest, 5=highest)",
        ),
    ] = 3,
    estimate: Annotated[
        Optional[str],
        typer.Option("--estimate", "-e", help=DURATION_HELP),
    ] = None,
    start_date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-c")] = None,
) -> None:
    """Add a task."""
    form_data = get_task_form_template(title, deadline, start_date)
    form_data["priority"] = priority
    form_data["category"] = category

    estimated_minutes = parse_duration_minutes(estimate)
    if estimated_minutes is not None:
        form_data["estimated_hours"], form_data["estimated_minutes"] = divmod(
            estimated_minutes, 60
        )

    try:
        task = TASK_REPO.create_task(form_data)
    except TaskValidationError as e:
        raise typer.BadParameter(str(e))

    task_report.single_task_view(task)


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: int,
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", callback=validate_title)
    ] = None,
    priority: Annotated[
        Optional[int],
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priority,
            help="valid input: 1-5 (1=lowest, 5=highest)",
        ),
    ] = None,
    deadline: Annotated[
        Optional[pendulum.Date],
        typer.Option("--deadline", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    estimate: Annotated[
        Optional[str],
        typer.Option("--estimate", "-e", help=DURATION_HELP),
    ] = None,
    start_date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    scheduled_start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--scheduled", "-sc", parser=parse_date, help=DATE_HELP),
    ] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-c")] = None,
    locked: Annotated[
        Optional[bool],
        typer.Option("--lock/--unlock", help="Locked tasks are left alone by optimize"),
    ] = None,
    remove_start_date: Annotated[
        bool, typer.Option("--remove-start", "-rs", help="Remove start date")
    ] = False,
    remove_scheduled_start: Annotated[
        bool, typer.Option("--remove-scheduled", "-rsc", help="Remove scheduled start")
    ] = False,
    remove_category: Annotated[
        bool, typer.Option("--remove-category", "-rc", help="Remove category")
    ] = False,
) -> None:
    """Edit a task."""
    try:
        task = TASK_REPO.get_task(id)
    except TaskNotFoundError as e:
        raise _fail(str(e))

    if title is not None:
        task["title"] = title
    if priority is not None:
        task["priority"] = priority
    if deadline is not None:
        task["deadline"] = deadline
    estimated_minutes = parse_duration_minutes(estimate)
    if estimated_minutes is not None:
        task["estimated_time"] = estimated_minutes
    if start_date is not None:
        task["start_date"] = start_date
    if scheduled_start is not None:
        task["scheduled_start"] = scheduled_start
    if category is not None:
        task["category"] = category
    if locked is not None:
        task["locked"] = locked

    if remove_start_date:
        task["start_date"] = None
    if remove_scheduled_start:
        task["scheduled_start"] = None
    if remove_category:
        task["category"] = None

    try:
        TASK_REPO.update_task(task)
    except TaskValidationError as e:
        raise typer.BadParameter(str(e))

    task_report.single_task_view(TASK_REPO.get_task(id))


@app.command("delete, d", no_args_is_help=True)
def delete(ids: list[int]) -> None:
    """Delete one or more tasks."""
    for id in ids:
        try:
            TASK_REPO.delete_task(id)
        except TaskNotFoundError as e:
            raise _fail(str(e))
    console.print(f"Deleted {len(ids)} task(s)")


@app.command("complete, c", no_args_is_help=True)
def complete(ids: list[int]) -> None:
    """Mark tasks as completed."""
    _set_completion(ids, True)


@app.command("reopen, r", no_args_is_help=True)
def reopen(ids: list[int]) -> None:
    """Mark tasks as pending again."""
    _set_completion(ids, False)


def _set_completion(ids: list[int], completed: bool) -> None:
    for id in ids:
        try:
            TASK_REPO.set_completion(id, completed)
        except TaskNotFoundError as e:
            raise _fail(str(e))
    task_report.tasks_view(
        "tasks", [task for task in TASK_REPO.list_tasks() if task["id"] in ids]
    )


@app.command("list, l")
def list_tasks(
    pending: Annotated[
        bool, typer.Option("--pending", "-p", help="Only show pending tasks")
    ] = False,
    completed: Annotated[
        bool, typer.Option("--completed", "-c", help="Only show completed tasks")
    ] = False,
    no_color: Annotated[bool, typer.Option("--no-color", "-nc")] = False,
) -> None:
    """List tasks, newest first."""
    tasks = TASK_REPO.list_tasks()
    if pending:
        tasks = [task for task in tasks if not task["completed"]]
    if completed:
        tasks = [task for task in tasks if task["completed"]]
    task_report.tasks_view("tasks", tasks, use_color=not no_color)


@app.command("show, s", no_args_is_help=True)
def show(id: int) -> None:
    """Show every field of a task."""
    try:
        task = TASK_REPO.get_task(id)
    except TaskNotFoundError as e:
        raise _fail(str(e))
    task_report.single_task_view(task)


@app.command("optimize, o")
def optimize() -> None:
    """Assign scheduled start dates to open, unlocked tasks."""
    tasks = TASK_REPO.optimize_schedule()
    task_report.tasks_view("optimized schedule", tasks)
