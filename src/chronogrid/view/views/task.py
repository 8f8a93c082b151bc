# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from chronogrid.calendar.layout import priority_color
from chronogrid.color import COMPLETED_TASK_COLOR
from chronogrid.model.task import Task
from chronogrid.time import (
    date_to_display_str,
    minutes_to_display_str,
)
from chronogrid.view.util import format_span, task_state
from chronogrid.view.views.header import header


def tasks_view(
    report_name: str,
    tasks: list[Task],
    columns: list[str] = [
        "id",
        "state",
        "priority",
        "title",
        "estimate",
        "deadline",
        "span",
    ],
    use_color: bool = True,
) -> None:
    header(report_name)

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        row = []
        for column in columns:
            column_value = ""
            if column == "state":
                column_value = task_state(task)
            elif column == "estimate":
                column_value = minutes_to_display_str(task["estimated_time"])
            elif column == "deadline":
                column_value = date_to_display_str(task["deadline"])
            elif column == "span":
                column_value = format_span(task)
            elif column == "priority":
                column_value = f"P{task['priority']}"
            elif task[column] is not None:  # type: ignore[literal-required]
                column_value = str(task[column])  # type: ignore[literal-required]

            # Apply colors if enabled
            if use_color:
                if task["completed"]:
                    column_value = f"[{COMPLETED_TASK_COLOR}]{column_value}[/{COMPLETED_TASK_COLOR}]"
                elif column == "priority":
                    color = priority_color(task["priority"])
                    column_value = f"[{color}]{column_value}[/{color}]"

            row.append(column_value)
        tasks_table.add_row(*row)

    console = Console()
    console.print(tasks_table)


def single_task_view(task: Task) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", str(task["id"]))
    task_table.add_row("title", task["title"])
    task_table.add_row("priority", str(task["priority"]))
    task_table.add_row("category", task["category"] or "")
    task_table.add_row("estimate", minutes_to_display_str(task["estimated_time"]))
    task_table.add_row("deadline", date_to_display_str(task["deadline"]))
    task_table.add_row(
        "start_date",
        date_to_display_str(task["start_date"]) if task["start_date"] else "",
    )
    task_table.add_row(
        "scheduled_start",
        date_to_display_str(task["scheduled_start"])
        if task["scheduled_start"]
        else "",
    )
    task_table.add_row("span", format_span(task))
    task_table.add_row("completed", "yes" if task["completed"] else "no")
    task_table.add_row("locked", "yes" if task["locked"] else "no")
    task_table.add_row("created", task["created"].to_datetime_string())

    console = Console()
    console.print(task_table)
