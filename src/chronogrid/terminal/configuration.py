# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from chronogrid import configuration
from chronogrid.model.calendar import Granularity
from chronogrid.repository.configuration import CONFIGURATION_REPO
from chronogrid.terminal.custom_typer import AlphabeticalAliasedGroup
from chronogrid.terminal.validate import validate_positive

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)


def parse_geometry_setting(setting: str) -> tuple[str, float]:
    if "=" not in setting:
        raise typer.BadParameter(f"Expected key=value, got '{setting}'")
    key, raw_value = (part.strip() for part in setting.split("=", 1))
    if key not in configuration.DEFAULT_CALENDAR_GEOMETRY:
        valid = ", ".join(configuration.DEFAULT_CALENDAR_GEOMETRY)
        raise typer.BadParameter(f"Unknown calendar setting '{key}', valid: {valid}")
    try:
        value = float(raw_value)
    except ValueError:
        raise typer.BadParameter(f"'{raw_value}' is not a number")
    if value < 0:
        raise typer.BadParameter(f"'{key}' must not be negative")
    # Stored as whole minutes and used as a divisor
    if key == "reference_day_minutes" and value < 1:
        raise typer.BadParameter(f"'{key}' must be at least 1")
    return key, value


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()
    geometry = CONFIGURATION_REPO.get_geometry()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("dark_mode", "✓ Enabled" if config["dark_mode"] else "✗ Disabled")
    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("default_granularity", config["default_granularity"])
    table.add_row("refresh_seconds", str(config["refresh_seconds"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    for key, value in geometry.items():
        table.add_row(f"calendar.{key}", f"{value:g}")

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set_config(
    dark_mode: Annotated[
        Optional[bool],
        typer.Option("--dark-mode/--light-mode", help="Colour scheme for views"),
    ] = None,
    granularity: Annotated[
        Optional[Granularity],
        typer.Option("--granularity", "-g", help="Granularity for `view calendar`"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Print the report header"),
    ] = None,
    refresh_seconds: Annotated[
        Optional[int],
        typer.Option(
            "--refresh-seconds",
            "-r",
            callback=validate_positive,
            help="Seconds between `view watch` refreshes",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the task files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    calendar: Annotated[
        Optional[list[str]],
        typer.Option(
            "--calendar",
            "-c",
            help="Layout constant as key=value, e.g. max_visible_bars=6",
        ),
    ] = None,
) -> None:
    """Change configuration settings."""
    geometry: Optional[dict[str, float]] = None
    if calendar is not None:
        geometry = dict(parse_geometry_setting(setting) for setting in calendar)

    CONFIGURATION_REPO.update_config(
        dark_mode=dark_mode,
        default_granularity=granularity,
        show_header=show_header,
        refresh_seconds=refresh_seconds,
        data_path=data_path,
        remove_data_path=remove_data_path,
        geometry=geometry,
    )
    view()
