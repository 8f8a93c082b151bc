# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from chronogrid.logging_setup import setup_logging
from chronogrid.terminal import configuration, task, view
from chronogrid.terminal.custom_typer import OrderedAliasedGroup
from chronogrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedGroup,
    help="chronogrid - Task calendar in the CLI",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t")
app.add_typer(view.app, name="view, v")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    dark: Annotated[
        bool,
        typer.Option("--dark", help="Use the dark colour scheme for this run"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Log progress to the console"),
    ] = False,
) -> None:
    """
    chronogrid - Task calendar in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if dark:
        view_state.set_dark_mode(True)
    if verbose:
        setup_logging(console_level=logging.DEBUG)


def run() -> None:
    app()
