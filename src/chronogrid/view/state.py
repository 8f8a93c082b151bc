# SPDX-License-Identifier: MIT

"""Per-run rendering preferences, kept in context variables.

Set once by initialize() from the configuration and overridden by the global
CLI options. The watch refresher copies the context into its worker thread.
"""

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)
_dark_mode_var: ContextVar[bool] = ContextVar("dark_mode", default=False)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether views print the application header above their output."""
    return _show_header_var.get()


def set_dark_mode(value: bool) -> None:
    _dark_mode_var.set(value)


def get_dark_mode() -> bool:
    """Whether views use the dark colour scheme for highlights and SVG fills."""
    return _dark_mode_var.get()
