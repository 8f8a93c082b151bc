# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.text import Text

from chronogrid.color import (
    HEADER_APP_STYLE,
    HEADER_CONTEXT_STYLE,
    HEADER_TITLE_STYLE_DARK,
    HEADER_TITLE_STYLE_LIGHT,
)
from chronogrid.view.state import get_dark_mode, get_show_header


def header_line(title: str, context: Optional[str] = None) -> Text:
    """One-line banner: app name, the period or report shown, and the view it belongs to."""
    title_style = HEADER_TITLE_STYLE_DARK if get_dark_mode() else HEADER_TITLE_STYLE_LIGHT
    line = Text(" chronogrid", style=HEADER_APP_STYLE)
    line.append(" › ", style="dim")
    line.append(title, style=title_style)
    if context is not None:
        line.append(f"  [{context}]", style=HEADER_CONTEXT_STYLE)
    return line


def header(title: str, context: Optional[str] = None) -> None:
    if not get_show_header():
        return

    console = Console()
    console.print()
    console.print(header_line(title, context))
