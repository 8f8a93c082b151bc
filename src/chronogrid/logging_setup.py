# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from chronogrid import configuration


def setup_logging(
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure logging with:
    - Console handler: rich-formatted, on stderr, warnings and up by default
    - File handler: full logs for debugging

    Calling it again replaces the handlers installed by the previous call.
    """
    if log_dir is None:
        log_dir = configuration.LOG_PATH
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "chronogrid.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=True
    )
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(file_handler)

    logging.captureWarnings(True)
