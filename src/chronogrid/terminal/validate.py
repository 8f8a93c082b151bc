# SPDX-License-Identifier: MIT

from typing import Optional

import typer


def validate_priority(priority: Optional[int]) -> Optional[int]:
    if priority is None:
        return None
    if not (1 <= priority <= 5):
        raise typer.BadParameter("Priority must be between 1 and 5 (inclusive)")
    return priority


def validate_title(title: Optional[str]) -> Optional[str]:
    if title is None:
        return None
    if not title.strip():
        raise typer.BadParameter("Title must not be empty")
    return title


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value <= 0:
        raise typer.BadParameter("Value must be positive")
    return value
