# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from chronogrid.time import date_from_str, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_duration_minutes(duration: Optional[str]) -> Optional[int]:
    """
    Parse a duration into minutes.

    Accepts plain minutes ("90"), hours and minutes ("1:30") or unit
    suffixes ("2h", "45m", "1h30m", "2d").
    """
    if duration is None:
        return None

    value = duration.strip().lower()
    if re.match(r"^\d+$", value):
        return int(value)

    time_match = re.match(r"^(\d+):([0-5]\d)$", value)
    if time_match:
        return int(time_match.group(1)) * 60 + int(time_match.group(2))

    unit_match = re.match(r"^(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?$", value)
    if unit_match and any(unit_match.groups()):
        days, hours, minutes = (int(group or 0) for group in unit_match.groups())
        return days * 24 * 60 + hours * 60 + minutes

    raise typer.BadParameter(
        "Incorrect duration format, use minutes, HH:mm, or units like 1h30m"
    )
