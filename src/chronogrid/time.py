# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def to_date(value: datetime.date) -> pendulum.Date:
    """Reduce a date or datetime to its calendar date, dropping time and zone."""
    return pendulum.date(value.year, value.month, value.day)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def date_to_str(date: datetime.date) -> str:
    return to_date(date).to_date_string()


def date_to_str_optional(date: Optional[datetime.date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse an ISO date or timestamp, keeping only the calendar date as written.

    Timestamps such as ``2024-03-10T23:00:00.000Z`` keep the date that appears
    in the string; no timezone conversion is applied.
    """
    parsed = pendulum.parse(date_str, exact=True)
    if isinstance(parsed, (pendulum.DateTime, pendulum.Date)):
        return to_date(parsed)
    raise ValueError(f"Not a date: {date_str}")


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    if date_str is None or date_str == "":
        return None
    return date_from_str(date_str)


def date_to_display_str(date: datetime.date) -> str:
    return to_date(date).format("YYYY-MM-DD ddd")


def date_to_long_display_str(date: datetime.date) -> str:
    return to_date(date).format("dddd, MMMM D, YYYY")


def minutes_to_display_str(minutes: int) -> str:
    hours, remainder = divmod(minutes, 60)
    if hours == 0:
        return f"{remainder}m"
    if remainder == 0:
        return f"{hours}h"
    return f"{hours}h {remainder}m"
