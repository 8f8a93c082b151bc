# SPDX-License-Identifier: MIT

import datetime
from typing import Callable, Optional

import pendulum

from chronogrid.model.calendar import Direction, Granularity, NavigationState
from chronogrid.time import to_date, today_local


class CalendarNavigator:
    """
    Tracks the focused date, grid granularity and selected date of a calendar view.

    Month steps clamp the day of month to the length of the target month. The
    day the user was anchored on is remembered across month steps, so stepping
    forward and back lands on the original date again.
    """

    def __init__(
        self,
        focused_date: Optional[datetime.date] = None,
        granularity: Granularity = Granularity.MONTH,
        clock: Callable[[], pendulum.Date] = today_local,
    ) -> None:
        self._clock = clock
        self._focused_date = (
            to_date(focused_date) if focused_date is not None else clock()
        )
        self._anchor_day = self._focused_date.day
        self._granularity = granularity
        self._selected_date: Optional[pendulum.Date] = None

    @property
    def focused_date(self) -> pendulum.Date:
        return self._focused_date

    @property
    def granularity(self) -> Granularity:
        return self._granularity

    @property
    def selected_date(self) -> Optional[pendulum.Date]:
        return self._selected_date

    @property
    def state(self) -> NavigationState:
        return {
            "focused_date": self._focused_date,
            "granularity": self._granularity,
            "selected_date": self._selected_date,
        }

    def step(self, direction: Direction) -> pendulum.Date:
        sign = 1 if direction == Direction.NEXT else -1

        if self._granularity == Granularity.MONTH:
            target_month = self._focused_date.start_of("month").add(months=sign)
            day = min(self._anchor_day, target_month.days_in_month)
            self._focused_date = pendulum.date(
                target_month.year, target_month.month, day
            )
            return self._focused_date

        days = 7 if self._granularity == Granularity.WEEK else 1
        self._set_focus(self._focused_date.add(days=sign * days))
        return self._focused_date

    def jump_to_today(self) -> pendulum.Date:
        self._set_focus(self._clock())
        return self._focused_date

    def set_granularity(self, granularity: Granularity) -> None:
        self._granularity = granularity

    def select_date(self, date: datetime.date) -> None:
        self._selected_date = to_date(date)

    def clear_selection(self) -> None:
        self._selected_date = None

    def _set_focus(self, date: pendulum.Date) -> None:
        self._focused_date = date
        self._anchor_day = date.day
