import pendulum
import pytest

from chronogrid.calendar.navigation import CalendarNavigator
from chronogrid.model.calendar import Direction, Granularity


def test_defaults_to_today_and_month_view() -> None:
    navigator = CalendarNavigator(clock=lambda: pendulum.date(2024, 5, 5))

    assert navigator.state == {
        "focused_date": pendulum.date(2024, 5, 5),
        "granularity": Granularity.MONTH,
        "selected_date": None,
    }


def test_next_month_from_february() -> None:
    navigator = CalendarNavigator(pendulum.date(2024, 2, 15))

    navigator.step(Direction.NEXT)

    assert navigator.focused_date == pendulum.date(2024, 3, 15)


def test_month_step_clamps_to_shorter_month() -> None:
    navigator = CalendarNavigator(pendulum.date(2024, 1, 31))

    assert navigator.step(Direction.NEXT) == pendulum.date(2024, 2, 29)
    assert navigator.step(Direction.NEXT) == pendulum.date(2024, 3, 31)


def test_month_step_back_restores_clamped_day() -> None:
    navigator = CalendarNavigator(pendulum.date(2024, 1, 31))

    navigator.step(Direction.NEXT)
    navigator.step(Direction.PREV)

    assert navigator.focused_date == pendulum.date(2024, 1, 31)


def test_month_step_across_year_boundary() -> None:
    navigator = CalendarNavigator(pendulum.date(2024, 12, 10))

    assert navigator.step(Direction.NEXT) == pendulum.date(2025, 1, 10)
    assert navigator.step(Direction.PREV) == pendulum.date(2024, 12, 10)
    assert navigator.step(Direction.PREV) == pendulum.date(2024, 11, 10)


@pytest.mark.parametrize(
    ("granularity", "expected"),
    [
        (Granularity.WEEK, pendulum.date(2024, 3, 20)),
        (Granularity.DAY, pendulum.date(2024, 3, 14)),
    ],
)
def test_week_and_day_steps(granularity: Granularity, expected: pendulum.Date) -> None:
    navigator = CalendarNavigator(pendulum.date(2024, 3, 13), granularity)

    assert navigator.step(Direction.NEXT) == expected


@pytest.mark.parametrize("granularity", list(Granularity))
@pytest.mark.parametrize(
    "start",
    [
        pendulum.date(2024, 1, 31),
        pendulum.date(2024, 2, 29),
        pendulum.date(2023, 12, 31),
        pendulum.date(2024, 6, 15),
    ],
)
def test_next_then_prev_returns_to_start(
    granularity: Granularity, start: pendulum.Date
) -> None:
    navigator = CalendarNavigator(start, granularity)

    navigator.step(Direction.NEXT)
    navigator.step(Direction.PREV)

    assert navigator.focused_date == start


def test_jump_to_today_keeps_granularity_and_selection() -> None:
    navigator = CalendarNavigator(
        pendulum.date(2020, 1, 1),
        Granularity.WEEK,
        clock=lambda: pendulum.date(2024, 5, 5),
    )
    navigator.select_date(pendulum.date(2020, 1, 2))

    assert navigator.jump_to_today() == pendulum.date(2024, 5, 5)
    assert navigator.granularity == Granularity.WEEK
    assert navigator.selected_date == pendulum.date(2020, 1, 2)


def test_set_granularity_keeps_focus() -> None:
    navigator = CalendarNavigator(pendulum.date(2024, 3, 13))

    navigator.set_granularity(Granularity.DAY)

    assert navigator.granularity == Granularity.DAY
    assert navigator.focused_date == pendulum.date(2024, 3, 13)


def test_select_and_clear_date() -> None:
    navigator = CalendarNavigator(pendulum.date(2024, 3, 13))

    navigator.select_date(pendulum.datetime(2024, 3, 14, 18, 0))
    assert navigator.selected_date == pendulum.date(2024, 3, 14)

    navigator.clear_selection()
    assert navigator.selected_date is None
