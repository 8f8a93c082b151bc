import pendulum
import pytest

from chronogrid.calendar.grid import generate_grid, tasks_for_date, week_start
from chronogrid.model.calendar import Granularity


def test_week_start_is_sunday() -> None:
    assert week_start(pendulum.date(2024, 3, 13)) == pendulum.date(2024, 3, 10)
    assert week_start(pendulum.date(2024, 3, 10)) == pendulum.date(2024, 3, 10)
    assert week_start(pendulum.date(2024, 3, 16)) == pendulum.date(2024, 3, 10)


def test_month_grid_for_february_2024() -> None:
    cells = generate_grid(pendulum.date(2024, 2, 15), Granularity.MONTH, [])

    assert len(cells) == 35
    assert cells[0]["date"] == pendulum.date(2024, 1, 28)
    assert cells[-1]["date"] == pendulum.date(2024, 3, 2)
    assert not cells[0]["is_in_focused_period"]
    assert cells[4]["date"] == pendulum.date(2024, 2, 1)
    assert cells[4]["is_in_focused_period"]
    assert not cells[-1]["is_in_focused_period"]


def test_month_grid_for_march_2024_includes_neighbouring_months() -> None:
    cells = generate_grid(pendulum.date(2024, 3, 1), Granularity.MONTH, [])

    assert len(cells) == 42
    assert cells[0]["date"] == pendulum.date(2024, 2, 25)
    assert cells[-1]["date"] == pendulum.date(2024, 4, 6)
    in_period = [cell["date"] for cell in cells if cell["is_in_focused_period"]]
    assert in_period[0] == pendulum.date(2024, 3, 1)
    assert in_period[-1] == pendulum.date(2024, 3, 31)
    assert len(in_period) == 31


def test_month_that_fits_four_weeks_exactly() -> None:
    cells = generate_grid(pendulum.date(2015, 2, 10), Granularity.MONTH, [])

    assert len(cells) == 28
    assert cells[0]["date"] == pendulum.date(2015, 2, 1)
    assert all(cell["is_in_focused_period"] for cell in cells)


@pytest.mark.parametrize("year", [2023, 2024, 2025])
@pytest.mark.parametrize("month", range(1, 13))
def test_month_grid_shape(year: int, month: int) -> None:
    focused = pendulum.date(year, month, 1)

    cells = generate_grid(focused, Granularity.MONTH, [])

    assert len(cells) % 7 == 0
    assert len(cells) >= 28
    assert cells[0]["date"].isoweekday() == 7
    in_period = sum(1 for cell in cells if cell["is_in_focused_period"])
    assert in_period == focused.days_in_month
    for previous, current in zip(cells, cells[1:]):
        assert previous["date"].add(days=1) == current["date"]


def test_week_grid_runs_sunday_to_saturday() -> None:
    cells = generate_grid(pendulum.date(2024, 3, 13), Granularity.WEEK, [])

    assert [cell["date"] for cell in cells] == [
        pendulum.date(2024, 3, day) for day in range(10, 17)
    ]
    assert all(cell["is_in_focused_period"] for cell in cells)


def test_week_grid_crosses_month_boundary() -> None:
    cells = generate_grid(pendulum.date(2024, 3, 1), Granularity.WEEK, [])

    assert cells[0]["date"] == pendulum.date(2024, 2, 25)
    assert cells[-1]["date"] == pendulum.date(2024, 3, 2)


def test_day_grid_has_one_cell() -> None:
    cells = generate_grid(pendulum.date(2024, 3, 13), Granularity.DAY, [])

    assert len(cells) == 1
    assert cells[0]["date"] == pendulum.date(2024, 3, 13)
    assert cells[0]["is_in_focused_period"]


def test_today_is_flagged() -> None:
    cells = generate_grid(
        pendulum.date(2024, 3, 13),
        Granularity.WEEK,
        [],
        today=pendulum.date(2024, 3, 14),
    )

    assert [cell["is_today"] for cell in cells] == [
        False,
        False,
        False,
        False,
        True,
        False,
        False,
    ]


def test_cells_carry_occupying_tasks_in_input_order(make_task) -> None:
    first = make_task(title="first", deadline=pendulum.date(2024, 3, 2))
    second = make_task(
        title="second", start_date=pendulum.date(2024, 3, 1), estimated_time=2900
    )
    elsewhere = make_task(title="elsewhere", deadline=pendulum.date(2024, 3, 20))

    cells = generate_grid(
        pendulum.date(2024, 2, 15), Granularity.MONTH, [first, second, elsewhere]
    )

    by_date = {cell["date"]: cell for cell in cells}
    # The spill-over days of the next month still show their tasks
    assert [t["title"] for t in by_date[pendulum.date(2024, 3, 2)]["occupying_tasks"]] == [
        "first",
        "second",
    ]
    assert [t["title"] for t in by_date[pendulum.date(2024, 3, 1)]["occupying_tasks"]] == [
        "second"
    ]
    assert by_date[pendulum.date(2024, 2, 29)]["occupying_tasks"] == []


def test_tasks_for_date_filters_by_occupancy(make_task) -> None:
    inside = make_task(deadline=pendulum.date(2024, 3, 10))
    outside = make_task(deadline=pendulum.date(2024, 3, 11))

    assert tasks_for_date([inside, outside], pendulum.date(2024, 3, 10)) == [inside]
