import pendulum
import pytest
import typer

from chronogrid.terminal import parse
from chronogrid.terminal.parse import parse_date, parse_duration_minutes


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> pendulum.Date:
    today = pendulum.date(2024, 3, 13)
    monkeypatch.setattr(parse, "today_local", lambda: today)
    return today


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03-10", pendulum.date(2024, 3, 10)),
        ("2024-03-10T23:00:00.000Z", pendulum.date(2024, 3, 10)),
        ("today", pendulum.date(2024, 3, 13)),
        ("t", pendulum.date(2024, 3, 13)),
        ("yesterday", pendulum.date(2024, 3, 12)),
        ("tomorrow", pendulum.date(2024, 3, 14)),
        ("o", pendulum.date(2024, 3, 14)),
        ("7", pendulum.date(2024, 3, 20)),
        ("-13", pendulum.date(2024, 2, 29)),
    ],
)
def test_parse_date(fixed_today, value: str, expected: pendulum.Date) -> None:
    assert parse_date(value) == expected


def test_parse_date_none() -> None:
    assert parse_date(None) is None


@pytest.mark.parametrize("value", ["next week", "2024-13-45", "03/10/2024"])
def test_parse_date_rejects_garbage(value: str) -> None:
    with pytest.raises(typer.BadParameter):
        parse_date(value)


@pytest.mark.parametrize(
    ("value", "minutes"),
    [
        ("90", 90),
        ("1:30", 90),
        ("1h30m", 90),
        ("2h", 120),
        ("45m", 45),
        ("2d", 2880),
        ("1d2h5m", 1565),
        (" 1H ", 60),
    ],
)
def test_parse_duration(value: str, minutes: int) -> None:
    assert parse_duration_minutes(value) == minutes


def test_parse_duration_none() -> None:
    assert parse_duration_minutes(None) is None


@pytest.mark.parametrize("value", ["", "abc", "1:75", "h"])
def test_parse_duration_rejects_garbage(value: str) -> None:
    with pytest.raises(typer.BadParameter):
        parse_duration_minutes(value)
