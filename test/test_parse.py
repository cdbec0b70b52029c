"""
Tests for command line time parsing.
"""

from __future__ import annotations

import pendulum
import pytest
import typer

from timetrack.terminal.parse import is_day_param, parse_date, parse_datetime


@pytest.mark.unit
def test_parse_time_of_day_uses_today():
    """
    Ensure (H)H:mm is placed on today's local date.

    Returns
    -------
    None
        This test asserts the default date.
    """
    parsed = parse_datetime("9:05")

    assert parsed == pendulum.today("local").set(hour=9, minute=5)


@pytest.mark.unit
def test_parse_time_of_day_uses_default_date(at):
    """
    Ensure (H)H:mm can be placed on another entry's date.

    Returns
    -------
    None
        This test asserts the default_date parameter.
    """
    assert parse_datetime("13:45", default_date=at(9, day=2)) == at(13, 45, day=2)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03-04", (4, 0, 0)),
        ("2024-03-04 13:05", (4, 13, 5)),
        ("2024-03-05T07:30", (5, 7, 30)),
    ],
)
@pytest.mark.unit
def test_parse_dates(at, value, expected):
    """
    Ensure full dates and date times parse as local time.

    Returns
    -------
    None
        This test asserts date parsing.
    """
    day, hour, minute = expected

    assert parse_datetime(value) == at(hour, minute, day=day)


@pytest.mark.unit
def test_parse_day_keywords_and_offsets():
    """
    Ensure relative days resolve to the start of the day.

    Returns
    -------
    None
        This test asserts relative day parsing.
    """
    today = pendulum.today("local")

    assert parse_datetime("today") == today
    assert parse_datetime("-1") == today.subtract(days=1)
    assert parse_datetime(2) == today.add(days=2)
    assert parse_datetime(None) is None


@pytest.mark.parametrize("value", ["25:00", "9:75", "2024-13-01", "soon"])
@pytest.mark.unit
def test_parse_rejects_garbage(value):
    """
    Ensure invalid values are reported as bad parameters.

    Returns
    -------
    None
        This test asserts parse errors.
    """
    with pytest.raises(typer.BadParameter):
        parse_datetime(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03-04", True),
        ("yesterday", True),
        ("-2", True),
        ("10:00", False),
        ("2024-03-04 10:00", False),
        ("now", False),
        (None, False),
    ],
)
@pytest.mark.unit
def test_is_day_param(value, expected):
    """
    Ensure whole day values are told apart from points in time.

    Returns
    -------
    None
        This test asserts day detection used by --to.
    """
    assert is_day_param(value) is expected


@pytest.mark.unit
def test_parse_date_rejects_times():
    """
    Ensure --day does not accept a time of day.

    Returns
    -------
    None
        This test asserts date only parsing.
    """
    with pytest.raises(typer.BadParameter):
        parse_date("10:00")
