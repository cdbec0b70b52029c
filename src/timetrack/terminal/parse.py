# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from timetrack.time import now_local

_DATE_P = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DATETIME_P = re.compile(r"^(\d{4}-\d{2}-\d{2})[ T](\d{1,2}):(\d{2})$")
_TIME_P = re.compile(r"^(\d{1,2}):(\d{2})$")
_DAY_OFFSET_P = re.compile(r"^-?\d+$")

_DAY_KEYWORDS = {"today", "t", "yesterday", "y", "tomorrow", "o"}


def parse_datetime(
    datetime_param: Optional[str | int],
    default_date: Optional[pendulum.DateTime] = None,
) -> Optional[pendulum.DateTime]:
    """
    Parse a point in local time.

    Accepts YYYY-MM-DD HH:mm, YYYY-MM-DD (start of that day), (H)H:mm on
    `default_date` (today when not given), now, today, yesterday, tomorrow,
    or a day offset like 1 or -1.
    """
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    datetime_match = _DATETIME_P.match(datetime)
    if datetime_match:
        date = __parse_date(datetime_match.group(1))
        hour, minute = __validate_time(
            int(datetime_match.group(2)), int(datetime_match.group(3))
        )
        return date.set(hour=hour, minute=minute)

    if _DATE_P.match(datetime):
        return __parse_date(datetime)

    # (H)H:mm uses the default date, or today
    time_match = _TIME_P.match(datetime)
    if time_match:
        hour, minute = __validate_time(int(time_match.group(1)), int(time_match.group(2)))
        base = default_date if default_date is not None else pendulum.today("local")
        return base.in_tz("local").set(hour=hour, minute=minute, second=0, microsecond=0)

    # Relative days (e.g., "1", "-1", "365")
    if _DAY_OFFSET_P.match(datetime):
        return pendulum.today("local").add(days=int(datetime))

    if datetime == "now" or datetime == "n":
        return now_local()
    if datetime == "today" or datetime == "t":
        return pendulum.today("local")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter(f"Incorrect datetime format: '{datetime}'")


def is_day_param(datetime_param: Optional[str]) -> bool:
    """True when the value names a whole day rather than a point in time."""
    if datetime_param is None:
        return False
    datetime = datetime_param.strip()
    return (
        bool(_DATE_P.match(datetime))
        or bool(_DAY_OFFSET_P.match(datetime))
        or datetime in _DAY_KEYWORDS
    )


def parse_date(date_param: Optional[str]) -> Optional[pendulum.DateTime]:
    """Parse YYYY-MM-DD, a day keyword or a day offset to the start of that day."""
    if date_param is None:
        return None
    if not is_day_param(date_param):
        raise typer.BadParameter(
            f"Date must be YYYY-MM-DD, today, yesterday, tomorrow or a day offset, got '{date_param}'"
        )
    return parse_datetime(date_param)


def __validate_time(hour: int, minute: int) -> tuple[int, int]:
    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")
    return (hour, minute)


def __parse_date(date: str) -> pendulum.DateTime:
    try:
        return pendulum.from_format(date, "YYYY-MM-DD", tz="local")
    except ValueError:
        raise typer.BadParameter(f"Invalid date: '{date}'")
