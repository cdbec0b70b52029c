# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

STORAGE_FORMAT = "YYYY-MM-DD HH:mm"


def now_local() -> pendulum.DateTime:
    return truncate_to_minute(pendulum.now("local"))


def truncate_to_minute(datetime: pendulum.DateTime) -> pendulum.DateTime:
    return datetime.set(second=0, microsecond=0)


def start_of_local_day(datetime: pendulum.DateTime) -> pendulum.DateTime:
    return datetime.in_tz("local").start_of("day")


def datetime_to_storage_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format(STORAGE_FORMAT)


def datetime_from_storage_str(datetime: str) -> pendulum.DateTime:
    """Parse a stored 'YYYY-MM-DD HH:mm' local wall-clock timestamp."""
    return pendulum.from_format(datetime, STORAGE_FORMAT, tz="local")


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def datetime_to_display_short_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MM-DD HH:mm")


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def seconds_between(
    earlier: pendulum.DateTime, later: pendulum.DateTime
) -> int:
    """Signed number of seconds from earlier to later."""
    return int(later.timestamp() - earlier.timestamp())


def duration_to_str(duration: pendulum.Duration) -> str:
    """Format a duration as hours and zero padded minutes, e.g. 2h05."""
    total_seconds = int(duration.total_seconds())
    sign = "-" if total_seconds < 0 else ""
    total_minutes = abs(total_seconds) // 60
    hours = total_minutes // 60
    minutes = total_minutes % 60
    return f"{sign}{hours}h{minutes:02d}"


def duration_to_str_optional(duration: Optional[pendulum.Duration]) -> str:
    if duration is None:
        return ""
    return duration_to_str(duration)
