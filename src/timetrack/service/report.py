# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from timetrack.error import InvalidTimeWindow
from timetrack.model.database import Database
from timetrack.model.entry import is_marker
from timetrack.model.report import CategoryTotal, DayTotal, Report, ReportRow
from timetrack.service.category import (
    UNCATEGORIZED_LABEL,
    category_label,
    resolve_category_id,
)
from timetrack.service.history import history_index
from timetrack.time import (
    datetime_to_display_local_datetime_str,
    seconds_between,
    start_of_local_day,
)

logger = logging.getLogger(__name__)


def day_window(
    now: pendulum.DateTime, days: int = 0, back: int = 0
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Window covering whole local days.

    The window ends at the end of the day `back` days before `now` and
    starts `days` days before that day, so the defaults cover today.
    """
    end = start_of_local_day(now).add(days=1 - back)
    start = end.subtract(days=days + 1)
    return start, end


def build_report(
    database: Database,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    category: Optional[str] = None,
) -> Report:
    """
    Collect the entries in [start, end) and the time attributed to them.

    Entries are taken in storage order. Each entry after the first in the
    window is credited with the time since the previous entry in the window,
    and that time counts toward the entry's own category: an entry closes
    the stretch of work it describes. An entry stored after a later one gets
    a negative duration and is flagged as out of order; the durations then
    still add up to the time between the first and last entry.

    With `category`, durations are still measured against every entry in the
    window, then rows and totals are narrowed to that category.
    """
    if start >= end:
        raise InvalidTimeWindow(
            f"The window start {datetime_to_display_local_datetime_str(start)} "
            f"is not before its end {datetime_to_display_local_datetime_str(end)}"
        )

    category_filter_id = None
    if category is not None:
        category_filter_id = resolve_category_id(database["categories"], category)

    entries = database["entries"]
    rows: list[ReportRow] = []
    previous: Optional[pendulum.DateTime] = None
    for storage_index, entry in enumerate(entries):
        timestamp = entry["timestamp"]
        if not (start <= timestamp < end):
            continue

        duration = None
        out_of_order = False
        if previous is not None:
            seconds = seconds_between(previous, timestamp)
            out_of_order = seconds < 0
            duration = pendulum.duration(seconds=seconds)
        previous = timestamp

        rows.append(
            {
                "history_index": history_index(entries, storage_index),
                "timestamp": timestamp,
                "duration": duration,
                "category_id": entry["category_id"],
                "category_label": category_label(
                    database["categories"], entry["category_id"]
                ),
                "message": entry["message"],
                "is_marker": is_marker(entry),
                "out_of_order": out_of_order,
            }
        )

    if category_filter_id is not None:
        rows = [row for row in rows if row["category_id"] == category_filter_id]

    category_seconds: dict[Optional[int], int] = {}
    category_labels: dict[Optional[int], str] = {}
    day_seconds: dict[pendulum.Date, int] = {}
    total_seconds = 0
    idle_seconds = 0
    for row in rows:
        if row["duration"] is None:
            continue
        seconds = int(row["duration"].total_seconds())

        key = row["category_id"]
        if key not in category_seconds:
            category_seconds[key] = 0
            category_labels[key] = row["category_label"] or UNCATEGORIZED_LABEL
        category_seconds[key] += seconds

        day = row["timestamp"].date()
        day_seconds[day] = day_seconds.get(day, 0) + seconds

        total_seconds += seconds
        if row["is_marker"]:
            idle_seconds += seconds

    category_totals: list[CategoryTotal] = [
        {
            "category_id": key,
            "label": category_labels[key],
            "duration": pendulum.duration(seconds=seconds),
        }
        for key, seconds in category_seconds.items()
    ]
    day_totals: list[DayTotal] = [
        {"date": day, "duration": pendulum.duration(seconds=seconds)}
        for day, seconds in day_seconds.items()
    ]

    logger.debug(
        "report %s to %s: %d rows, %d categories",
        start,
        end,
        len(rows),
        len(category_totals),
    )

    return {
        "start": start,
        "end": end,
        "category_filter": category,
        "rows": rows,
        "categories": category_totals,
        "days": day_totals,
        "total": pendulum.duration(seconds=total_seconds),
        "idle": pendulum.duration(seconds=idle_seconds),
    }
