# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

import pendulum

from timetrack.model.database import Database
from timetrack.model.entry import Entry
from timetrack.service.category import resolve_category_id
from timetrack.template.entry import get_entry_template
from timetrack.time import now_local, seconds_between, truncate_to_minute

logger = logging.getLogger(__name__)


def add_entry(
    database: Database,
    message: Optional[str] = None,
    category: Optional[str] = None,
    at: Optional[pendulum.DateTime] = None,
    now: Callable[[], pendulum.DateTime] = now_local,
) -> Entry:
    """
    Append a new entry to the end of the database.

    The category short name is resolved before anything changes, so an
    unknown category leaves the database untouched. Timestamps are not
    checked against existing entries; back dated entries are allowed.
    """
    category_id = None
    if category is not None:
        category_id = resolve_category_id(database["categories"], category)

    entry = get_entry_template()
    entry["timestamp"] = truncate_to_minute(at if at is not None else now())
    entry["message"] = message
    entry["category_id"] = category_id

    database["entries"].append(entry)
    logger.debug(
        "added entry at %s (category %s)", entry["timestamp"], entry["category_id"]
    )
    return entry


def entry_duration(
    database: Database, storage_index: int
) -> Optional[pendulum.Duration]:
    """Time between an entry and the one stored right before it."""
    if storage_index == 0:
        return None
    entries = database["entries"]
    seconds = seconds_between(
        entries[storage_index - 1]["timestamp"], entries[storage_index]["timestamp"]
    )
    return pendulum.duration(seconds=seconds)
