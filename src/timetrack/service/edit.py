# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from timetrack.error import InvalidEdit
from timetrack.model.database import Database
from timetrack.model.entry import Entry
from timetrack.service.category import resolve_category_id
from timetrack.service.history import locate_entry
from timetrack.time import truncate_to_minute

logger = logging.getLogger(__name__)


def edit_entry(
    database: Database,
    index: int = 1,
    message: Optional[str] = None,
    clear_message: bool = False,
    at: Optional[pendulum.DateTime] = None,
    category: Optional[str] = None,
    clear_category: bool = False,
) -> Entry:
    """
    Change fields of the entry at a history index in place.

    Every check runs before the entry is touched: an invalid index, unknown
    category or conflicting options leave the database as it was. The entry
    keeps its storage position even when its time changes.
    """
    if message is not None and clear_message:
        raise InvalidEdit("Cannot set and clear the message at the same time")
    if category is not None and clear_category:
        raise InvalidEdit("Cannot set and clear the category at the same time")
    if (
        message is None
        and not clear_message
        and at is None
        and category is None
        and not clear_category
    ):
        raise InvalidEdit("Nothing to edit: give a message, time or category")

    storage_index = locate_entry(database["entries"], index)

    category_id = None
    if category is not None:
        category_id = resolve_category_id(database["categories"], category)

    entry = database["entries"][storage_index]
    if message is not None:
        entry["message"] = message
    if clear_message:
        entry["message"] = None
    if at is not None:
        entry["timestamp"] = truncate_to_minute(at)
    if category is not None:
        entry["category_id"] = category_id
    if clear_category:
        entry["category_id"] = None

    logger.debug("edited entry %d (storage position %d)", index, storage_index)
    return entry
