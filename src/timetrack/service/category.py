# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from timetrack.error import DuplicateCategory, UnknownCategory
from timetrack.model.category import Category
from timetrack.model.database import Database

logger = logging.getLogger(__name__)

UNCATEGORIZED_LABEL = "uncategorized"


def resolve_category_id(categories: list[Category], short_name: str) -> int:
    """
    Look up the id of the category with the given short name.

    Short names are unique by convention only; a hand edited database can
    repeat one, in which case the first category in storage order wins.
    """
    for category in categories:
        if category["short_name"] == short_name:
            return category["id"]
    raise UnknownCategory(short_name)


def find_category(
    categories: list[Category], category_id: int
) -> Optional[Category]:
    for category in categories:
        if category["id"] == category_id:
            return category
    return None


def category_label(categories: list[Category], category_id: Optional[int]) -> str:
    """Short name for display; '#<id>' when the category no longer exists."""
    if category_id is None:
        return ""
    category = find_category(categories, category_id)
    if category is None:
        logger.debug("entry references missing category %d", category_id)
        return f"#{category_id}"
    return category["short_name"]


def next_category_id(database: Database) -> int:
    if database["next_category_id"] is not None:
        return database["next_category_id"]
    return max(__used_category_ids(database), default=0) + 1


def add_category(database: Database, long_name: str, short_name: str) -> Category:
    if any(
        category["short_name"] == short_name for category in database["categories"]
    ):
        raise DuplicateCategory(short_name)

    category_id = next_category_id(database)
    # Ids of categories removed by hand may still be referenced by entries
    used_ids = __used_category_ids(database)
    while category_id in used_ids:
        category_id += 1

    category: Category = {
        "id": category_id,
        "long_name": long_name,
        "short_name": short_name,
    }
    database["categories"].append(category)
    database["next_category_id"] = category_id + 1

    logger.debug("added category %d (%s)", category_id, short_name)
    return category


def __used_category_ids(database: Database) -> set[int]:
    used_ids = {category["id"] for category in database["categories"]}
    used_ids.update(
        entry["category_id"]
        for entry in database["entries"]
        if entry["category_id"] is not None
    )
    return used_ids
