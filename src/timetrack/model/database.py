# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from timetrack.model.category import Category
from timetrack.model.entry import Entry


class Database(TypedDict):
    categories: list[Category]
    entries: list[Entry]  # Storage order, not necessarily chronological
    next_category_id: Optional[int]
