# SPDX-License-Identifier: MIT

from timetrack.model.database import Database


def get_database_template() -> Database:
    return {
        "categories": [],
        "entries": [],
        "next_category_id": None,
    }
