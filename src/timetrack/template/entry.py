# SPDX-License-Identifier: MIT

from timetrack.model.entry import Entry
from timetrack.time import now_local


def get_entry_template() -> Entry:
    return {
        "timestamp": now_local(),
        "message": None,
        "category_id": None,
    }
