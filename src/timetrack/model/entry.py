# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum

OPTIONAL_ENTRY_KEYS = ("message", "category_id")


class Entry(TypedDict):
    timestamp: pendulum.DateTime  # Local wall-clock time, minute resolution
    message: Optional[str]  # None or "" marks untracked time since the previous entry
    category_id: Optional[int]  # May reference a category removed by hand
    # Optional keys the stored document left out; not written back while still None
    omitted_keys: NotRequired[frozenset[str]]


def is_marker(entry: Entry) -> bool:
    return not entry["message"]
