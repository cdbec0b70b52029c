# SPDX-License-Identifier: MIT

from timetrack.error import IndexOutOfRange
from timetrack.model.entry import Entry


def locate_entry(entries: list[Entry], index: int = 1) -> int:
    """
    Map a history index to a storage position.

    Index 1 is the most recently appended entry, 2 the one before it, and so
    on. Positions are used rather than timestamps, so a back dated entry is
    still index 1 right after it is added.
    """
    if index < 1 or index > len(entries):
        raise IndexOutOfRange(index, len(entries))
    return len(entries) - index


def history_index(entries: list[Entry], storage_index: int) -> int:
    return len(entries) - storage_index
