# SPDX-License-Identifier: MIT


class TimeTrackError(Exception):
    """Base class for failures that abort a command before anything is saved."""

    exit_code = 1


class CorruptDatabase(TimeTrackError):
    """The database document is unreadable or does not have the expected shape."""

    exit_code = 3


class UnknownCategory(TimeTrackError):
    """No category has the given short name."""

    exit_code = 4

    def __init__(self, short_name: str) -> None:
        super().__init__(f"No category with short name '{short_name}'")
        self.short_name = short_name


class IndexOutOfRange(TimeTrackError):
    """A history index does not address an existing entry."""

    exit_code = 5

    def __init__(self, index: int, entry_count: int) -> None:
        if entry_count == 0:
            message = f"No entry at index {index}: the database has no entries"
        else:
            message = (
                f"No entry at index {index}: valid indexes are 1 to {entry_count}"
            )
        super().__init__(message)
        self.index = index
        self.entry_count = entry_count


class InvalidTimeWindow(TimeTrackError):
    exit_code = 6


class DuplicateCategory(TimeTrackError):
    exit_code = 7

    def __init__(self, short_name: str) -> None:
        super().__init__(f"A category with short name '{short_name}' already exists")
        self.short_name = short_name


class InvalidEdit(TimeTrackError):
    """Conflicting or missing edit options."""

    exit_code = 8


class DatabaseUnavailable(TimeTrackError):
    """The database file exists but cannot be read or replaced."""

    exit_code = 9
