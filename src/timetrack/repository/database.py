# SPDX-License-Identifier: MIT

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Optional

from timetrack import configuration, time
from timetrack.error import CorruptDatabase, DatabaseUnavailable
from timetrack.model.category import Category
from timetrack.model.database import Database
from timetrack.model.entry import OPTIONAL_ENTRY_KEYS, Entry
from timetrack.template.database import get_database_template

logger = logging.getLogger(__name__)


def load_database(document: Any) -> Database:
    """
    Convert a parsed JSON document into the in-memory database.

    Raises CorruptDatabase when a field is missing or has the wrong type, a
    timestamp cannot be parsed, or two categories share an ID.
    """
    if not isinstance(document, dict):
        raise CorruptDatabase("The database document must be a JSON object")

    categories = [
        __convert_category_for_deserialization(position, raw_category)
        for position, raw_category in enumerate(
            __require_list(document, "categories")
        )
    ]
    seen_ids: set[int] = set()
    for category in categories:
        if category["id"] in seen_ids:
            raise CorruptDatabase(f"Duplicate category id {category['id']}")
        seen_ids.add(category["id"])

    entries = [
        __convert_entry_for_deserialization(position, raw_entry)
        for position, raw_entry in enumerate(__require_list(document, "entries"))
    ]

    next_category_id = document.get("next_category_id")
    if next_category_id is not None and not __is_int(next_category_id):
        raise CorruptDatabase("'next_category_id' must be an integer")

    return {
        "categories": categories,
        "entries": entries,
        "next_category_id": next_category_id,
    }


def dump_database(database: Database) -> dict[str, Any]:
    """Convert the in-memory database back into a JSON-serializable document."""
    document: dict[str, Any] = {
        "categories": [
            {
                "id": category["id"],
                "long_name": category["long_name"],
                "short_name": category["short_name"],
            }
            for category in database["categories"]
        ],
        "entries": [
            __convert_entry_for_serialization(entry) for entry in database["entries"]
        ],
    }
    if database["next_category_id"] is not None:
        document["next_category_id"] = database["next_category_id"]
    return document


class DatabaseRepository:
    """
    Reads and writes the whole database document in one go.

    Writes go to a temporary file that then replaces the database, so a crash
    never leaves a half written file behind. There is no locking: two
    processes writing at the same time can still lose one of the updates.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATABASE_PATH

    def read(self) -> Database:
        if not self.path.is_file():
            logger.debug("no database at %s, starting empty", self.path)
            return get_database_template()

        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CorruptDatabase(f"{self.path} is not valid JSON: {e}") from e
        except OSError as e:
            raise DatabaseUnavailable(f"Cannot read {self.path}: {e}") from e

        database = load_database(document)
        logger.debug(
            "loaded %d categories and %d entries from %s",
            len(database["categories"]),
            len(database["entries"]),
            self.path,
        )
        return database

    def write(self, database: Database) -> None:
        document = dump_database(database)
        try:
            self.__replace_file(document)
        except OSError as e:
            raise DatabaseUnavailable(f"Cannot write {self.path}: {e}") from e

        logger.debug(
            "saved %d categories and %d entries to %s",
            len(database["categories"]),
            len(database["entries"]),
            self.path,
        )

    def __replace_file(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tf:
            temporary_path = Path(tf.name)
            try:
                json.dump(document, tf, indent=2, ensure_ascii=False)
                tf.write("\n")
                tf.flush()
                os.fsync(tf.fileno())
            except BaseException:
                tf.close()
                temporary_path.unlink(missing_ok=True)
                raise

        try:
            # The temporary file is created 0600; keep the mode of the file it replaces
            if self.path.is_file():
                os.chmod(temporary_path, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(temporary_path, self.path)
        except OSError:
            temporary_path.unlink(missing_ok=True)
            raise


def __require_list(document: dict[str, Any], key: str) -> list[Any]:
    if key not in document:
        raise CorruptDatabase(f"The database document has no '{key}' list")
    value = document[key]
    if not isinstance(value, list):
        raise CorruptDatabase(f"'{key}' must be a list")
    return value


def __is_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid id
    return isinstance(value, int) and not isinstance(value, bool)


def __convert_category_for_deserialization(
    position: int, raw_category: Any
) -> Category:
    if not isinstance(raw_category, dict):
        raise CorruptDatabase(f"Category {position} must be an object")
    for key in ("id", "long_name", "short_name"):
        if key not in raw_category:
            raise CorruptDatabase(f"Category {position} has no '{key}'")
    if not __is_int(raw_category["id"]):
        raise CorruptDatabase(f"Category {position}: 'id' must be an integer")
    for key in ("long_name", "short_name"):
        if not isinstance(raw_category[key], str):
            raise CorruptDatabase(f"Category {position}: '{key}' must be a string")
    return {
        "id": raw_category["id"],
        "long_name": raw_category["long_name"],
        "short_name": raw_category["short_name"],
    }


def __convert_entry_for_deserialization(position: int, raw_entry: Any) -> Entry:
    if not isinstance(raw_entry, dict):
        raise CorruptDatabase(f"Entry {position} must be an object")
    if "timestamp" not in raw_entry:
        raise CorruptDatabase(f"Entry {position} has no 'timestamp'")
    if not isinstance(raw_entry["timestamp"], str):
        raise CorruptDatabase(f"Entry {position}: 'timestamp' must be a string")
    try:
        timestamp = time.datetime_from_storage_str(raw_entry["timestamp"])
    except ValueError as e:
        raise CorruptDatabase(
            f"Entry {position}: cannot parse timestamp '{raw_entry['timestamp']}'"
        ) from e

    message = raw_entry.get("message")
    if message is not None and not isinstance(message, str):
        raise CorruptDatabase(f"Entry {position}: 'message' must be a string or null")

    category_id = raw_entry.get("category_id")
    if category_id is not None and not __is_int(category_id):
        raise CorruptDatabase(
            f"Entry {position}: 'category_id' must be an integer or null"
        )

    entry: Entry = {
        "timestamp": timestamp,
        "message": message,
        "category_id": category_id,
    }
    omitted_keys = frozenset(key for key in OPTIONAL_ENTRY_KEYS if key not in raw_entry)
    if omitted_keys:
        entry["omitted_keys"] = omitted_keys
    return entry


def __convert_entry_for_serialization(entry: Entry) -> dict[str, Any]:
    raw_entry: dict[str, Any] = {
        "timestamp": time.datetime_to_storage_str(entry["timestamp"]),
    }
    omitted_keys = entry.get("omitted_keys", frozenset())
    for key in OPTIONAL_ENTRY_KEYS:
        if entry[key] is not None or key not in omitted_keys:
            raw_entry[key] = entry[key]
    return raw_entry


DATABASE_REPO = DatabaseRepository()
