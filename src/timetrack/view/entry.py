# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from timetrack.model.database import Database
from timetrack.service.category import category_label, find_category
from timetrack.service.entry import entry_duration
from timetrack.service.history import history_index
from timetrack.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_time_str,
    duration_to_str_optional,
)
from timetrack.view.header import header


def single_entry_report(
    database: Database,
    storage_index: int,
    title: str = "entry",
    show_header: bool = True,
) -> None:
    if show_header:
        header(title)

    entries = database["entries"]
    entry = entries[storage_index]

    category_value = ""
    if entry["category_id"] is not None:
        category = find_category(database["categories"], entry["category_id"])
        if category is None:
            category_value = f"{category_label(database['categories'], entry['category_id'])} (missing)"
        else:
            category_value = f"{category['short_name']} - {category['long_name']}"

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("index", str(history_index(entries, storage_index)))
    entry_table.add_row("date", datetime_to_display_local_date_str(entry["timestamp"]))
    entry_table.add_row("time", datetime_to_display_local_time_str(entry["timestamp"]))
    entry_table.add_row(
        "duration", duration_to_str_optional(entry_duration(database, storage_index))
    )
    entry_table.add_row("category", escape(category_value))
    entry_table.add_row(
        "message", escape(entry["message"]) if entry["message"] else "[dim]-[/dim]"
    )

    console = Console()
    console.print(entry_table)


def categories_report(database: Database) -> None:
    header("categories")

    entry_counts: dict[int, int] = {}
    for entry in database["entries"]:
        if entry["category_id"] is not None:
            entry_counts[entry["category_id"]] = (
                entry_counts.get(entry["category_id"], 0) + 1
            )

    categories_table = Table(box=box.SIMPLE)
    categories_table.add_column("id", justify="right")
    categories_table.add_column("short")
    categories_table.add_column("long")
    categories_table.add_column("entries", justify="right")

    for category in database["categories"]:
        categories_table.add_row(
            str(category["id"]),
            escape(category["short_name"]),
            escape(category["long_name"]),
            str(entry_counts.get(category["id"], 0)),
        )

    console = Console()
    console.print(categories_table)
