# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from timetrack.repository.database import DATABASE_REPO
from timetrack.service.edit import edit_entry
from timetrack.service.entry import add_entry
from timetrack.service.history import locate_entry
from timetrack.terminal.error import report_errors
from timetrack.terminal.parse import parse_date, parse_datetime
from timetrack.view.entry import single_entry_report


def add(
    message: Annotated[
        Optional[str],
        typer.Argument(help="what was done since the previous entry; omit to mark idle time"),
    ] = None,
    category: Annotated[
        Optional[str],
        typer.Argument(help="short name of the category"),
    ] = None,
    at: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--time",
            "-t",
            parser=parse_datetime,
            help="valid inputs: (H)H:mm, YYYY-MM-DD HH:mm, now",
        ),
    ] = None,
) -> None:
    """
    add an entry that closes the time since the previous entry
    """
    with report_errors():
        database = DATABASE_REPO.read()
        add_entry(database, message, category, at)
        DATABASE_REPO.write(database)

    single_entry_report(database, len(database["entries"]) - 1, title="added entry")


def edit(
    index: Annotated[
        int,
        typer.Argument(help="1 is the latest entry, see the # column of log"),
    ] = 1,
    message: Annotated[Optional[str], typer.Option("--message", "-m")] = None,
    no_message: Annotated[
        bool,
        typer.Option("--no-message", help="turn the entry into an idle marker"),
    ] = False,
    time: Annotated[
        Optional[str],
        typer.Option(
            "--time",
            "-t",
            help="valid inputs: (H)H:mm on the entry's day, YYYY-MM-DD HH:mm, now",
        ),
    ] = None,
    day: Annotated[
        Optional[str],
        typer.Option(
            "--day",
            "-d",
            help="move the entry to another day; valid inputs: YYYY-MM-DD, today, yesterday, or day offset like -1",
        ),
    ] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-c")] = None,
    clear_category: Annotated[bool, typer.Option("--clear-category")] = False,
) -> None:
    """
    edit an entry in place
    """
    with report_errors():
        database = DATABASE_REPO.read()

        at: Optional[pendulum.DateTime] = None
        if time is not None or day is not None:
            current = database["entries"][locate_entry(database["entries"], index)][
                "timestamp"
            ]
            new_day = parse_date(day)
            if new_day is not None:
                current = current.set(
                    year=new_day.year, month=new_day.month, day=new_day.day
                )
            at = current
            if time is not None:
                at = parse_datetime(time, default_date=current)

        edit_entry(
            database,
            index,
            message=message,
            clear_message=no_message,
            at=at,
            category=category,
            clear_category=clear_category,
        )
        DATABASE_REPO.write(database)

    single_entry_report(
        database,
        locate_entry(database["entries"], index),
        title="edited entry",
    )


def show(
    index: Annotated[
        int,
        typer.Argument(help="1 is the latest entry, see the # column of log"),
    ] = 1,
) -> None:
    """
    show every field of an entry
    """
    with report_errors():
        database = DATABASE_REPO.read()
        storage_index = locate_entry(database["entries"], index)

    single_entry_report(database, storage_index)
