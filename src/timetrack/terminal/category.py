# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich import print
from rich.markup import escape

from timetrack.repository.database import DATABASE_REPO
from timetrack.service.category import add_category as add_category_to_database
from timetrack.terminal.error import report_errors
from timetrack.view.entry import categories_report


def add_category(
    long_name: Annotated[
        str,
        typer.Option("--long", "-l", help="name used when printing"),
    ],
    short_name: Annotated[
        str,
        typer.Option("--short", "-s", help="name typed on the command line"),
    ],
) -> None:
    """
    add a category
    """
    with report_errors():
        database = DATABASE_REPO.read()
        category = add_category_to_database(database, long_name, short_name)
        DATABASE_REPO.write(database)

    print(
        f"added category {category['id']}: "
        f"[bold]{escape(category['short_name'])}[/bold] - {escape(category['long_name'])}"
    )


def categories() -> None:
    """
    list all categories
    """
    with report_errors():
        database = DATABASE_REPO.read()
    categories_report(database)
