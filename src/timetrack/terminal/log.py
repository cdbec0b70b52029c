# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from timetrack.model.report import Detail
from timetrack.repository.database import DATABASE_REPO
from timetrack.service.report import build_report, day_window
from timetrack.terminal.error import report_errors
from timetrack.terminal.parse import is_day_param, parse_datetime
from timetrack.time import datetime_to_display_local_datetime_str, now_local
from timetrack.view.header import header
from timetrack.view.report import print_report

_DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, now, today, yesterday, or day offset like -1"


def log(
    days: Annotated[
        Optional[int],
        typer.Argument(help="how many days before today to start listing"),
    ] = None,
    back: Annotated[
        Optional[int],
        typer.Option("--back", "-b", help="how many days into the past to shift the listing"),
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--from", "-f", help=_DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--to", "-t", help=f"{_DATETIME_HELP}; a day is included whole"),
    ] = None,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="only list entries of this category"),
    ] = None,
    detail: Annotated[
        Detail,
        typer.Option("--detail", "-d", help="total, daily or entries"),
    ] = Detail.ENTRIES,
    width: Annotated[
        Optional[int],
        typer.Option("--width", "-w", min=20, help="maximum width, defaults to the terminal width"),
    ] = None,
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", "-nw", help="truncate long messages instead of wrapping"),
    ] = False,
) -> None:
    """
    list entries and the time spent on each category
    """
    if (days is not None or back is not None) and (start is not None or end is not None):
        raise typer.BadParameter(
            "DAYS and --back cannot be combined with --from or --to"
        )
    if days is not None and days < 0:
        raise typer.BadParameter(f"DAYS must not be negative, got {days}")

    now = now_local()
    window_start, window_end = day_window(now, days or 0, back or 0)
    if start is not None:
        window_start = __parse_bound(start)
    if end is not None:
        window_end = __parse_bound(end)
        if is_day_param(end):
            window_end = window_end.add(days=1)

    with report_errors():
        database = DATABASE_REPO.read()
        report = build_report(database, window_start, window_end, category)

    sub_header = (
        f"{datetime_to_display_local_datetime_str(window_start)}"
        f" to {datetime_to_display_local_datetime_str(window_end)}"
    )
    if category is not None:
        sub_header += f", category {category}"
    header("log", sub_header)
    print_report(report, width=width, detail=detail, no_wrap=no_wrap)


def __parse_bound(value: str) -> pendulum.DateTime:
    bound = parse_datetime(value)
    if bound is None:
        raise typer.BadParameter(f"Missing time window bound: '{value}'")
    return bound
