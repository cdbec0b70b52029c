# SPDX-License-Identifier: MIT

import io
from typing import Optional

import pendulum
from rich import box
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from timetrack.model.report import Detail, Report
from timetrack.time import (
    date_to_display_str,
    datetime_to_display_local_time_str,
    datetime_to_display_short_datetime_str,
    duration_to_str,
    duration_to_str_optional,
)
from timetrack.view.width import WidthProbe, probe_terminal_width, resolve_width

CATEGORY_MAX_WIDTH = 16


def report_renderables(
    report: Report,
    detail: Detail = Detail.ENTRIES,
    no_wrap: bool = False,
) -> list[RenderableType]:
    renderables: list[RenderableType] = []
    if detail == Detail.ENTRIES:
        renderables.append(entries_table(report, no_wrap=no_wrap))
    if detail in (Detail.ENTRIES, Detail.DAILY):
        renderables.append(categories_table(report))
        if detail == Detail.DAILY or len(report["days"]) > 1:
            renderables.append(days_table(report))
    renderables.append(totals_line(report))
    return renderables


def render_report(
    report: Report,
    width: Optional[int] = None,
    probe: WidthProbe = probe_terminal_width,
    detail: Detail = Detail.ENTRIES,
    no_wrap: bool = False,
) -> str:
    """Render the report as plain text no wider than `width` columns."""
    console = Console(
        width=resolve_width(width, probe),
        file=io.StringIO(),
        record=True,
        color_system=None,
        force_terminal=False,
    )
    for renderable in report_renderables(report, detail, no_wrap):
        console.print(renderable)
    return console.export_text()


def print_report(
    report: Report,
    width: Optional[int] = None,
    probe: WidthProbe = probe_terminal_width,
    detail: Detail = Detail.ENTRIES,
    no_wrap: bool = False,
) -> None:
    console = Console(width=resolve_width(width, probe))
    for renderable in report_renderables(report, detail, no_wrap):
        console.print(renderable)


def entries_table(report: Report, no_wrap: bool = False) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("time", no_wrap=True)
    table.add_column("dur", justify="right", no_wrap=True)
    table.add_column(
        "category", no_wrap=True, overflow="ellipsis", max_width=CATEGORY_MAX_WIDTH
    )
    if no_wrap:
        table.add_column("message", no_wrap=True, overflow="ellipsis")
    else:
        table.add_column("message", overflow="fold")

    # Show dates only when the rows span more than one day
    spans_days = len({row["timestamp"].date() for row in report["rows"]}) > 1

    for row in report["rows"]:
        if spans_days:
            time_value = datetime_to_display_short_datetime_str(row["timestamp"])
        else:
            time_value = datetime_to_display_local_time_str(row["timestamp"])

        duration_value = duration_to_str_optional(row["duration"])
        if row["out_of_order"]:
            duration_value = f"[yellow]{duration_value}![/yellow]"

        if row["is_marker"]:
            message_value = "[dim]-[/dim]"
        else:
            message_value = escape(row["message"] or "")

        table.add_row(
            str(row["history_index"]),
            time_value,
            duration_value,
            escape(row["category_label"]),
            message_value,
            style="dim" if row["is_marker"] else None,
        )

    if len(report["rows"]) > 0:
        table.add_row("", "", duration_to_str(report["total"]), "total", "", style="bold")

    return table


def categories_table(report: Report) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("category", overflow="ellipsis")
    table.add_column("dur", justify="right", no_wrap=True)
    table.add_column("share", justify="right", no_wrap=True)

    total_seconds = report["total"].total_seconds()
    for category_total in report["categories"]:
        seconds = category_total["duration"].total_seconds()
        share = f"{seconds / total_seconds:.0%}" if total_seconds > 0 else "-"
        table.add_row(
            escape(category_total["label"]),
            duration_to_str(category_total["duration"]),
            share,
        )
    return table


def days_table(report: Report) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("day", no_wrap=True)
    table.add_column("dur", justify="right", no_wrap=True)
    for day_total in report["days"]:
        table.add_row(
            date_to_display_str(day_total["date"]),
            duration_to_str(day_total["duration"]),
        )
    return table


def totals_line(report: Report) -> Text:
    tracked = pendulum.duration(
        seconds=report["total"].total_seconds() - report["idle"].total_seconds()
    )
    return Text(
        f"total {duration_to_str(report['total'])}"
        f"  tracked {duration_to_str(tracked)}"
        f"  idle {duration_to_str(report['idle'])}",
        style="bold",
    )
