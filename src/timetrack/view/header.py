# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from timetrack.view.state import get_show_header


def header(title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header above a report.

    Args:
        title: What the report shows, e.g. "log"
        sub_header: Optional detail line, e.g. the time window
    """
    if not get_show_header():
        return

    print(
        Padding(
            f"[dark_orange]timetrack[/dark_orange] [sandy_brown]{escape(title)}[/sandy_brown]",
            (1, 0, 0, 1),
        )
    )
    if sub_header is not None:
        print(Padding(f"[plum1]{escape(sub_header)}[/plum1]", (0, 1)))
