# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console
from rich.markup import escape

from timetrack.error import TimeTrackError

err_console = Console(stderr=True)


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn a failed command into a red message and the error's exit code."""
    try:
        yield
    except TimeTrackError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=e.exit_code)
