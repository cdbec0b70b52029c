# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timetrack import configuration
from timetrack.repository.configuration import CONFIGURATION_REPO
from timetrack.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row(
        "database_path",
        config["database_path"] if config["database_path"] else "None (default)",
    )
    table.add_row("resolved database", str(configuration.DATABASE_PATH))
    table.add_row("fallback_width", str(config["fallback_width"]))

    console.print(table)


@app.command("set, s")
def set(
    database_path: Annotated[
        Optional[str],
        typer.Option(
            "--database-path",
            "-p",
            help="where the database JSON file lives",
        ),
    ] = None,
    remove_database_path: Annotated[
        bool,
        typer.Option(
            "--remove-database-path",
            "-rp",
            help="go back to the database in the user data directory",
        ),
    ] = False,
    fallback_width: Annotated[
        Optional[int],
        typer.Option(
            "--fallback-width",
            "-w",
            min=20,
            help="table width used when the output is not a terminal",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    if database_path is not None and remove_database_path:
        raise typer.BadParameter(
            "--database-path and --remove-database-path cannot be used together"
        )

    CONFIGURATION_REPO.update_config(
        database_path=database_path,
        remove_database_path=remove_database_path,
        fallback_width=fallback_width,
    )
    CONFIGURATION_REPO.flush()
    configuration.apply_configuration(CONFIGURATION_REPO.get_config())

    view()
