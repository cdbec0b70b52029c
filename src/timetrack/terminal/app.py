# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from timetrack.initialize import initialize
from timetrack.logger import configure_logging
from timetrack.terminal import category, configuration, entry, log
from timetrack.terminal.custom_typer import AliasedTyperGroup
from timetrack.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="timetrack - log what you did, when you finished it",
    no_args_is_help=True,
)
app.command(name="add, a")(entry.add)
app.command(name="edit, e")(entry.edit)
app.command(name="show, s")(entry.show)
app.command(name="log, l")(log.log)
app.command(name="add-category, ac", no_args_is_help=True)(category.add_category)
app.command(name="categories, cats")(category.categories)
app.add_typer(configuration.app, name="config, c", help="view or change the configuration")


@app.command("help, h")
def help(ctx: typer.Context) -> None:
    """
    show this help
    """
    root = ctx.parent if ctx.parent is not None else ctx
    typer.echo(root.get_help())


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    timetrack - log what you did, when you finished it

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    initialize()
    view_state.set_show_header(not no_header)


def run() -> None:
    app()
