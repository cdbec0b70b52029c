# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

from timetrack.configuration import APP_NAME


def configure_logging(verbose: bool = False) -> None:
    """Send the package's log records to stderr through rich."""
    logger = logging.getLogger(APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
