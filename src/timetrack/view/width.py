# SPDX-License-Identifier: MIT

from typing import Callable, Optional

from rich.console import Console

from timetrack import configuration

WidthProbe = Callable[[], Optional[int]]


def probe_terminal_width() -> Optional[int]:
    """Column count of the attached terminal, or None when output is not a terminal."""
    console = Console()
    if not console.is_terminal:
        return None
    return console.size.width


def resolve_width(
    width: Optional[int] = None,
    probe: WidthProbe = probe_terminal_width,
    fallback: Optional[int] = None,
) -> int:
    if width is not None:
        return width
    probed = probe()
    if probed is not None:
        return probed
    if fallback is not None:
        return fallback
    return configuration.FALLBACK_WIDTH
