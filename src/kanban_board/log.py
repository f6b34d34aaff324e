"""Logging setup: stdlib logging routed through rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure the ``kanban_board`` logger.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("kanban_board")
    # Replace handlers from an earlier call
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level.upper())
