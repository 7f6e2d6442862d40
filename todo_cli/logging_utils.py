"""Logging setup for the todo command line."""

from __future__ import annotations

import logging

from rich.console import Console  # type: ignore[import-not-found]
from rich.logging import RichHandler  # type: ignore[import-not-found]

from todo_cli.constants import debug_enabled

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging with a RichHandler on stderr.

    Command output goes to stdout, so log records are kept on stderr.

    Args:
        verbose: Enable debug level logging
    """
    log_level = logging.DEBUG if verbose or debug_enabled() else logging.INFO

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(level=log_level, handlers=[handler], force=True)
