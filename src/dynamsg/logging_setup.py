"""Logging configuration for the command line tool."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", no_color: bool = False) -> None:
    """Configure the root logger to write to stderr.

    Uses a Rich handler on an interactive terminal and a plain stream
    handler otherwise (pipes, CI logs).
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if sys.stderr.isatty() and not no_color:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    root_logger.debug("Logging configured: level=%s", level)
