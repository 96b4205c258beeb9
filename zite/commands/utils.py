"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging() -> None:
    """Configure logging for the zite CLI.

    Log levels:
    - Normal: INFO - one line per rendered page or copied file
    - Debug (ZITE_DEBUG=1): DEBUG - also tree reads and layout lookups
    """
    debug = bool(os.environ.get("ZITE_DEBUG"))
    level = logging.DEBUG if debug else logging.INFO

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("zite")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
