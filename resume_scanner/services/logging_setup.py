"""
Logging setup for the CLI — routes log records through rich.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from resume_scanner.services.settings import log_level


def setup_logging(level: str | None = None, console: Console | None = None) -> None:
    """Configure the root logger with a RichHandler writing to stderr."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=(level or log_level()).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
