"""Shared Rich consoles and logging setup for CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()

# Standard output is the data stream; diagnostics go to stderr.
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Route log records to stderr through Rich at *level*."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
