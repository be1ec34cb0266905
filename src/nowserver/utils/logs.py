"""Diagnostic logging — always to stderr, stdout carries the protocol."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("debug", "info", "warning", "error")

stderr_console = Console(stderr=True)


def configure_logging(level: str = "warning") -> None:
    """Install a stderr :class:`RichHandler` on the root logger."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=stderr_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
