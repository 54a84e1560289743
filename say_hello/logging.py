"""Console logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_LOGGER = "say_hello"


def configure_logging(level: int | str = logging.WARNING, color: bool = True) -> RichHandler:
    """Attach a stderr ``RichHandler`` to the package logger.

    Any handler installed by an earlier call is replaced, so repeated CLI
    invocations in one process do not duplicate output.

    Args:
        level: Logging level, numeric or a name such as ``"DEBUG"``.
        color: Enable colored output.

    Returns:
        The installed handler.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Invalid log level: {level}")
        level = resolved

    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(level=level, console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(PROJECT_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
