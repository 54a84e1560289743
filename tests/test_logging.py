"""Test the logging module."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from say_hello.logging import PROJECT_LOGGER, configure_logging


def test_configure_logging_accepts_level_names() -> None:
    handler = configure_logging("debug", color=False)

    assert handler.level == logging.DEBUG
    assert logging.getLogger(PROJECT_LOGGER).level == logging.DEBUG


def test_configure_logging_replaces_previous_handler() -> None:
    configure_logging(logging.INFO)
    configure_logging(logging.WARNING)

    handlers = [h for h in logging.getLogger(PROJECT_LOGGER).handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Invalid log level: LOUD"):
        configure_logging("LOUD")
