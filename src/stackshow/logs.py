"""structlog setup for the stackshow CLI and tests."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "stackshow"


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Send stackshow's structured logs to ``stream`` (stderr by default).

    Library loggers are stdlib loggers under ``stackshow``; structlog renders
    the event and the stdlib handler decides level and destination.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False


def reset_logging() -> None:
    """Undo configure_logging, back to structlog and stdlib defaults."""
    structlog.reset_defaults()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
