"""Logging configuration helpers for the exam console."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.WARNING) -> Logger:
    """Configure basic logging for the application and return the package logger.

    The console shares stdout/stderr with the candidate, so the default level
    keeps lifecycle chatter out of the prompts unless explicitly requested.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("exam_app")
