"""Logging configuration for processes embedding the statistics engine."""

from __future__ import annotations

import logging
import sys

from kakeibo_config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite")


def configure_logging(settings: Settings | None = None) -> None:
    """Configure application logging.

    Sets up logging with:
    - Console output with timestamps and module names
    - Configurable log level for kakeibo modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("kakeibo").setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
