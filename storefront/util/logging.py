"""Logging configuration for the application."""

import logging
import sys

from storefront.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log every request or statement at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Pick the root level: DEBUG when debugging, WARNING under test, else INFO."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure stdout logging for the process.

    Safe to call more than once; later calls replace earlier handlers.
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
