"""Logging setup driven by LoggingSettings."""

import logging
import sys
from pathlib import Path

from vehicle_service.shared.config.settings import LoggingSettings

ROOT_LOGGER = "vehicle_service"


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Attach console/file handlers to the package root logger.

    Calling this more than once replaces the previously installed handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(settings.format)
    if settings.console_enabled:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        logger.addHandler(console)
    if settings.file_enabled:
        path = Path(settings.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger
