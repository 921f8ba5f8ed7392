"""Structured logging utilities."""

import logging

from ..config import AppSettings

_LOGGER: logging.Logger | None = None


def get_logger(settings: AppSettings | None = None) -> logging.Logger:
    global _LOGGER
    if _LOGGER is not None:
        if settings is not None:
            _LOGGER.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
        return _LOGGER

    config = settings or AppSettings()
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)

    logger = logging.getLogger("preflop_advisor")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    _LOGGER = logger
    return logger
