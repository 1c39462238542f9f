"""Logging setup for services embedding the cache."""

import logging
import sys

from assignment_cache.core.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    """Configure stdout logging.

    With settings.debug the cache HIT/MISS/SET lines are emitted (DEBUG);
    otherwise only invalidations and failures (INFO and up). The redis
    client's own loggers stay at WARNING.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("assignment_cache").setLevel(level)
    logging.getLogger("redis").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
