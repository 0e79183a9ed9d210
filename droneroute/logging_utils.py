"""Mini README: Application-wide logging helpers for the route planner.

Structure:
    * get_logger - factory returning module loggers with baseline config.
    * configure_root_logger - one-shot root logger setup, accepts level names.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The root
    handler is attached exactly once so repeated imports (or a CLI calling
    ``configure_root_logger`` with a different level) never duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach the bracketed formatter to the root logger and set its level.

    The handler is only added on the first call; later calls just adjust the
    level so the CLI can raise verbosity after modules have been imported.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(_coerce_level(level))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
