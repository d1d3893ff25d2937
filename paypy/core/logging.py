"""
Logging helpers for paypy.

All loggers live under the ``paypy`` namespace so applications can tune
the whole library through one logger. Nothing here installs handlers;
output goes wherever the application's logging configuration sends it.
"""

import logging
from typing import Union

PACKAGE_LOGGER = 'paypy'

# Loggers created by the library itself
LIBRARY_LOGGERS = (
    PACKAGE_LOGGER,
    'paypy.client',
    'paypy.api',
    'paypy.version',
)


def get_logger(name: str) -> logging.Logger:
    """Return a propagating logger inside the paypy namespace.

    Names outside the namespace are nested under it, so
    ``get_logger('custom')`` yields ``paypy.custom``. Until the
    application configures the root logger, a logger with no level of
    its own is held at WARNING to keep request chatter quiet.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + '.'):
        name = f"{PACKAGE_LOGGER}.{name}"

    logger = logging.getLogger(name)
    logger.propagate = True

    if not logging.getLogger().handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Set the level of every paypy logger.

    Args:
        level: Logging level, numeric or name (default: logging.INFO)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    for logger_name in LIBRARY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True
