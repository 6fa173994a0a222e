"""Logging for augflow.

Every module logs through ``get_logger(__name__)``, so all records flow into
the ``augflow`` package logger. Solvers report each augmentation and their
completion at DEBUG and stay silent at INFO, which is the default level. Call
``setup_root_logger(logging.DEBUG)`` to trace a solver run.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "augflow"

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_root_logger(
    level: int = logging.INFO, handler: Optional[logging.Handler] = None
) -> logging.Logger:
    """Configure the ``augflow`` package logger.

    Args:
        level: Level for the package logger; module loggers inherit it.
        handler: Replaces any installed handler when given. Otherwise a
            stdout handler is installed, unless one is already present.

    Returns:
        The package logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    if handler is not None:
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
    elif not root_logger.handlers:
        default = logging.StreamHandler(sys.stdout)
        default.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        root_logger.addHandler(default)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for an augflow module.

    The package logger is set up on first use; a level or handler chosen
    earlier through ``setup_root_logger`` is left as is.
    """
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        setup_root_logger()
    return logging.getLogger(name)
