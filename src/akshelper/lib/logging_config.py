"""Logging setup for akshelper.

Library modules obtain loggers through ``get_logger`` and never configure
handlers themselves; the CLI calls ``setup_logging`` once per command.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_LEVEL_ENV_VAR = "AKSHELPER_LOG_LEVEL"

_PACKAGE_LOGGER = "akshelper"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def _resolve_level(verbose: bool, quiet: bool) -> int:
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        level = logging.getLevelName(env_level.upper())
        if isinstance(level, int):
            return level
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger.

    Args:
        verbose: Log debug messages
        quiet: Only log errors

    The ``AKSHELPER_LOG_LEVEL`` environment variable, when set to a valid
    level name, takes precedence over both flags.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(verbose, quiet))

    # Drop handlers installed by earlier calls.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
