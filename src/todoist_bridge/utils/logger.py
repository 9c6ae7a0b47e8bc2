"""Rotating log file for the bridge.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
until a host calls :func:`get_logger`, which attaches the file handler to the
``todoist_bridge`` package logger. Records from every submodule reach the file
by propagation. ``TODOIST_BRIDGE_LOG_LEVEL`` sets the threshold (DEBUG when
unset or unrecognised).
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

PACKAGE_LOGGER = "todoist_bridge"
LOG_LEVEL_ENV_VAR = "TODOIST_BRIDGE_LOG_LEVEL"

_LOG_FILE = "todoist-bridge.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_log_file() -> Path:
    """Path of the active log file."""
    return Path(user_log_dir(PACKAGE_LOGGER)) / _LOG_FILE


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV_VAR, "DEBUG").upper())
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the package logger, wiring its file handler on first call."""
    global _logger
    if _logger is None:
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )

        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.setLevel(_level_from_env())
        # Avoid stacking handlers when the singleton is reset in tests
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False

        _logger = logger

    return _logger
