"""Shared utilities for Gambit Rating."""

# Gambit Rating
# Copyright (C) 2025  Gambit Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import logging
import os
import uuid

from gambitrating.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger with the package's handler and format.

    The level is read from the ``GAMBIT_RATING_LOG_LEVEL`` environment
    variable and defaults to WARNING. Calling this twice for the same
    name does not add a second handler.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    return logger


def set_package_log_level(level: int) -> None:
    """Set the level of every logger created under the ``gambitrating`` package."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("gambitrating") and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed with a class name."""
    unique = uuid.uuid4().hex
    return f"{prefix}_{unique}" if prefix else unique
