"""Logging utilities."""

# Doubles Pairing
# Copyright (C) 2025  Doubles Pairing developers
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
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from PyQt6 import QtCore

from doublespairing.constants import APP_NAME, DEBUG_ENV_VAR, LOG_FILE_NAME

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

# loggers handed out by setup_logger, so the level can be changed later
_loggers: List[logging.Logger] = []


def default_log_level() -> int:
    """Return DEBUG when the debug environment variable is set, else INFO."""
    if os.environ.get(DEBUG_ENV_VAR):
        return logging.DEBUG
    return logging.INFO


def get_log_folder() -> Optional[str]:
    """Find a writable folder for the log file.

    Returns
    -------
    str or None
        the folder, or None if no writable location could be determined
    """
    # Preferred Windows location: %APPDATA%\Doubles Pairing
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        log_folder = os.path.join(os.environ["APPDATA"], APP_NAME)
    else:
        # prefer Qt's AppDataLocation then TempLocation
        log_folder = QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.AppDataLocation
        )
        if not log_folder:
            log_folder = QtCore.QStandardPaths.writableLocation(
                QtCore.QStandardPaths.StandardLocation.TempLocation
            )
        if log_folder:
            log_folder = os.path.join(log_folder, APP_NAME)

    if not log_folder:
        return None

    log_folder = os.path.join(log_folder, "logs")
    try:
        os.makedirs(log_folder, exist_ok=True)
    except OSError:
        # If we can't create the folder, fall back to temp dir
        log_folder = os.path.join(
            QtCore.QStandardPaths.writableLocation(
                QtCore.QStandardPaths.StandardLocation.TempLocation
            ),
            APP_NAME,
            "logs",
        )
        os.makedirs(log_folder, exist_ok=True)
    return log_folder


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    level = default_log_level()
    lgr.setLevel(level)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    file_handler = None
    try:
        log_folder = get_log_folder()
        if log_folder:
            log_path = os.path.join(log_folder, LOG_FILE_NAME)
            # Use RotatingFileHandler to prevent unbounded log growth
            file_handler = RotatingFileHandler(
                log_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            file_handler.setFormatter(log_formatter)
    except OSError:
        # continue without file logging
        file_handler = None

    # Console Handler, stderr keeps stdout free for the printed schedule
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.WARNING if level > logging.DEBUG else level)
    lgr.addHandler(console_handler)
    if file_handler:
        lgr.addHandler(file_handler)
    if lgr not in _loggers:
        _loggers.append(lgr)
    lgr.debug("logger %s initialized", logger_name)
    return lgr


def set_log_level(level: int) -> None:
    """Change the level of every logger created by setup_logger.

    Parameters
    ----------
    level : int
        a ``logging`` level, e.g. ``logging.DEBUG``
    """
    for lgr in _loggers:
        lgr.setLevel(level)
        for handler in lgr.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(
                handler, RotatingFileHandler
            ):
                handler.setLevel(level)


#  LocalWords:  AppDataLocation TempLocation
