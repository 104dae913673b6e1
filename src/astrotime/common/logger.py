"""Defines the :class:`.Logger` class and the one-line ``astrotime`` logging helpers.

Modules of the package never configure logging themselves, they report through the helpers:

.. code-block:: python

    astrotimeLogError("Leap second table has no entry valid for: 1960-01-01")

The ``astrotime`` logger is set up from :class:`.BehavioralConfig` on the first message, unless
the application attached its own handlers to it beforehand.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from .behavioral_config import BehavioralConfig

ROOT_LOGGER_NAME: str = "astrotime"
"""``str``: name of the logger that every module of the package reports to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by stdout and file handlers."""


def logFileName(name: str, stamp: datetime | None = None) -> str:
    """Return the file name of the log `name` started at `stamp`, free of path separators & colons."""
    if stamp is None:
        stamp = datetime.now()
    return f"{name}_{stamp.strftime('%Y-%m-%dT%H-%M-%S%f')}.log"


class Logger:
    """Thin wrapper attaching a configured handler to a standard :class:`logging.Logger`.

    Records go either to ``stdout`` or to a rotating, timestamped log file, as set in the
    ``logging`` section of :class:`.BehavioralConfig`. Anything not defined here is forwarded to
    the wrapped logger.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Look up the logger `name` and attach a handler to it if it has none.

        Args:
            name (``str``): name of the logger instance
            level (``int``, optional): minimum level of published log records
            path (``str``, optional): directory the log file is written to, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): attach a handler even if one already exists
        """
        config = BehavioralConfig.getConfig().logging
        level = level or config.Level
        path = path or config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = "stdout"
        if self.logger.handlers and not allow_multiple_handlers:
            return

        handler = self._streamHandler() if path == "stdout" else self._fileHandler(name, Path(path), config)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def _streamHandler(self) -> logging.Handler:
        return logging.StreamHandler(sys.stdout)

    def _fileHandler(self, name: str, directory: Path, config) -> logging.Handler:
        """Return a size-rotated file handler writing into `directory`, created if needed."""
        if not directory.exists():
            self.logger.info(f"Creating log directory {str(directory)!r}")
            directory.mkdir(parents=True)

        self.filename = str(directory / logFileName(name))
        return RotatingFileHandler(self.filename, maxBytes=config.MaxFileSize, backupCount=config.MaxFileCount)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _astrotimeLog(message: str, level: int):
    """Record `message` at `level` on the package logger, setting it up on first use."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        Logger(ROOT_LOGGER_NAME)
    logger.log(level, message)


def astrotimeLogCritical(message: str):
    """Log a CRITICAL message to the package logger."""
    _astrotimeLog(message, logging.CRITICAL)


def astrotimeLogError(message: str):
    """Log an ERROR message to the package logger.

    Loaders and constructors call this right before raising, so failures are traceable in the
    log files.
    """
    _astrotimeLog(message, logging.ERROR)


def astrotimeLogWarning(message: str):
    """Log a WARNING message to the package logger."""
    _astrotimeLog(message, logging.WARNING)


def astrotimeLogInfo(message: str):
    """Log an INFO message to the package logger."""
    _astrotimeLog(message, logging.INFO)


def astrotimeLogDebug(message: str):
    """Log a DEBUG message to the package logger."""
    _astrotimeLog(message, logging.DEBUG)
