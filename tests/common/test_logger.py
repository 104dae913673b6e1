from __future__ import annotations

# Standard Library Imports
import logging
from datetime import datetime
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# astrotime Imports
from astrotime.common.logger import (
    ROOT_LOGGER_NAME,
    Logger,
    astrotimeLogCritical,
    astrotimeLogDebug,
    astrotimeLogError,
    astrotimeLogInfo,
    astrotimeLogWarning,
    logFileName,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path


CORRECT_OUTPUT: list[list[str | int]] = [
    ["test", logging.DEBUG, "This is a debug message."],
    ["test", logging.INFO, "This is an info message."],
    ["test", logging.WARNING, "This is a warning message."],
    ["test", logging.ERROR, "This is an error message."],
    ["test", logging.CRITICAL, "This is a critical message."],
]

CORRECT_FILE_OUTPUT: list[list[str]] = [
    ["test_logger", "DEBUG", "This is a debug message.\n"],
    ["test_logger", "INFO", "This is an info message.\n"],
    ["test_logger", "WARNING", "This is a warning message.\n"],
    ["test_logger", "ERROR", "This is an error message.\n"],
    ["test_logger", "CRITICAL", "This is a critical message.\n"],
]


def testStdout(caplog: pytest.LogCaptureFixture):
    """Test the logger's output to `sys.stdout`."""
    logger = Logger("test")
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warning("This is a warning message.")
    logger.error("This is an error message.")
    logger.critical("This is a critical message.")

    assert logger.filename == "stdout"
    assert [list(record) for record in caplog.record_tuples] == CORRECT_OUTPUT


def testLogfile(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Test the logger's output to a logfile."""
    monkeypatch.chdir(tmp_path)
    file_logger = Logger("logfile-test", path="logs/")

    file_logger.debug("This is a debug message.")
    file_logger.info("This is an info message.")
    file_logger.warning("This is a warning message.")
    file_logger.error("This is an error message.")
    file_logger.critical("This is a critical message.")

    with open(file_logger.filename, encoding="utf-8") as logfile:
        lines = [line.split(" - ")[1:] for line in logfile]

    assert lines == CORRECT_FILE_OUTPUT


@pytest.mark.parametrize(
    ("log_func", "level"),
    [
        (astrotimeLogDebug, logging.DEBUG),
        (astrotimeLogInfo, logging.INFO),
        (astrotimeLogWarning, logging.WARNING),
        (astrotimeLogError, logging.ERROR),
        (astrotimeLogCritical, logging.CRITICAL),
    ],
)
def testPackageLogHelpers(caplog: pytest.LogCaptureFixture, log_func, level: int):
    """Test the one-line helpers report to the package logger at the right level."""
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        log_func("Helper message.")

    assert caplog.record_tuples == [(ROOT_LOGGER_NAME, level, "Helper message.")]


def testPackageLoggerConfigured():
    """Test the first helper call attaches a handler to the package logger."""
    astrotimeLogDebug("Configure the package logger.")
    assert logging.getLogger(ROOT_LOGGER_NAME).handlers


def testLogFileName():
    """Test log file names carry a path safe timestamp."""
    stamp = datetime(2017, 1, 1, 12, 30, 5, 250)
    assert logFileName("astrotime", stamp) == "astrotime_2017-01-01T12-30-05000250.log"
    assert ":" not in logFileName("astrotime")
