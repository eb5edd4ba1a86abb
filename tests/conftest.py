"""
Pytest fixtures for progresslogging tests.
"""

import logging
import os

import pytest

# Ensure test config is set before importing progresslogging modules.
os.environ.setdefault("PROGRESSLOGGING_LOGGER_NAME", "progresslogging")
os.environ.setdefault("PROGRESSLOGGING_LOG_LEVEL", "WARNING")

from progresslogging import PROGRESS, ProgressMonitor, get_progress_logger


class CapturingHandler(logging.Handler):
    """Collects every record it handles."""

    def __init__(self, level: int = PROGRESS):
        super().__init__(level)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def progress_logger():
    """Default progress logger with the progress level enabled."""
    logger = get_progress_logger()
    previous = logger.level
    logger.setLevel(PROGRESS)
    yield logger
    logger.setLevel(previous)


@pytest.fixture
def captured(progress_logger):
    """Log records emitted on the progress logger during the test."""
    handler = CapturingHandler()
    progress_logger.addHandler(handler)
    yield handler.records
    progress_logger.removeHandler(handler)


@pytest.fixture
def monitor(progress_logger):
    """Monitor attached to the progress logger."""
    with ProgressMonitor().watching(progress_logger) as monitor:
        yield monitor
