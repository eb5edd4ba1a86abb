"""
Configuration tests.
"""

import logging

import pytest
from pydantic import ValidationError

from progresslogging import PROGRESS, Settings, configure_logging
from progresslogging.observability import resolve_level


def test_defaults():
    config = Settings()
    assert config.logger_name == "progresslogging"
    assert config.progress_level == logging.INFO - 1
    assert config.threshold == 0.005
    assert config.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROGRESSLOGGING_THRESHOLD", "0.1")
    monkeypatch.setenv("PROGRESSLOGGING_LOG_LEVEL", "progress")
    config = Settings()
    assert config.threshold == 0.1
    assert config.log_level == "PROGRESS"


@pytest.mark.parametrize(
    "field, value",
    [
        ("progress_level", logging.INFO),
        ("progress_level", 0),
        ("threshold", 1.0),
        ("threshold", -0.01),
        ("log_level", "LOUD"),
    ],
)
def test_invalid_settings(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_resolve_level():
    assert resolve_level("progress") == PROGRESS
    assert resolve_level("INFO") == logging.INFO
    assert resolve_level(5) == 5
    with pytest.raises(ValueError):
        resolve_level("LOUD")


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("progress")

    assert calls == [
        {"level": PROGRESS, "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"}
    ]
