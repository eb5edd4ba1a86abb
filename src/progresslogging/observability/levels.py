"""Progress severity level and logging setup."""

import logging
from typing import Optional, Union

from progresslogging.config import settings

PROGRESS = settings.progress_level
logging.addLevelName(PROGRESS, "PROGRESS")


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as ``"progress"`` or ``"INFO"`` into its number."""
    if isinstance(level, int):
        return level
    name = level.upper()
    if name == "PROGRESS":
        return PROGRESS
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def get_progress_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger progress records go to by default."""
    return logging.getLogger(name or settings.logger_name)


def configure_logging(level: Union[int, str, None] = None, fmt: Optional[str] = None) -> None:
    """Configure root logging for applications that report progress.

    Pass ``level="PROGRESS"`` to see progress records on the console.
    """
    logging.basicConfig(
        level=resolve_level(level if level is not None else settings.log_level),
        format=fmt or settings.log_format,
    )
