"""Logging channel helpers for progresslogging."""

from progresslogging.observability.levels import (
    PROGRESS,
    configure_logging,
    get_progress_logger,
    resolve_level,
)

__all__ = ["PROGRESS", "configure_logging", "get_progress_logger", "resolve_level"]
