"""progresslogging - structured progress events over the logging channel."""

__version__ = "0.1.0"

from progresslogging.config import Settings, settings
from progresslogging.engine import (
    CORRELATION_FIELD,
    BreakLoop,
    InvalidLoopError,
    InvalidProgressValue,
    NoActiveScopeError,
    ProgressLoggingError,
    ProgressLoop,
    ProgressMessage,
    ProgressScope,
    ScopeStateError,
    UnsupportedOptionError,
    call_with_progress,
    current_id,
    current_scope,
    drive,
    emit,
    enter_scope,
    exit_scope,
    legacy_progress_value,
    log_progress,
    progress_map,
    with_progress,
)
from progresslogging.identity import PROGRESS_NAMESPACE, ROOT_ID, as_uuid, derive_id, new_id
from progresslogging.models import Progress, ProgressState
from progresslogging.monitor import ProgressMonitor, as_progress
from progresslogging.observability import PROGRESS, configure_logging, get_progress_logger

__all__ = [
    "BreakLoop",
    "CORRELATION_FIELD",
    "InvalidLoopError",
    "InvalidProgressValue",
    "NoActiveScopeError",
    "PROGRESS",
    "PROGRESS_NAMESPACE",
    "Progress",
    "ProgressLoggingError",
    "ProgressLoop",
    "ProgressMessage",
    "ProgressMonitor",
    "ProgressScope",
    "ProgressState",
    "ROOT_ID",
    "ScopeStateError",
    "Settings",
    "UnsupportedOptionError",
    "as_progress",
    "as_uuid",
    "call_with_progress",
    "configure_logging",
    "current_id",
    "current_scope",
    "derive_id",
    "drive",
    "emit",
    "enter_scope",
    "exit_scope",
    "get_progress_logger",
    "legacy_progress_value",
    "log_progress",
    "new_id",
    "progress_map",
    "settings",
    "with_progress",
]
