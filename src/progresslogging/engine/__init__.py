"""progresslogging engine - scopes, emission and loop driving."""

from progresslogging.engine.emitter import (
    CORRELATION_FIELD,
    ProgressMessage,
    emit,
    legacy_progress_value,
)
from progresslogging.engine.errors import (
    BreakLoop,
    InvalidLoopError,
    InvalidProgressValue,
    NoActiveScopeError,
    ProgressLoggingError,
    ScopeStateError,
    UnsupportedOptionError,
)
from progresslogging.engine.loop import ProgressLoop, drive, progress_map
from progresslogging.engine.scope import (
    ProgressScope,
    call_with_progress,
    current_id,
    current_scope,
    enter_scope,
    exit_scope,
    log_progress,
    with_progress,
)

__all__ = [
    "BreakLoop",
    "CORRELATION_FIELD",
    "InvalidLoopError",
    "InvalidProgressValue",
    "NoActiveScopeError",
    "ProgressLoggingError",
    "ProgressLoop",
    "ProgressMessage",
    "ProgressScope",
    "ScopeStateError",
    "UnsupportedOptionError",
    "call_with_progress",
    "current_id",
    "current_scope",
    "drive",
    "emit",
    "enter_scope",
    "exit_scope",
    "legacy_progress_value",
    "log_progress",
    "progress_map",
    "with_progress",
]
