"""progresslogging engine errors."""

from typing import Any, Iterable


class ProgressLoggingError(Exception):
    """Base error for progresslogging operations."""

    def __init__(self, message: str, code: str = "PROGRESSLOGGING_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NoActiveScopeError(ProgressLoggingError):
    """Progress reported with no active scope and no explicit id."""

    def __init__(self):
        super().__init__(
            "log_progress must be used inside with_progress() or given progress_id",
            "NO_ACTIVE_SCOPE",
        )


class UnsupportedOptionError(ProgressLoggingError):
    """Unknown option passed when creating a scope."""

    def __init__(self, options: Iterable[str], supported: Iterable[str]):
        self.options = sorted(options)
        self.supported = list(supported)
        super().__init__(
            f"Unsupported optional arguments: {', '.join(self.options)}. "
            f"with_progress supports only the following keyword arguments: {', '.join(self.supported)}",
            "UNSUPPORTED_OPTION",
        )


class InvalidProgressValue(ProgressLoggingError):
    """Progress value is not a number, None/NaN or "done"."""

    def __init__(self, value: Any):
        super().__init__(
            f'Invalid progress value {value!r}: expected a real number, None, NaN or "done"',
            "INVALID_PROGRESS_VALUE",
        )
        self.value = value


class ScopeStateError(ProgressLoggingError):
    """Scope or loop used outside its lifecycle."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_SCOPE_STATE")


class InvalidLoopError(ProgressLoggingError):
    """Loop arguments do not describe an iteration space."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_LOOP")


class BreakLoop(Exception):
    """Raised from a drive() body to stop the loop early."""
