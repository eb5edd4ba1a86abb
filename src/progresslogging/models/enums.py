"""progresslogging enumerations."""

from enum import Enum


class ProgressState(str, Enum):
    """State of a task as seen through one progress record."""

    INDETERMINATE = "indeterminate"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    def is_terminal(self) -> bool:
        """Check if the state ends the task."""
        return self is ProgressState.DONE
