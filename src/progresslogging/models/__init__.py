"""progresslogging data models."""

from progresslogging.models.enums import ProgressState
from progresslogging.models.progress import Progress

__all__ = ["Progress", "ProgressState"]
