"""HTTP view of progress tracked in this process."""

from progresslogging.api.router import router

__all__ = ["router"]
