"""API dependencies."""

from fastapi import Request

from progresslogging.monitor import ProgressMonitor


def get_monitor(request: Request) -> ProgressMonitor:
    """Monitor attached to the application by create_app()."""
    return request.app.state.monitor
