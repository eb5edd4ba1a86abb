"""progresslogging monitor application."""

import logging
from typing import Optional

from fastapi import FastAPI

from progresslogging import __version__
from progresslogging.api import router
from progresslogging.monitor import ProgressMonitor

logger = logging.getLogger(__name__)


def create_app(monitor: Optional[ProgressMonitor] = None) -> FastAPI:
    """Build a FastAPI app serving ``monitor`` (a new one if not given).

    The monitor only sees records of loggers it is attached to, e.g.
    ``logging.getLogger("progresslogging").addHandler(app.state.monitor)``.
    """
    app = FastAPI(
        title="progresslogging",
        description="Read-only view of in-process progress records",
        version=__version__,
    )
    app.state.monitor = monitor if monitor is not None else ProgressMonitor()
    app.include_router(router)
    logger.debug("Progress monitor app created")
    return app
