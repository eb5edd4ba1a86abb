"""Progress monitor - consumer side of the progress log protocol."""

import logging
import math
from contextlib import contextmanager
from numbers import Real
from typing import Iterator, Optional
from uuid import UUID

from progresslogging.engine.emitter import CORRELATION_FIELD, ProgressMessage
from progresslogging.identity import ROOT_ID, as_uuid, derive_id
from progresslogging.models import Progress
from progresslogging.observability.levels import PROGRESS

_MISSING = object()


def as_progress(record: logging.LogRecord) -> Optional[Progress]:
    """Recover a Progress from a log record, or None if it is not one.

    Records logged by progresslogging carry the Progress on their message.
    Plain log calls are read through the flat protocol: a ``progress``
    field (None/NaN, a number, or "done"), the id from ``_id`` and the
    name from the message. Without ``_id`` the call site is the identity.
    """
    if isinstance(record.msg, ProgressMessage):
        return record.msg.progress

    value = getattr(record, "progress", _MISSING)
    if value is _MISSING or isinstance(value, bool):
        return None
    if isinstance(value, str):
        if value != "done":
            return None
        fraction, done = None, True
    elif value is None:
        fraction, done = None, False
    elif isinstance(value, Real):
        fraction, done = float(value), False
        if math.isnan(fraction):
            fraction = None
    else:
        return None

    key = getattr(record, CORRELATION_FIELD, None)
    if key is None:
        progress_id = derive_id(f"{record.pathname}:{record.lineno}")
    else:
        progress_id = as_uuid(key)
    return Progress(
        id=progress_id,
        parent_id=ROOT_ID,
        fraction=fraction,
        name=record.getMessage(),
        done=done,
    )


class ProgressMonitor(logging.Handler):
    """Logging handler that keeps the latest record of every task.

    Finished tasks are forgotten on their ``done`` record unless
    ``retain_done`` is set.
    """

    def __init__(self, level: int = PROGRESS, retain_done: bool = False):
        super().__init__(level)
        self.retain_done = retain_done
        self._latest: dict[UUID, Progress] = {}

    def emit(self, record: logging.LogRecord) -> None:
        try:
            progress = as_progress(record)
        except Exception:
            self.handleError(record)
            return
        if progress is None:
            return
        if progress.done and not self.retain_done:
            self._latest.pop(progress.id, None)
        else:
            self._latest[progress.id] = progress

    def get(self, progress_id: UUID) -> Optional[Progress]:
        self.acquire()
        try:
            return self._latest.get(progress_id)
        finally:
            self.release()

    def snapshot(self) -> list[Progress]:
        """All known records, in order of first appearance."""
        self.acquire()
        try:
            return list(self._latest.values())
        finally:
            self.release()

    def active(self) -> list[Progress]:
        return [p for p in self.snapshot() if not p.done]

    def children(self, parent_id: UUID) -> list[Progress]:
        return [p for p in self.snapshot() if p.parent_id == parent_id]

    def roots(self) -> list[Progress]:
        return self.children(ROOT_ID)

    def clear(self) -> None:
        self.acquire()
        try:
            self._latest.clear()
        finally:
            self.release()

    @contextmanager
    def watching(self, logger: logging.Logger) -> Iterator["ProgressMonitor"]:
        """Attach to ``logger`` and let progress records through while active."""
        previous_level = logger.level
        if logger.getEffectiveLevel() > self.level:
            logger.setLevel(self.level)
        logger.addHandler(self)
        try:
            yield self
        finally:
            logger.removeHandler(self)
            logger.setLevel(previous_level)
