"""Publishing progress records through the logging channel.

A progress record is logged once per call at the PROGRESS level. The log
message is a ``ProgressMessage`` (a ``str`` carrying the record), and the
flat ``progress`` field keeps plain-text consumers working:

    indeterminate -> None
    in progress   -> the fraction
    done          -> "done"

The flat field alone cannot tell "not started" from "indeterminate"; the
attached record can.
"""

import logging
from typing import Any, Optional, Union

from progresslogging.models import Progress
from progresslogging.observability.levels import PROGRESS, get_progress_logger

# Field that repeats the record id for consumers matching on message identity.
CORRELATION_FIELD = "_id"
FIELDS_ATTRIBUTE = "progress_fields"

_RESERVED_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime", FIELDS_ATTRIBUTE}


class ProgressMessage(str):
    """Log message text (the record name) with the structured record attached."""

    progress: Progress

    def __new__(cls, progress: Progress) -> "ProgressMessage":
        message = super().__new__(cls, progress.name)
        message.progress = progress
        return message

    def __reduce__(self):
        return (ProgressMessage, (self.progress,))

    def __repr__(self) -> str:
        return f"ProgressMessage({self.progress!r})"


def legacy_progress_value(record: Progress) -> Union[float, str, None]:
    """Flat ``progress`` field value for ``record``."""
    if record.done:
        return "done"
    return record.fraction


def emit(
    record: Progress,
    logger: Optional[logging.Logger] = None,
    level: Optional[int] = None,
    **fields: Any,
) -> Progress:
    """Log ``record`` once; caller fields override computed ones."""
    logger = logger or get_progress_logger()
    payload: dict[str, Any] = {
        "progress": legacy_progress_value(record),
        CORRELATION_FIELD: record.id,
    }
    payload.update(fields)

    extra = {key: value for key, value in payload.items() if key not in _RESERVED_ATTRIBUTES}
    extra[FIELDS_ATTRIBUTE] = payload

    logger.log(PROGRESS if level is None else level, ProgressMessage(record), extra=extra)
    return record
