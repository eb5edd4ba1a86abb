"""Progress identifiers.

Every task reported through progresslogging is identified by a UUID.
Fresh identities come from ``uuid4``; identities for caller-supplied keys
(loop indices, ad hoc ``_id`` fields from plain log calls) are derived with
``uuid5`` under a fixed namespace so the same key always maps to the same id.
"""

from typing import Any
from uuid import UUID, uuid4, uuid5

# Parent of every top-level progress.
ROOT_ID = UUID(int=0)

PROGRESS_NAMESPACE = UUID("1e962757-ea70-431a-b9f6-aadf988dcb7f")


def new_id() -> UUID:
    """Return a freshly allocated random identifier."""
    return uuid4()


def derive_id(key: Any) -> UUID:
    """Return the stable identifier for ``key``.

    Keys are compared by their string form, so ``derive_id(3)`` and
    ``derive_id("3")`` agree.
    """
    return uuid5(PROGRESS_NAMESPACE, str(key))


def as_uuid(value: Any) -> UUID:
    """Return ``value`` if it is already a UUID, else its derived identifier."""
    if isinstance(value, UUID):
        return value
    return derive_id(value)
